# wurdle_keys.py
# Browser-side key handler: forwards each keystroke to the hidden input as its own edit

import json

from wurdle_config import COMMIT_KEY, FOCUS_DELAY_MS, INPUT_LABEL

# Guard flag on the parent document; the component is re-rendered on every rerun
INSTALLED_FLAG = "__wurdleKeys"


def key_handler_script(label: str = INPUT_LABEL, commit_key: str = COMMIT_KEY,
                       focus_delay_ms: int = FOCUS_DELAY_MS) -> str:
    """JS for components.html.

    Printable keys and Backspace are applied to the raw buffer and sent one
    at a time (the server normalizes each edit). Enter and focus loss click
    the hidden commit button.
    """
    return """
    <script>
    (function(){
      const doc = window.parent.document;
      const win = window.parent;
      const LABEL = %(label)s;
      const COMMIT_CLASS = %(commit_class)s;

      function getInput(){
        try {
          return doc.querySelector('input[aria-label="' + LABEL + '"]');
        } catch(e){ return null; }
      }
      function focusInput(){
        const inp = getInput(); if(!inp) return;
        inp.setAttribute('autocapitalize', 'characters');
        inp.setAttribute('autocorrect', 'off');
        inp.setAttribute('spellcheck', 'false');
        inp.style.caretColor = 'transparent';
        if (doc.activeElement !== inp) inp.focus();
      }

      setTimeout(focusInput, %(delay)d);

      if (doc[%(flag)s]) return;
      doc[%(flag)s] = true;

      function sendEdit(v){
        const inp = getInput(); if(!inp) return;
        // React ignores plain .value writes; go through the native setter
        const setter = Object.getOwnPropertyDescriptor(win.HTMLInputElement.prototype, 'value').set;
        setter.call(inp, v);
        inp.dispatchEvent(new Event('input', { bubbles: true }));
        const opts = { key: 'Enter', code: 'Enter', keyCode: 13, which: 13, bubbles: true };
        inp.dispatchEvent(new KeyboardEvent('keydown', opts));
        inp.dispatchEvent(new KeyboardEvent('keypress', opts));
      }
      function commit(){
        let btn = doc.querySelector('.' + COMMIT_CLASS + ' button');
        if (!btn) {
          btn = Array.from(doc.querySelectorAll('button')).find(b => b.innerText.trim() === 'Enter');
        }
        if (btn) btn.click();
      }

      doc.addEventListener('keydown', function(e){
        // synthetic Enter from sendEdit passes straight through to streamlit
        if (!e.isTrusted) return;
        const inp = getInput(); if(!inp) return;
        const active = doc.activeElement;
        const typingElsewhere = active && active !== inp && (active.tagName === 'INPUT' || active.tagName === 'TEXTAREA' || active.isContentEditable);
        if (typingElsewhere || e.ctrlKey || e.metaKey || e.altKey) return;

        if (e.key === 'Enter') {
          e.preventDefault(); e.stopPropagation();
          commit();
        } else if (e.key === 'Backspace') {
          e.preventDefault(); e.stopPropagation();
          sendEdit(inp.value.slice(0, -1));
        } else if (e.key.length === 1) {
          e.preventDefault(); e.stopPropagation();
          sendEdit(inp.value + e.key);
        }
      }, true);

      // a paste is one edit, truncated then filtered as a whole on the server
      doc.addEventListener('paste', function(e){
        const inp = getInput();
        if (!inp || e.target !== inp) return;
        setTimeout(function(){ sendEdit(inp.value); }, 0);
      }, true);

      doc.addEventListener('focusout', function(e){
        const inp = getInput();
        if (!inp || e.target !== inp) return;
        commit();
        setTimeout(focusInput, 50);
      }, true);

      doc.addEventListener('click', function(){
        setTimeout(focusInput, 50);
      });
    })();
    </script>
    """ % {
        "label": json.dumps(label),
        "commit_class": json.dumps("st-key-" + commit_key),
        "delay": focus_delay_ms,
        "flag": json.dumps(INSTALLED_FLAG),
    }
