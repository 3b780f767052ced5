# wurdle_streamlit_app.py
# Wurdle: type 5-letter guesses into a hidden field, watch them fill the board
# Run: streamlit run wurdle_streamlit_app.py

import html
import logging

import streamlit as st
import streamlit.components.v1 as components

from wurdle_config import (
    COMMIT_KEY,
    GRID_KEY,
    INPUT_KEY,
    INPUT_LABEL,
    LOGGER_NAME,
    MAX_GUESSES,
    PAGE_TITLE,
    STATE_KEY,
    WORD_LENGTH,
    configure_logging,
)
from wurdle_grid import derive_grid, fill_transitions, is_filled
from wurdle_keys import key_handler_script
from wurdle_state import GuessState

st.set_page_config(page_title=PAGE_TITLE, layout="centered")
configure_logging()
logger = logging.getLogger(LOGGER_NAME)

# ============================ State ============================

def _log_current_row(state: GuessState):
    logger.debug("Row %d now %r", len(state.history), state.current_guess)

def init_state():
    state = GuessState()
    state.subscribe(_log_current_row)
    st.session_state[STATE_KEY] = state
    st.session_state[GRID_KEY] = None
    logger.info("New Wurdle session")

if STATE_KEY not in st.session_state:
    init_state()

def on_guess_edit():
    """One edit of the hidden field (a keystroke from the key handler, or a paste)."""
    state = st.session_state[STATE_KEY]
    state.set_current_guess(st.session_state.get(INPUT_KEY, ""))
    # Widget mirrors the normalized buffer
    st.session_state[INPUT_KEY] = state.current_guess

def on_commit():
    """Enter or focus loss."""
    state = st.session_state[STATE_KEY]
    state.commit_if_complete()
    st.session_state[INPUT_KEY] = state.current_guess

# ============================ Styles ============================

st.markdown(
    f"""
    <style>
      .title {{text-align:center; font-weight:800; font-size:2.4rem; margin: 0.2rem 0 0.2rem; letter-spacing:0.05em;}}
      .rule {{height:1px; background:#9ca3af; margin: 0 0 0.6rem;}}

      .board {{display:grid; grid-template-columns: repeat({WORD_LENGTH}, 60px); gap:8px; justify-content:center; margin: 12px 0 14px;}}
      .tile {{height:60px; width:60px; border-radius:4px; display:flex; align-items:center; justify-content:center;
             font-size:2rem; font-weight:900; text-transform:uppercase; color:#111827;
             border:2px solid rgba(156,163,175,0.3); background:transparent;}}
      .filled {{border-color:#000;}}
      .pop {{animation: pop 0.25s ease-out;}}
      @keyframes pop {{
        from {{transform: scale(1.2); border-color: rgba(0,0,0,0);}}
        to   {{transform: scale(1);}}
      }}

      /* Hide input + commit button visually but keep them functional */
      .stTextInput > div > div > input, .st-key-{COMMIT_KEY} {{
        position: fixed !important;
        top: -200px !important;
        left: -200px !important;
        opacity: 0.01 !important;
        pointer-events: none !important;
      }}
    </style>
    """,
    unsafe_allow_html=True,
)

# ============================ Header ============================

st.markdown(f'<div class="title">{PAGE_TITLE.upper()}</div><div class="rule"></div>',
            unsafe_allow_html=True)

# ============================ Hidden Input ============================

st.text_input(
    INPUT_LABEL,
    key=INPUT_KEY,
    on_change=on_guess_edit,
    placeholder="Word",
    autocomplete="off",
    label_visibility="collapsed",
)
st.button("Enter", key=COMMIT_KEY, on_click=on_commit)

# ============================ Board ============================

state: GuessState = st.session_state[STATE_KEY]
grid = derive_grid(state.history, state.current_guess)
changes = fill_transitions(st.session_state[GRID_KEY], grid)
st.session_state[GRID_KEY] = grid

tiles_html = []
for r in range(MAX_GUESSES):
    for c in range(WORD_LENGTH):
        ch = grid[r][c]
        css = ["tile"]
        if is_filled(ch):
            css.append("filled")
        if changes[r][c] == "fill":
            css.append("pop")
        val = html.escape(ch) if is_filled(ch) else "&nbsp;"
        tiles_html.append(f"<div class='{' '.join(css)}' id='tile-{r}-{c}'>{val}</div>")

st.markdown("<div class='board'>" + "".join(tiles_html) + "</div>", unsafe_allow_html=True)

if state.is_full:
    st.caption("No rows left on the board.")

# ======================= Type-anywhere key handler =======================

components.html(key_handler_script(), height=0)
