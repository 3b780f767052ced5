import os

import pytest
from streamlit.testing.v1 import AppTest

from wurdle_config import COMMIT_KEY, INPUT_KEY, STATE_KEY

APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                        "wurdle_streamlit_app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def board_html(at):
    return next(m.value for m in at.markdown if "class='board'" in m.value)


def type_keys(at, keys):
    """Send each key as its own edit, the way the browser key handler does."""
    for ch in keys:
        field = at.text_input(key=INPUT_KEY)
        field.input(field.value + ch).run()
        assert not at.exception


def backspace(at):
    field = at.text_input(key=INPUT_KEY)
    field.input(field.value[:-1]).run()


def press_enter(at):
    at.button(key=COMMIT_KEY).click().run()
    assert not at.exception


def test_starts_empty(app):
    state = app.session_state[STATE_KEY]
    assert state.history == ()
    assert state.current_guess == ""
    assert "class='tile filled" not in board_html(app)


def test_header_is_uppercase(app):
    assert any("WURDLE" in m.value for m in app.markdown)


def test_typed_guess_is_committed_on_enter(app):
    type_keys(app, "HELLO")
    assert app.session_state[STATE_KEY].history == ()
    press_enter(app)
    state = app.session_state[STATE_KEY]
    assert state.history == ("HELLO",)
    assert state.current_guess == ""
    assert app.text_input(key=INPUT_KEY).value == ""
    assert "id='tile-0-0'>H<" in board_html(app)


def test_keystrokes_are_normalized_one_at_a_time(app):
    # "1" is dropped as it is typed, so the later "O" still fits
    type_keys(app, "HEL1LO")
    assert app.session_state[STATE_KEY].current_guess == "HELLO"
    press_enter(app)
    assert app.session_state[STATE_KEY].history == ("HELLO",)


def test_sixth_letter_is_dropped(app):
    type_keys(app, "WORLDS")
    assert app.session_state[STATE_KEY].current_guess == "WORLD"
    assert app.text_input(key=INPUT_KEY).value == "WORLD"


def test_partial_guess_survives_enter(app):
    type_keys(app, "HI")
    press_enter(app)
    state = app.session_state[STATE_KEY]
    assert state.history == ()
    assert state.current_guess == "HI"


def test_delete_then_retype_then_commit(app):
    type_keys(app, "HELLO")
    backspace(app)
    assert app.session_state[STATE_KEY].current_guess == "HELL"
    press_enter(app)
    assert app.session_state[STATE_KEY].history == ()
    assert app.session_state[STATE_KEY].current_guess == "HELL"
    type_keys(app, "P")
    press_enter(app)
    state = app.session_state[STATE_KEY]
    assert state.history == ("HELLP",)
    assert state.current_guess == ""


def test_only_the_new_letter_pops(app):
    type_keys(app, "HE")
    board = board_html(app)
    assert "class='tile filled' id='tile-0-0'>H<" in board
    assert "class='tile filled pop' id='tile-0-1'>E<" in board
    assert board.count(" pop'") == 1


def test_pasted_text_is_truncated_then_filtered(app):
    app.text_input(key=INPUT_KEY).input("A1B2C").run()
    state = app.session_state[STATE_KEY]
    assert state.current_guess == "ABC"
    assert app.text_input(key=INPUT_KEY).value == "ABC"

    app.text_input(key=INPUT_KEY).input("HEL1LO").run()
    assert app.session_state[STATE_KEY].current_guess == "HELL"
