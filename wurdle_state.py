# wurdle_state.py
# Guess buffer + committed history for Wurdle

import logging
from typing import Callable, List, Tuple

from wurdle_config import LOGGER_NAME, MAX_GUESSES, WORD_LENGTH

logger = logging.getLogger(LOGGER_NAME)

# ============================ Utilities ============================

def normalize_guess(raw, length: int = WORD_LENGTH) -> str:
    """Trim to `length` from the end, then keep only letters.

    Order matters: truncation happens before filtering, so an overlong
    string loses its tail even if that tail was valid letters.
    """
    if not isinstance(raw, str):
        return ""
    s = raw
    while len(s) > length:
        s = s[:-1]
    return "".join(ch for ch in s if ch.isalpha())

# ============================ State ============================

class GuessState:
    """Current in-progress guess and the list of committed guesses."""

    def __init__(self):
        self._current_guess = ""
        self._history: List[str] = []
        self._listeners: List[Callable[["GuessState"], None]] = []

    @property
    def current_guess(self) -> str:
        return self._current_guess

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    @property
    def is_full(self) -> bool:
        return len(self._history) >= MAX_GUESSES

    def subscribe(self, callback: Callable[["GuessState"], None]) -> Callable[[], None]:
        """Call `callback(state)` after every change; returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def set_current_guess(self, raw) -> None:
        cleaned = normalize_guess(raw)
        if isinstance(raw, str) and cleaned != raw:
            logger.debug("Normalized guess %r -> %r", raw, cleaned)
        if cleaned == self._current_guess:
            return
        self._current_guess = cleaned
        self._notify()

    def commit_if_complete(self) -> bool:
        """Move a full-length guess into history. Partial guesses stay put."""
        if len(self._current_guess) != WORD_LENGTH:
            return False
        self._history.append(self._current_guess)
        self._current_guess = ""
        logger.info("Committed guess #%d: %s", len(self._history), self._history[-1])
        self._notify()
        return True

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)
