# wurdle_config.py
# Shared constants and logging setup for Wurdle

import logging
import os

# ============================ Board ============================

WORD_LENGTH = 5
MAX_GUESSES = 6
BLANK = " "

# ============================ Page ============================

PAGE_TITLE = "Wurdle"
FOCUS_DELAY_MS = 250

# session_state keys
STATE_KEY = "guess_state"
GRID_KEY = "last_grid"
INPUT_KEY = "raw_guess"
INPUT_LABEL = "Hidden typing input"
COMMIT_KEY = "commit_guess"

# ============================ Logging ============================

LOGGER_NAME = "wurdle"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None) -> logging.Logger:
    """Attach a stream handler to the wurdle logger once.

    Level comes from the argument, then WURDLE_LOG_LEVEL, then INFO.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = os.environ.get("WURDLE_LOG_LEVEL", "INFO")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
