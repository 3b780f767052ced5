# wurdle_grid.py
# Derives what each tile of the 6x5 board shows

from typing import List, Optional, Sequence

from wurdle_config import BLANK, MAX_GUESSES, WORD_LENGTH

Grid = List[List[str]]


def cell_char(row: int, col: int, history: Sequence[str], current_guess: str) -> str:
    """Letter at (row, col), or BLANK.

    Rows before len(history) come from history, the next row is the guess
    being typed, and anything below that is empty.
    """
    if row < len(history):
        s = history[row]
    elif row == len(history):
        s = current_guess
    else:
        return BLANK
    if col >= len(s):
        return BLANK
    return s[col]


def derive_grid(history: Sequence[str], current_guess: str,
                rows: int = MAX_GUESSES, cols: int = WORD_LENGTH) -> Grid:
    return [[cell_char(r, c, history, current_guess) for c in range(cols)]
            for r in range(rows)]


def is_filled(ch: str) -> bool:
    return not ch.isspace() if ch else False


def fill_transitions(previous: Optional[Grid], current: Grid) -> List[List[Optional[str]]]:
    """Per cell: 'fill' if it went blank -> letter, 'clear' for letter -> blank, else None.

    `previous` may be None (first render); it is treated as an all-blank board.
    """
    out = []
    for r, row in enumerate(current):
        out_row = []
        for c, ch in enumerate(row):
            before = BLANK
            if previous is not None and r < len(previous) and c < len(previous[r]):
                before = previous[r][c]
            was, now = is_filled(before), is_filled(ch)
            if now and not was:
                out_row.append("fill")
            elif was and not now:
                out_row.append("clear")
            else:
                out_row.append(None)
        out.append(out_row)
    return out
