"""
Connect 4 grid helpers.

Board representation:
- height rows x width columns (default 6 x 7)
- row 0 is the top of the board
- 0 = empty
- 1 / 2 = the id of the player owning the cell

These functions only read or allocate grids. Writing pieces is the engine's
job, so every cell write goes through one place.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

DEFAULT_ROWS = 6
DEFAULT_COLS = 7
WIN_LENGTH = 4
EMPTY = 0

# (dr, dc) for horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
)

Cell = Tuple[int, int]


def make_board(height: int = DEFAULT_ROWS, width: int = DEFAULT_COLS) -> np.ndarray:
    """Create an empty board of shape (height, width)."""
    return np.zeros((height, width), dtype=np.int8)


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def lowest_empty_row(board: np.ndarray, col: int) -> Optional[int]:
    """
    Return the lowest empty row in a column, or None.

    None is returned both for a full column and for a column index outside
    the board, so negative indices never wrap around.
    """
    rows, cols = board.shape
    if col < 0 or col >= cols:
        return None

    for row in range(rows - 1, -1, -1):
        if board[row, col] == EMPTY:
            return row
    return None


def _line(r: int, c: int, dr: int, dc: int) -> list[Cell]:
    return [(r + i * dr, c + i * dc) for i in range(WIN_LENGTH)]


def _check_line(board: np.ndarray, cells: list[Cell], player: int) -> bool:
    """True if every cell is on the board and owned by player."""
    for r, c in cells:
        if not in_bounds(board, r, c):
            return False
        if board[r, c] != player:
            return False
    return True


def find_winning_line(board: np.ndarray, player: int) -> Optional[list[Cell]]:
    """
    Scan every anchor cell for a line of WIN_LENGTH owned by player.

    Anchors are visited in row-major order and each anchor tries all four
    directions. Returns the first winning line found, or None.
    """
    rows, cols = board.shape
    for r in range(rows):
        for c in range(cols):
            for dr, dc in DIRECTIONS:
                cells = _line(r, c, dr, dc)
                if _check_line(board, cells, player):
                    return cells
    return None


def has_winner(board: np.ndarray, player: int) -> bool:
    """Check if the given player has 4 in a row."""
    return find_winning_line(board, player) is not None


def is_full(board: np.ndarray) -> bool:
    return not np.any(board == EMPTY)


def open_columns(board: np.ndarray) -> list[int]:
    """Return columns whose top cell is empty."""
    return [c for c in range(board.shape[1]) if board[0, c] == EMPTY]


def render(board: np.ndarray, symbols: Optional[dict[int, str]] = None) -> str:
    """
    Render the board as ASCII art.

    Default symbols:
    - '.' = empty
    - 'X' = player 1
    - 'O' = player 2
    """
    if symbols is None:
        symbols = {EMPTY: ".", 1: "X", 2: "O"}

    rows, cols = board.shape
    lines = []
    lines.append(" " + " ".join(str(i) for i in range(cols)))
    lines.append("-" * (cols * 2 + 1))

    for r in range(rows):
        row_str = "|" + "|".join(symbols[int(board[r, c])] for c in range(cols)) + "|"
        lines.append(row_str)

    lines.append("-" * (cols * 2 + 1))
    return "\n".join(lines)
