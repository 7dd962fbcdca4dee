"""Game module - Connect 4 board, engine and session."""

from .board import (
    DEFAULT_ROWS,
    DEFAULT_COLS,
    WIN_LENGTH,
    EMPTY,
)

from .engine import (
    Player,
    Status,
    GameState,
    MoveResult,
    start_game,
    find_spot_for_column,
    drop_piece,
    check_for_win,
    winning_line,
    is_board_full,
    legal_columns,
    render,
)

from .events import (
    Event,
    Rejected,
    Placed,
    Continue,
    Won,
    Tied,
)

from .session import GameSession

__all__ = [
    "DEFAULT_ROWS",
    "DEFAULT_COLS",
    "WIN_LENGTH",
    "EMPTY",
    "Player",
    "Status",
    "GameState",
    "MoveResult",
    "start_game",
    "find_spot_for_column",
    "drop_piece",
    "check_for_win",
    "winning_line",
    "is_board_full",
    "legal_columns",
    "render",
    "Event",
    "Rejected",
    "Placed",
    "Continue",
    "Won",
    "Tied",
    "GameSession",
]
