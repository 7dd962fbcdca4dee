"""
Connect 4 game engine.

Rules:
- Two players alternate dropping pieces into a column
- A piece falls to the lowest empty row of that column
- First to get 4 in a row (horizontal, vertical, or diagonal) wins
- If the board fills up with no winner, it's a tie

The engine is a set of functions over a GameState the caller owns. Illegal
drops (game over, full column, column off the board) never raise; they come
back as a rejected MoveResult and leave the state untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from . import board as board_ops
from .board import DEFAULT_COLS, DEFAULT_ROWS, WIN_LENGTH, Cell
from .events import Continue, Event, Placed, Rejected, Tied, Won

logger = logging.getLogger(__name__)


class Status(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"

    def is_terminal(self) -> bool:
        return self in (Status.WON, Status.TIED)


@dataclass(frozen=True)
class Player:
    """A player. The color is only meaningful to whoever draws the board."""
    id: int
    name: str
    color: str


@dataclass
class GameState:
    """Mutable state of one game."""
    board: np.ndarray  # shape (height, width), dtype int8
    players: Tuple[Player, Player]
    current: Player
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    move_count: int = 0

    @property
    def height(self) -> int:
        return self.board.shape[0]

    @property
    def width(self) -> int:
        return self.board.shape[1]

    @property
    def game_is_over(self) -> bool:
        return self.status.is_terminal()

    def other(self, player: Player) -> Player:
        p1, p2 = self.players
        return p2 if player == p1 else p1


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single drop_piece call."""
    events: Tuple[Event, ...]
    status: Status
    player: Optional[Player] = None
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return not isinstance(self.events[0], Rejected)

    def to_dicts(self) -> list[dict]:
        return [event.to_dict() for event in self.events]


_REJECTED = (Rejected(),)


def start_game(
    color1: str,
    color2: str,
    width: int = DEFAULT_COLS,
    height: int = DEFAULT_ROWS,
) -> GameState:
    """
    Start a new game.

    Player 1 moves first. Colors are passed through untouched.
    """
    player1 = Player(id=1, name="Player1", color=color1)
    player2 = Player(id=2, name="Player2", color=color2)
    if min(width, height) < WIN_LENGTH:
        logger.warning("A %dx%d board cannot hold %d in a row", height, width, WIN_LENGTH)
    logger.debug("Starting %dx%d game", height, width)
    return GameState(
        board=board_ops.make_board(height, width),
        players=(player1, player2),
        current=player1,
    )


def find_spot_for_column(state: GameState, col: int) -> Optional[int]:
    """Return the row a piece dropped in col would land on, or None if full."""
    return board_ops.lowest_empty_row(state.board, col)


def check_for_win(state: GameState) -> bool:
    """Check whether the current player (the one who just moved) has 4 in a row."""
    return board_ops.has_winner(state.board, state.current.id)


def winning_line(state: GameState) -> Optional[list[Cell]]:
    """Cells of the current player's winning line, if there is one."""
    return board_ops.find_winning_line(state.board, state.current.id)


def is_board_full(state: GameState) -> bool:
    return board_ops.is_full(state.board)


def legal_columns(state: GameState) -> list[int]:
    """Columns that would accept a piece right now."""
    if state.status is not Status.IN_PROGRESS:
        return []
    return board_ops.open_columns(state.board)


def render(state: GameState) -> str:
    """Render the board as ASCII art ('X' = Player1, 'O' = Player2)."""
    return board_ops.render(state.board)


def drop_piece(state: GameState, col: int) -> MoveResult:
    """
    Drop the current player's piece into col.

    On acceptance the piece is written, then the board is checked for a win
    before it is checked for a tie, so a last move that both fills the board
    and completes a line is a win. Otherwise the turn passes to the other
    player.
    """
    if state.status is not Status.IN_PROGRESS:
        logger.debug("Rejected column %s: game is %s", col, state.status.value)
        return MoveResult(events=_REJECTED, status=state.status)

    row = find_spot_for_column(state, col)
    if row is None:
        logger.debug("Rejected column %s: full or off the board", col)
        return MoveResult(events=_REJECTED, status=state.status)

    mover = state.current
    state.board[row, col] = mover.id
    state.move_count += 1
    placed = Placed(row=row, col=col, player_id=mover.id)

    if check_for_win(state):
        state.status = Status.WON
        state.winner = mover
        logger.info("%s won after %d moves", mover.name, state.move_count)
        outcome: Event = Won(player_id=mover.id, row=row, col=col)
    elif is_board_full(state):
        state.status = Status.TIED
        logger.info("Tie after %d moves", state.move_count)
        outcome = Tied(row=row, col=col)
    else:
        state.current = state.other(mover)
        outcome = Continue()

    return MoveResult(
        events=(placed, outcome),
        status=state.status,
        player=mover,
        row=row,
        col=col,
    )
