"""
A single game owned by one object.

GameSession wraps a GameState so several threads (UI callbacks, a socket
handler, ...) can drive the same game. Every start and drop runs under one
lock. The resulting events are handed to subscribers once the lock is
released, so a subscriber may start a new game or drop another piece.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ..utils.config import Config
from .engine import GameState, MoveResult, Status, drop_piece, start_game
from .events import Event, Rejected

Listener = Callable[[Event], None]


class GameSession:
    """
    Serialized access to one game.

    Args:
        config: Board size and player colors. Defaults to Config().
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._lock = threading.Lock()
        self._listeners: list[Listener] = []
        self._state: Optional[GameState] = None

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def status(self) -> Status:
        if self._state is None:
            return Status.NOT_STARTED
        return self._state.status

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def start_game(self) -> GameState:
        """Discard any current game and start a fresh one."""
        with self._lock:
            self._state = start_game(
                self.config.players.color1,
                self.config.players.color2,
                width=self.config.board.width,
                height=self.config.board.height,
            )
            return self._state

    def drop_piece(self, col: int) -> MoveResult:
        with self._lock:
            if self._state is None:
                result = MoveResult(events=(Rejected(),), status=Status.NOT_STARTED)
            else:
                result = drop_piece(self._state, col)

        for event in result.events:
            for listener in list(self._listeners):
                listener(event)
        return result
