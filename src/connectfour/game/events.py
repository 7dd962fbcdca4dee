"""
Events emitted by the engine for each drop.

A rejected drop yields a single Rejected event. An accepted drop yields a
Placed event followed by exactly one of Continue, Won or Tied. Renderers
react to these and never inspect the board on their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Rejected:
    type: str = "rejected"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class Placed:
    row: int
    col: int
    player_id: int
    type: str = "placed"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "row": self.row, "col": self.col, "playerId": self.player_id}


@dataclass(frozen=True)
class Continue:
    type: str = "continue"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class Won:
    player_id: int
    row: int
    col: int
    type: str = "won"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "playerId": self.player_id, "row": self.row, "col": self.col}


@dataclass(frozen=True)
class Tied:
    row: int
    col: int
    type: str = "tied"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "row": self.row, "col": self.col}


Event = Union[Rejected, Placed, Continue, Won, Tied]
