"""
Configuration management for Connect 4.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class BoardConfig:
    """Board dimensions. Fixed for the lifetime of a game."""

    width: int = 7
    height: int = 6

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.height}x{self.width}")


@dataclass
class PlayersConfig:
    """Display colors, passed through to the renderer."""

    color1: str = "red"
    color2: str = "yellow"


@dataclass
class Config:
    """Full game configuration."""

    board: BoardConfig = field(default_factory=BoardConfig)
    players: PlayersConfig = field(default_factory=PlayersConfig)

    # Directory for finished-game JSONL logs (disabled if None)
    log_dir: Optional[str] = None

    # Random seed for `connect4 simulate`
    seed: int = 42

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            board=BoardConfig(**data.get("board", {})),
            players=PlayersConfig(**data.get("players", {})),
            log_dir=data.get("log_dir"),
            seed=data.get("seed", 42),
        )

    def ensure_dirs(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get default configuration (standard 6x7 board)."""
    return Config()
