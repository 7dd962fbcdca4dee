"""Utilities module."""

from .config import (
    Config,
    BoardConfig,
    PlayersConfig,
    get_default_config,
)
from .seed import set_seed
from .logging import (
    Logger,
    GameRecord,
    console,
    setup_logging,
    create_progress,
    print_config,
    print_board,
)

__all__ = [
    "Config",
    "BoardConfig",
    "PlayersConfig",
    "get_default_config",
    "set_seed",
    "Logger",
    "GameRecord",
    "console",
    "setup_logging",
    "create_progress",
    "print_config",
    "print_board",
]
