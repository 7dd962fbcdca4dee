"""
Connect Four - a two-player game engine with a terminal front end.

Usage:
    from connectfour.game import start_game, drop_piece

    state = start_game("red", "yellow")
    result = drop_piece(state, 3)
    print(result.to_dicts())
    # [{'type': 'placed', 'row': 5, 'col': 3, 'playerId': 1}, {'type': 'continue'}]
"""

__version__ = "0.1.0"

from . import game
from . import utils

__all__ = [
    "game",
    "utils",
    "__version__",
]
