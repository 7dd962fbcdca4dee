"""
Random seed management for reproducibility.
"""

from __future__ import annotations

import numpy as np


def set_seed(seed: int) -> np.random.Generator:
    """
    Return a NumPy generator seeded with seed.

    Global random state is left alone; callers draw from the returned
    generator so two runs with the same seed pick the same moves.

    Args:
        seed: Random seed value
    """
    return np.random.default_rng(seed)
