"""
generator.py — Random Array Factory
====================================
Supplies the unsorted input for a run.  Values are integers drawn
uniformly from [low, high] inclusive, the same range the bar renderer
expects (bar height in pixels).
"""

import random
from typing import List, Optional

from config import DEFAULT_ARRAY_SIZE, VALUE_MIN, VALUE_MAX


def generate(
    size: int = DEFAULT_ARRAY_SIZE,
    low: int = VALUE_MIN,
    high: int = VALUE_MAX,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Args:
        size : Number of elements (0 is allowed and yields an empty list).
        low  : Smallest possible value.
        high : Largest possible value.
        seed : Optional seed for a reproducible array.

    Raises:
        ValueError if size is negative or low > high.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")

    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]
