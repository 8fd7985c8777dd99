"""
Achievement detection over recorded balance sequences.
"""

from typing import Optional, Sequence

import numpy as np


def first_crossing(balances: Sequence[float], target: float) -> Optional[int]:
    """Index of the first balance >= target, or None if it never gets there."""
    hits = np.flatnonzero(np.asarray(balances, dtype=float) >= target)
    if hits.size == 0:
        return None
    return int(hits[0])


def achievement_age(age: int, offset: Optional[int]) -> Optional[int]:
    if offset is None:
        return None
    return age + offset
