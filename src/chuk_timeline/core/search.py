"""
Ordered search primitives over non-decreasing sequences.

Every positional query in the timeline core goes through these two functions.
The caller guarantees the sequence is sorted; nothing is checked here.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def lower_bound(sequence: Sequence[Any], key: Any) -> int:
    """
    Smallest index i with sequence[i] >= key, or len(sequence) if none.

    Examples:
        lower_bound([1, 1, 16, 16], 1) == 0
        lower_bound([1, 1, 16, 16], 2) == 2
    """
    return bisect_left(sequence, key)


def upper_bound(sequence: Sequence[Any], key: Any) -> int:
    """
    Smallest index i with sequence[i] > key, or len(sequence) if none.

    Examples:
        upper_bound([1, 1, 16, 16], 1) == 2
        upper_bound([1, 1, 16, 16], 16) == 4
    """
    return bisect_right(sequence, key)
