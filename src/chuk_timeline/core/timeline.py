"""
Timeline - a sorted container of (time, value) pairs.

Times are kept non-decreasing in one list and values in a parallel list, so
binary search runs directly over the times. Pairs are bound by index and are
never reordered independently. A timeline only grows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from chuk_timeline.constants import ErrorMessages
from chuk_timeline.core.errors import DuplicateTimesError, PreconditionViolation
from chuk_timeline.core.instant import U
from chuk_timeline.core.search import lower_bound, upper_bound

logger = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")


class Timeline(Generic[U, V]):
    """
    Sorted associative container mapping times to values.

    Keys need not be unique: insert() keeps equal-time entries in insertion
    order. append() is the fast path for data that is already sorted.

    Not thread-safe; share between threads only behind an external lock.
    """

    def __init__(self) -> None:
        """Create an empty timeline."""
        self._times: list[U] = []
        self._values: list[V] = []

    @classmethod
    def from_sorted(cls, pairs: Iterable[tuple[U, V]]) -> Timeline[U, V]:
        """
        Build a timeline from pairs in strictly increasing time order.

        Raises PreconditionViolation on the first out-of-order pair.
        """
        timeline: Timeline[U, V] = cls()
        for time, value in pairs:
            timeline.append(time, value)
        return timeline

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[U, V]]) -> Timeline[U, V]:
        """Build a timeline from pairs in any order (duplicates allowed)."""
        timeline: Timeline[U, V] = cls()
        for time, value in pairs:
            timeline.insert(time, value)
        return timeline

    @property
    def times(self) -> tuple[U, ...]:
        """All times, non-decreasing."""
        return tuple(self._times)

    @property
    def values(self) -> tuple[V, ...]:
        """All values, in time order."""
        return tuple(self._values)

    @property
    def first_time(self) -> U | None:
        return self._times[0] if self._times else None

    @property
    def last_time(self) -> U | None:
        return self._times[-1] if self._times else None

    def pairs(self) -> Iterator[tuple[U, V]]:
        """Iterate (time, value) pairs in order."""
        return zip(self._times, self._values)

    def append(self, time: U, value: V) -> None:
        """
        Append a pair after every existing one.

        Args:
            time: Must be strictly later than the current last time
            value: Value taking effect at ``time``
        """
        _require_comparable(time)
        if self._times and not self._times[-1] < time:
            raise PreconditionViolation(
                ErrorMessages.INVALID_TIME_ORDER.format(time=time, last=self._times[-1])
            )
        self._times.append(time)
        self._values.append(value)

    def insert(self, time: U, value: V) -> None:
        """Insert a pair at its sorted position, after any entries with an equal time."""
        _require_comparable(time)
        index = upper_bound(self._times, time)
        self._times.insert(index, time)
        self._values.insert(index, value)

    def latest_item(self, time: U) -> V | None:
        """
        Get the value in effect at ``time``.

        Returns:
            The value with the greatest time <= ``time``, or None if ``time``
            precedes the first entry
        """
        index = upper_bound(self._times, time)
        if index > 0:
            return self._values[index - 1]
        return None

    def latest_slice(self, time: U) -> list[V]:
        """
        Get every value sharing the greatest time <= ``time``.

        Returns the whole run of duplicate-time entries at that position, or an
        empty list when nothing has happened yet.
        """
        right = upper_bound(self._times, time)
        if right == 0:
            return []
        left = lower_bound(self._times, self._times[right - 1])
        return self._values[left:right]

    def has_duplicate_times(self) -> bool:
        """True if any two entries share a time."""
        return any(a == b for a, b in zip(self._times, self._times[1:]))

    def merge(self, other: Timeline[U, W]) -> Timeline[U, tuple[V | None, W | None]]:
        """
        Merge-join two timelines into one entry per distinct time.

        Each output value is ``(left, None)``, ``(None, right)`` or
        ``(left, right)`` when both timelines have an entry at that exact time.

        Raises:
            DuplicateTimesError: If either timeline has duplicate times, since
                it would be ambiguous which duplicates pair up.
        """
        if self.has_duplicate_times():
            raise DuplicateTimesError(ErrorMessages.HAS_DUPLICATE_TIMES.format(side="left"))
        if other.has_duplicate_times():
            raise DuplicateTimesError(ErrorMessages.HAS_DUPLICATE_TIMES.format(side="right"))

        merged: Timeline[U, tuple[V | None, W | None]] = Timeline()
        left_times, left_values = self._times, self._values
        right_times, right_values = other._times, other._values
        i = j = 0
        while i < len(left_times) and j < len(right_times):
            if left_times[i] < right_times[j]:
                merged.append(left_times[i], (left_values[i], None))
                i += 1
            elif right_times[j] < left_times[i]:
                merged.append(right_times[j], (None, right_values[j]))
                j += 1
            else:
                merged.append(left_times[i], (left_values[i], right_values[j]))
                i += 1
                j += 1
        for k in range(i, len(left_times)):
            merged.append(left_times[k], (left_values[k], None))
        for k in range(j, len(right_times)):
            merged.append(right_times[k], (None, right_values[k]))

        logger.debug(
            "Merged timelines of %d and %d entries into %d", len(self), len(other), len(merged)
        )
        return merged

    def __len__(self) -> int:
        return len(self._times)

    def __bool__(self) -> bool:
        return bool(self._times)

    def __iter__(self) -> Iterator[tuple[U, V]]:
        return self.pairs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return self._times == other._times and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{t!s}: {v!r}" for t, v in self.pairs())
        return f"Timeline({{{pairs}}})"


def _require_comparable(time: Any) -> None:
    # NaN-like keys would silently break the binary search
    if time != time:
        raise PreconditionViolation(ErrorMessages.INCOMPARABLE_TIME.format(time=time))
