"""
Error taxonomy for the timeline core.

Two tiers that must never be mixed up:
- PreconditionViolation: the caller built its data wrong (out-of-order append,
  empty preintegral, query before start). Not meant to be caught.
- InstantError / MergeError: shape problems in caller-supplied data that can be
  fixed upstream and retried.
"""

from __future__ import annotations

from enum import Enum


class PreconditionViolation(AssertionError):
    """A caller logic error; continuing would produce a wrong numeric answer."""


class InstantError(ValueError):
    """Invalid runtime-supplied instant (submeasure outside [0, 1))."""


class MergeErrorKind(str, Enum):
    """Why a merge of timelines was refused."""

    HAS_DUPLICATE_TIMES = "has_duplicate_times"
    MISALIGNED = "misaligned"


class MergeError(ValueError):
    """Base class for recoverable merge failures."""

    kind: MergeErrorKind

    def __init__(self, kind: MergeErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateTimesError(MergeError):
    """One of the merged timelines has two entries at the same time."""

    def __init__(self, message: str) -> None:
        super().__init__(MergeErrorKind.HAS_DUPLICATE_TIMES, message)


class AlignmentError(MergeError):
    """A merged timeline does not start fully specified at time zero."""

    def __init__(self, message: str) -> None:
        super().__init__(MergeErrorKind.MISALIGNED, message)
