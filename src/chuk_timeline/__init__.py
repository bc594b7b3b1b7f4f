"""
chuk-timeline - exact time-indexed event sequences for musical scores.

Sparse events (tempo changes, beat signature changes) sorted by time, with
O(log n) "what is in effect at T" lookups and prefix integrals.

Layers:
- core: Instant, Timeline, Preintegral and the search primitives
- rhythm: Beat/Tempo/Rhythm values and the beat/tempo merge
- models: Pydantic chart timing documents (YAML in, timelines out)
"""

from chuk_timeline.core import (
    AlignmentError,
    DuplicateTimesError,
    Instant,
    InstantError,
    Integrable,
    MergeError,
    MergeErrorKind,
    Preintegral,
    PreconditionViolation,
    Timeline,
    TimeUnit,
    instant,
    lower_bound,
    time_zero,
    upper_bound,
)
from chuk_timeline.models import BeatChange, ChartTiming, TempoChange
from chuk_timeline.rhythm import Beat, Rhythm, Tempo, beat_clock, merge_rhythm, rhythm_clock

__version__ = "0.1.0"

__all__ = [
    # Core
    "Instant",
    "TimeUnit",
    "instant",
    "time_zero",
    "lower_bound",
    "upper_bound",
    "Timeline",
    "Integrable",
    "Preintegral",
    # Errors
    "PreconditionViolation",
    "InstantError",
    "MergeError",
    "MergeErrorKind",
    "DuplicateTimesError",
    "AlignmentError",
    # Rhythm
    "Beat",
    "Tempo",
    "Rhythm",
    "merge_rhythm",
    "rhythm_clock",
    "beat_clock",
    # Models
    "ChartTiming",
    "BeatChange",
    "TempoChange",
]
