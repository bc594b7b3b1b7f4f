"""
Timeline core - the indexing engine.

- Instant: Exact measure + sub-measure position
- TimeUnit: Contract for timeline key types (int, Fraction, Instant)
- lower_bound / upper_bound: Binary search over sorted times
- Timeline: Sorted (time, value) container with lookup and merge
- Integrable: Contract for values that integrate over time
- Preintegral: Timeline with precomputed running integrals
"""

from chuk_timeline.core.errors import (
    AlignmentError,
    DuplicateTimesError,
    InstantError,
    MergeError,
    MergeErrorKind,
    PreconditionViolation,
)
from chuk_timeline.core.instant import Instant, TimeUnit, instant, measure_span, time_zero
from chuk_timeline.core.preintegral import Integrable, Preintegral
from chuk_timeline.core.search import lower_bound, upper_bound
from chuk_timeline.core.timeline import Timeline

__all__ = [
    # Time
    "Instant",
    "TimeUnit",
    "instant",
    "measure_span",
    "time_zero",
    # Search
    "lower_bound",
    "upper_bound",
    # Containers
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
]
