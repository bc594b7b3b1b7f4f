"""
Constants for the timeline library.

No magic strings - schema versions and error messages live here.
"""

from fractions import Fraction
from typing import Literal

# Schema versions - frozen for v1
SchemaVersion = Literal["chart-timing/v1"]
CHART_TIMING_SCHEMA: SchemaVersion = "chart-timing/v1"

SECONDS_PER_MINUTE = Fraction(60)

# Defaults used when a chart omits its opening beat/tempo
DEFAULT_BEATS_PER_MEASURE = Fraction(4)
DEFAULT_BPM = Fraction(120)


class ErrorMessages:
    """Standardized error messages."""

    OVER_SUBMEASURE = "too big submeasure rational: {submeasure}"
    NEGATIVE_SUBMEASURE = "submeasure must be non-negative, got {submeasure}"
    NEGATIVE_MEASURE = "measure must be a non-negative integer, got {measure!r}"
    INVALID_INSTANT = "Invalid instant notation: '{notation}'. Expected format like '3:1/4'."
    INVALID_INSTANT_LITERAL = "invalid instant literal [{measure}:{numerator}/{denominator}]"
    INVALID_TIME_ORDER = "invalid time order: {time!r} is not later than {last!r}"
    INCOMPARABLE_TIME = "time {time!r} is not totally ordered"
    EMPTY_PREINTEGRAL = "invalid timeline: cannot preintegrate an empty timeline"
    FETCH_BEFORE_START = "cannot fetch {time!r} before the first breakpoint {start!r}"
    HAS_DUPLICATE_TIMES = "cannot merge timelines: {side} timeline has duplicate times"
    MISALIGNED_START = "rhythm must start at {zero!r} with both beat and tempo, got {detail}"
    NON_POSITIVE_BEAT = "Beats per measure must be positive, got {per_measure}"
    NON_POSITIVE_TEMPO = "Tempo must be positive, got {bpm}"
