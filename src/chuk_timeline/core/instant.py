"""
Time primitives - Instant, TimeUnit.

An Instant is an exact point in musical time: a 0-based measure number plus a
fractional position inside that measure. Uses Fraction so that subdivisions
like triplets never drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar, Protocol, TypeVar

from chuk_timeline.constants import ErrorMessages
from chuk_timeline.core.errors import InstantError, PreconditionViolation


class TimeUnit(Protocol):
    """
    Anything usable as the key axis of a Timeline.

    Must be totally ordered and immutable. Plain ints (measure counters),
    Fractions and Instants all qualify; see time_zero() for the zero value.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


U = TypeVar("U", bound=TimeUnit)


@dataclass(frozen=True, order=True)
class Instant:
    """
    A particular instant in a chart/score.

    Ordered by (measure, submeasure). Immutable and hashable.

    Examples:
        Instant(0) = start of the chart
        Instant(2, Fraction(1, 4)) = a quarter of the way into measure 2
    """

    measure: int
    submeasure: Fraction = Fraction(0)

    ZERO: ClassVar[Instant]

    def __post_init__(self) -> None:
        if not isinstance(self.measure, int) or isinstance(self.measure, bool) or self.measure < 0:
            raise InstantError(ErrorMessages.NEGATIVE_MEASURE.format(measure=self.measure))
        if not isinstance(self.submeasure, (int, Fraction)):
            raise TypeError(
                f"submeasure must be int or Fraction, got {type(self.submeasure).__name__}"
            )
        submeasure = Fraction(self.submeasure)
        if submeasure < 0:
            raise InstantError(ErrorMessages.NEGATIVE_SUBMEASURE.format(submeasure=submeasure))
        if submeasure >= 1:
            raise InstantError(ErrorMessages.OVER_SUBMEASURE.format(submeasure=submeasure))
        object.__setattr__(self, "submeasure", submeasure)

    @classmethod
    def new(cls, measure: int, submeasure: Fraction | int = 0) -> Instant:
        """Create an Instant from runtime data, raising InstantError if invalid."""
        return cls(measure, submeasure)

    @classmethod
    def zero(cls) -> Instant:
        """The origin of the time axis."""
        return cls.ZERO

    @classmethod
    def from_fraction(cls, position: Fraction | int) -> Instant:
        """
        Create an Instant from an absolute position in measures.

        Args:
            position: Non-negative number of measures since the origin

        Returns:
            Instant
        """
        position = Fraction(position)
        if position < 0:
            raise InstantError(ErrorMessages.NEGATIVE_MEASURE.format(measure=position))
        measure = position.numerator // position.denominator
        return cls(measure, position - measure)

    @classmethod
    def parse(cls, notation: str) -> Instant:
        """
        Parse an instant from notation like '3', '3:1/4' or '0:0/1'.

        Args:
            notation: Instant string

        Returns:
            Instant object
        """
        measure_part, sep, submeasure_part = notation.strip().partition(":")
        if sep and not submeasure_part.strip():
            raise InstantError(ErrorMessages.INVALID_INSTANT.format(notation=notation))
        try:
            measure = int(measure_part)
            submeasure = Fraction(submeasure_part) if sep else Fraction(0)
        except (ValueError, ZeroDivisionError) as e:
            raise InstantError(ErrorMessages.INVALID_INSTANT.format(notation=notation)) from e
        return cls(measure, submeasure)

    def to_fraction(self) -> Fraction:
        """Absolute position in measures."""
        return self.measure + self.submeasure

    def span_to(self, other: Instant) -> Fraction:
        """Signed number of measures from this instant to another."""
        return other.to_fraction() - self.to_fraction()

    def shifted(self, measures: Fraction | int) -> Instant:
        """Return the instant a number of measures later (or earlier if negative)."""
        return Instant.from_fraction(self.to_fraction() + measures)

    def __str__(self) -> str:
        return f"{self.measure}:{self.submeasure.numerator}/{self.submeasure.denominator}"

    def __repr__(self) -> str:
        if self.submeasure == 0:
            return f"Instant({self.measure})"
        return (
            f"Instant({self.measure}, "
            f"Fraction({self.submeasure.numerator}, {self.submeasure.denominator}))"
        )


Instant.ZERO = Instant(0, Fraction(0))


def instant(measure: int, numerator: int, denominator: int) -> Instant:
    """
    Build a known-valid Instant from integer literals.

    Meant for fixed time constants in calling code, e.g. ``instant(2, 3, 4)``.
    A fraction outside [0, 1) here is a typo in the caller, so it raises
    PreconditionViolation rather than InstantError.
    """
    try:
        return Instant(measure, Fraction(numerator, denominator))
    except (InstantError, ZeroDivisionError) as e:
        raise PreconditionViolation(
            ErrorMessages.INVALID_INSTANT_LITERAL.format(
                measure=measure, numerator=numerator, denominator=denominator
            )
        ) from e


def time_zero(kind: type) -> Any:
    """
    Get the zero value of a time unit type.

    Args:
        kind: int, Fraction, or a type with a ``zero()`` classmethod

    Returns:
        The origin of that time axis
    """
    if kind is int:
        return 0
    if kind is Fraction:
        return Fraction(0)
    zero = getattr(kind, "zero", None)
    if callable(zero):
        return zero()
    raise TypeError(f"{kind.__name__} is not a time unit (no zero value)")


def measure_span(origin: Any, target: Any) -> Fraction:
    """
    Distance in measures between two times on the same axis.

    Works for int/Fraction measure counters and for Instants.
    """
    if isinstance(origin, Instant) and isinstance(target, Instant):
        return origin.span_to(target)
    if isinstance(origin, (int, Fraction)) and isinstance(target, (int, Fraction)):
        return Fraction(target - origin)
    raise TypeError(
        f"Cannot measure span between {type(origin).__name__} and {type(target).__name__}"
    )
