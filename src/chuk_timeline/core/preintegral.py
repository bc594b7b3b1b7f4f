"""
Preintegral - a timeline with precomputed running integrals.

Integrating a piecewise-constant quantity up to time T naively means walking
every breakpoint before T. A Preintegral stores the integral up to each
breakpoint once, so fetch() costs one binary search plus one local
integration.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Protocol, TypeVar

from chuk_timeline.constants import ErrorMessages
from chuk_timeline.core.errors import PreconditionViolation
from chuk_timeline.core.instant import U
from chuk_timeline.core.search import upper_bound
from chuk_timeline.core.timeline import Timeline

logger = logging.getLogger(__name__)

Out = TypeVar("Out")


class Integrable(Protocol[Out]):
    """
    A value type that can be integrated over time.

    accumulate() and zero() must form a monoid (associative, with zero() as
    identity on both sides), otherwise running sums stop agreeing with a
    brute-force integration. Outputs are treated as immutable values.
    """

    def integrate_within(self, self_time: Any, target_time: Any) -> Out:
        """Contribution of holding this value from self_time up to target_time."""
        ...

    @staticmethod
    def accumulate(lhs: Out, rhs: Out) -> Out:
        """Combine two partial integrals."""
        ...

    @staticmethod
    def zero() -> Out:
        """Identity element for accumulate()."""
        ...


V = TypeVar("V", bound=Integrable[Any])


class Preintegral(Generic[U, V]):
    """
    Read-only integral index over a non-empty timeline.

    The first breakpoint is the integration origin. running_integral[i] is the
    total integral from the origin through breakpoint i, where the gap before
    breakpoint i is filled with the value in effect before it.

    Immutable once built, so it can be shared freely between threads.
    """

    def __init__(self, timeline: Timeline[U, V]) -> None:
        """
        Precompute running integrals at every breakpoint.

        Args:
            timeline: Non-empty timeline of integrable values

        Raises:
            PreconditionViolation: If the timeline is empty
        """
        pairs = timeline.pairs()
        first = next(pairs, None)
        if first is None:
            raise PreconditionViolation(ErrorMessages.EMPTY_PREINTEGRAL)

        first_time, first_value = first
        self._integrand = type(first_value)
        times: list[U] = [first_time]
        values: list[V] = [first_value]
        running: list[Any] = [self._integrand.zero()]
        for time, value in pairs:
            section = values[-1].integrate_within(times[-1], time)
            running.append(self._integrand.accumulate(running[-1], section))
            times.append(time)
            values.append(value)

        self._times = tuple(times)
        self._values = tuple(values)
        self._running_integral = tuple(running)
        logger.debug(
            "Built %s preintegral with %d breakpoints",
            self._integrand.__name__,
            len(self._times),
        )

    @property
    def times(self) -> tuple[U, ...]:
        return self._times

    @property
    def values(self) -> tuple[V, ...]:
        return self._values

    @property
    def running_integral(self) -> tuple[Any, ...]:
        """Integral from the origin through each breakpoint."""
        return self._running_integral

    def fetch(self, time: U) -> Any:
        """
        Integral from the origin up to ``time``.

        Args:
            time: Query time, at or after the first breakpoint

        Raises:
            PreconditionViolation: If ``time`` precedes the first breakpoint
        """
        base = upper_bound(self._times, time) - 1
        if base < 0:
            raise PreconditionViolation(
                ErrorMessages.FETCH_BEFORE_START.format(time=time, start=self._times[0])
            )
        section = self._values[base].integrate_within(self._times[base], time)
        return self._integrand.accumulate(self._running_integral[base], section)

    def __len__(self) -> int:
        return len(self._times)

    def __repr__(self) -> str:
        return (
            f"Preintegral({self._integrand.__name__}, breakpoints={len(self._times)}, "
            f"span={self._times[0]!s}..{self._times[-1]!s})"
        )
