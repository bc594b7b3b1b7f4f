"""
Rhythm values - Beat, Tempo, Rhythm.

Value types carried by timelines. Beat and Rhythm are integrable, so a
Preintegral over them answers "how many beats so far" and "how many seconds
so far" at any point in the chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any

from chuk_timeline.constants import SECONDS_PER_MINUTE, ErrorMessages
from chuk_timeline.core.instant import measure_span


@dataclass(frozen=True)
class Beat:
    """
    A beat signature: how many beats fit in one measure.

    Integrates to a beat count. Works on any measure axis (int, Fraction or
    Instant keys).
    """

    per_measure: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "per_measure", Fraction(self.per_measure))
        if self.per_measure <= 0:
            raise ValueError(ErrorMessages.NON_POSITIVE_BEAT.format(per_measure=self.per_measure))

    def integrate_within(self, self_time: Any, target_time: Any) -> Fraction:
        return self.per_measure * measure_span(self_time, target_time)

    @staticmethod
    def accumulate(lhs: Fraction, rhs: Fraction) -> Fraction:
        return lhs + rhs

    @staticmethod
    def zero() -> Fraction:
        return Fraction(0)

    def __repr__(self) -> str:
        return f"Beat({self.per_measure})"


@dataclass(frozen=True)
class Tempo:
    """A tempo in beats per minute."""

    bpm: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "bpm", Fraction(self.bpm))
        if self.bpm <= 0:
            raise ValueError(ErrorMessages.NON_POSITIVE_TEMPO.format(bpm=self.bpm))

    @property
    def seconds_per_beat(self) -> Fraction:
        return SECONDS_PER_MINUTE / self.bpm

    def __repr__(self) -> str:
        return f"Tempo({self.bpm})"


@dataclass(frozen=True)
class Rhythm:
    """
    The beat signature and tempo in effect together.

    Integrates to elapsed seconds:
        measures * beats per measure * seconds per beat
    """

    beat: Beat
    tempo: Tempo

    @property
    def seconds_per_measure(self) -> Fraction:
        return self.beat.per_measure * self.tempo.seconds_per_beat

    def integrate_within(self, self_time: Any, target_time: Any) -> Fraction:
        return self.seconds_per_measure * measure_span(self_time, target_time)

    @staticmethod
    def accumulate(lhs: Fraction, rhs: Fraction) -> Fraction:
        return lhs + rhs

    @staticmethod
    def zero() -> Fraction:
        return Fraction(0)
