"""
Tests for Preintegral.

Tests cover:
- The beat-count scenario on a plain measure axis
- Agreement with brute-force integration
- Fatal preconditions (empty timeline, fetch before start)
- A custom Integrable value type
"""

from dataclasses import dataclass
from fractions import Fraction

import pytest

from chuk_timeline import Beat, Instant, PreconditionViolation, Preintegral, Timeline


def brute_force(timeline: Timeline, time) -> Fraction:
    """Integrate breakpoint by breakpoint without any precomputation."""
    pairs = list(timeline.pairs())
    total = type(pairs[0][1]).zero()
    for (start, value), (end, _) in zip(pairs, pairs[1:]):
        if end > time:
            break
        total = value.accumulate(total, value.integrate_within(start, end))
    base_time, base_value = [(t, v) for t, v in pairs if t <= time][-1]
    return base_value.accumulate(total, base_value.integrate_within(base_time, time))


@dataclass(frozen=True)
class Label:
    """Integrates to the sequence of labels held, one per whole unit of time."""

    name: str

    def integrate_within(self, self_time: int, target_time: int) -> tuple[str, ...]:
        return (self.name,) * (target_time - self_time)

    @staticmethod
    def accumulate(lhs: tuple[str, ...], rhs: tuple[str, ...]) -> tuple[str, ...]:
        return lhs + rhs

    @staticmethod
    def zero() -> tuple[str, ...]:
        return ()


class TestBeatPreintegral:
    """Tests for integrating beats over measures."""

    def test_beat_scenario(self, beats_by_measure: Timeline[int, Beat]) -> None:
        """Beat counts match the hand-computed values."""
        pi = Preintegral(beats_by_measure)
        assert pi.fetch(0) == Fraction(0)
        assert pi.fetch(2) == Fraction(8)
        assert pi.fetch(4) == Fraction(16)
        assert pi.fetch(5) == Fraction(23)
        assert pi.fetch(6) == Fraction(30)
        assert pi.fetch(8) == Fraction(38)
        assert pi.fetch(9) == Fraction(83, 2)
        assert pi.fetch(10) == Fraction(90, 2)

    def test_running_integral(self, beats_by_measure: Timeline[int, Beat]) -> None:
        """One running total per breakpoint, starting at zero."""
        pi = Preintegral(beats_by_measure)
        assert pi.times == (0, 4, 6, 8)
        assert pi.running_integral == (Fraction(0), Fraction(16), Fraction(30), Fraction(38))
        assert len(pi) == 4

    def test_fractional_query(self, beats_by_measure: Timeline[int, Beat]) -> None:
        """Queries between integer measures integrate exactly."""
        pi = Preintegral(beats_by_measure)
        assert pi.fetch(Fraction(9, 2)) == Fraction(39, 2)

    def test_matches_brute_force(self, beats_by_measure: Timeline[int, Beat]) -> None:
        """The precomputed structure agrees with naive integration everywhere."""
        pi = Preintegral(beats_by_measure)
        for quarter in range(0, 48):
            t = Fraction(quarter, 4)
            assert pi.fetch(t) == brute_force(beats_by_measure, t)

    def test_idempotent(self) -> None:
        """Equal inputs give identical running integrals."""
        pairs = [(0, Beat(Fraction(3))), (2, Beat(Fraction(5, 2))), (9, Beat(Fraction(6)))]
        first = Preintegral(Timeline.from_sorted(pairs))
        second = Preintegral(Timeline.from_sorted(pairs))
        assert first.running_integral == second.running_integral

    def test_instant_axis(self) -> None:
        """Beat integrates over Instants as well."""
        tl = Timeline.from_sorted(
            [(Instant(0), Beat(Fraction(4))), (Instant(1, Fraction(1, 2)), Beat(Fraction(3)))]
        )
        pi = Preintegral(tl)
        assert pi.fetch(Instant(1)) == Fraction(4)
        assert pi.fetch(Instant(1, Fraction(1, 2))) == Fraction(6)
        assert pi.fetch(Instant(2)) == Fraction(15, 2)


class TestPreintegralPreconditions:
    """Tests for fatal misuse."""

    def test_empty_timeline_is_fatal(self) -> None:
        """There is no origin to integrate from."""
        with pytest.raises(PreconditionViolation, match="empty timeline"):
            Preintegral(Timeline())

    def test_fetch_before_start_is_fatal(self) -> None:
        """Queries must be at or after the first breakpoint."""
        pi = Preintegral(Timeline.from_sorted([(2, Beat(Fraction(4)))]))
        assert pi.fetch(2) == Fraction(0)
        with pytest.raises(PreconditionViolation, match="before the first breakpoint"):
            pi.fetch(1)

    def test_single_breakpoint(self) -> None:
        """A single breakpoint integrates forever."""
        pi = Preintegral(Timeline.from_sorted([(0, Beat(Fraction(3)))]))
        assert pi.fetch(100) == Fraction(300)


class TestCustomIntegrable:
    """Tests for a non-numeric monoid."""

    def test_label_sequence(self) -> None:
        """Any monoid works as the integral output."""
        tl = Timeline.from_sorted([(0, Label("a")), (2, Label("b")), (3, Label("c"))])
        pi = Preintegral(tl)
        assert pi.fetch(0) == ()
        assert pi.fetch(3) == ("a", "a", "b")
        assert pi.fetch(5) == ("a", "a", "b", "c", "c")
