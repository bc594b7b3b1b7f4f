"""
Pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest

from chuk_timeline import Beat, Instant, Tempo, Timeline


@pytest.fixture
def beats_by_measure() -> Timeline[int, Beat]:
    """Beat changes [0]:4, [4]:7, [6]:4, [8]:7/2 on a plain measure axis."""
    return Timeline.from_sorted(
        [
            (0, Beat(Fraction(4))),
            (4, Beat(Fraction(7))),
            (6, Beat(Fraction(4))),
            (8, Beat(Fraction(7, 2))),
        ]
    )


@pytest.fixture
def chart_beats() -> Timeline[int, Beat]:
    """4/4 until measure 2, then 3 beats per measure."""
    return Timeline.from_sorted([(0, Beat(Fraction(4))), (2, Beat(Fraction(3)))])


@pytest.fixture
def chart_tempos() -> Timeline[Instant, Tempo]:
    """120 BPM, dropping to 60 BPM halfway through measure 1."""
    return Timeline.from_sorted(
        [
            (Instant.ZERO, Tempo(Fraction(120))),
            (Instant(1, Fraction(1, 2)), Tempo(Fraction(60))),
        ]
    )
