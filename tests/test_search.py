"""
Tests for the ordered search primitives.
"""

from itertools import combinations_with_replacement

from chuk_timeline import Instant, lower_bound, upper_bound


class TestBounds:
    """Tests for lower_bound and upper_bound."""

    def test_lower_bound_distinct(self) -> None:
        """Lower bound over distinct keys."""
        source = [1, 2, 4, 8, 16, 32, 64, 128]
        assert lower_bound(source, 1) == 0
        assert lower_bound(source, 2) == 1
        assert lower_bound(source, 3) == 2
        assert lower_bound(source, 4) == 2
        assert lower_bound(source, 20) == 5
        assert lower_bound(source, 256) == 8

    def test_lower_bound_duplicates(self) -> None:
        """Lower bound lands on the first of a run."""
        source = [1, 1, 1, 1, 16, 16, 16, 16, 256]
        assert lower_bound(source, 0) == 0
        assert lower_bound(source, 1) == 0
        assert lower_bound(source, 2) == 4
        assert lower_bound(source, 15) == 4
        assert lower_bound(source, 16) == 4
        assert lower_bound(source, 17) == 8
        assert lower_bound(source, 512) == 9

    def test_upper_bound_distinct(self) -> None:
        """Upper bound over distinct keys."""
        source = [1, 2, 4, 8, 16, 32, 64, 128]
        assert upper_bound(source, 1) == 1
        assert upper_bound(source, 2) == 2
        assert upper_bound(source, 3) == 2
        assert upper_bound(source, 4) == 3
        assert upper_bound(source, 20) == 5
        assert upper_bound(source, 256) == 8

    def test_upper_bound_duplicates(self) -> None:
        """Upper bound lands just past a run."""
        source = [1, 1, 1, 1, 16, 16, 16, 16, 256]
        assert upper_bound(source, 0) == 0
        assert upper_bound(source, 1) == 4
        assert upper_bound(source, 2) == 4
        assert upper_bound(source, 15) == 4
        assert upper_bound(source, 16) == 8
        assert upper_bound(source, 17) == 8
        assert upper_bound(source, 512) == 9

    def test_empty(self) -> None:
        """Both bounds are 0 on an empty sequence."""
        assert lower_bound([], 5) == 0
        assert upper_bound([], 5) == 0

    def test_bounds_bracket_equal_run(self) -> None:
        """sequence[lower:upper] is exactly the run equal to the key."""
        for length in range(6):
            for source in combinations_with_replacement(range(4), length):
                source = list(source)
                for key in range(-1, 5):
                    lo = lower_bound(source, key)
                    hi = upper_bound(source, key)
                    assert lo <= hi
                    assert source[lo:hi] == [x for x in source if x == key]
                    assert lo == sum(1 for x in source if x < key)

    def test_instant_keys(self) -> None:
        """Bounds work over Instants."""
        source = [Instant(0), Instant(1), Instant(1), Instant(2)]
        assert lower_bound(source, Instant(1)) == 1
        assert upper_bound(source, Instant(1)) == 3
        assert upper_bound(source, Instant.parse("1:1/2")) == 3
