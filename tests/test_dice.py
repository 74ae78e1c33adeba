"""
Tests for dice rolling and index resolution.
"""
import pytest
from passphraser.core.dice import roll_dice, to_index


class TestRollDice:
    """Shape and range of simulated rolls."""

    def test_shape_and_range(self):
        rolls = roll_dice(6, 5, 1, 7)
        assert len(rolls) == 6
        for roll in rolls:
            assert len(roll) == 5
            assert all(1 <= value < 7 for value in roll)

    @pytest.mark.parametrize("runs, dice", [(6, 5), (6, 0), (0, 0), (1, 1)])
    def test_empty_range_fails(self, runs, dice):
        with pytest.raises(ValueError):
            roll_dice(runs, dice, 0, 0)

    def test_inverted_range_fails(self):
        with pytest.raises(ValueError):
            roll_dice(1, 5, 7, 1)

    def test_zero_runs(self):
        assert roll_dice(0, 5, 1, 7) == []

    def test_single_face(self):
        """A one-face die always shows that face."""
        assert roll_dice(3, 4, 2, 3) == [[2, 2, 2, 2]] * 3

    def test_all_faces_appear(self):
        """The upper face must be reachable, not just the lower ones."""
        values = {v for roll in roll_dice(500, 5, 1, 7) for v in roll}
        assert values == {1, 2, 3, 4, 5, 6}

    def test_rolls_are_independent(self):
        first = roll_dice(10, 5, 1, 7)
        second = roll_dice(10, 5, 1, 7)
        assert first != second


class TestToIndex:
    """Reduction of digit sequences to wordlist indices."""

    def test_examples(self):
        assert to_index([1, 1, 1]) == 111
        assert to_index([5, 2, 3, 1, 6]) == 52316

    def test_empty(self):
        assert to_index([]) == 0

    def test_leading_zero(self):
        assert to_index([0, 4, 2]) == 42

    def test_multi_digit_values_still_fold(self):
        assert to_index([12, 3]) == 123

