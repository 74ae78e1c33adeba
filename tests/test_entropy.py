"""
Tests for entropy calculation.
"""
import math
import pytest
from passphraser.core.entropy import Entropy, calc_entropy


class TestCalcEntropy:
    """Bits of entropy for a wordlist size and phrase length."""

    def test_eff_six_words(self):
        assert calc_entropy(7776, 6) == pytest.approx(77.55, abs=0.01)

    def test_single_word(self):
        assert calc_entropy(1024, 1) == pytest.approx(10.0)

    def test_single_possibility(self):
        assert calc_entropy(1, 10) == 0.0

    def test_monotonic_in_length(self):
        values = [calc_entropy(7776, n) for n in range(1, 10)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_monotonic_in_possibilities(self):
        values = [calc_entropy(p, 6) for p in (2, 10, 100, 7776)]
        assert values == sorted(values)

    def test_empty_wordlist_is_not_finite(self):
        assert not math.isfinite(calc_entropy(0, 6))


class TestEntropy:
    """Entropy value objects."""

    def test_calculate(self):
        entropy = Entropy.calculate(7776, 6)
        assert entropy.possibilities == 7776
        assert entropy.bits == pytest.approx(77.5489, abs=1e-3)

    def test_str(self):
        assert str(Entropy.calculate(7776, 6)) == "77.55 bits"
