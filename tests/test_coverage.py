"""
Tests for wordlist coverage analysis.
"""
import numpy as np
import pytest
from passphraser.analysis import analyze_wordlist, roll_distribution
from passphraser.analysis.coverage import scheme_indices
from passphraser.config import DiceScheme
from passphraser.core.wordlist import Wordlist, builtin_wordlist


TWO_DICE = DiceScheme(dice_per_word=2, low=1, high=3)


class TestSchemeIndices:
    """Indices a dice scheme can roll."""

    def test_two_coins(self):
        assert scheme_indices(TWO_DICE).tolist() == [11, 12, 21, 22]

    def test_default_scheme(self):
        indices = scheme_indices(DiceScheme())
        assert indices.size == 7776
        assert indices[0] == 11111
        assert indices[-1] == 66666


class TestAnalyzeWordlist:
    """Coverage of wordlists against a scheme."""

    def test_builtin_is_complete(self):
        report = analyze_wordlist(builtin_wordlist())
        assert report.is_complete
        assert report.covered == report.index_space == 7776
        assert report.duplicates == []
        assert report.unreachable == []
        assert report.effective_bits_per_word == pytest.approx(12.925, abs=1e-3)

    def test_gaps_duplicates_and_unreachable(self):
        wordlist = Wordlist.from_lines(["11 a", "11 b", "22 c", "33 d"])
        report = analyze_wordlist(wordlist, TWO_DICE)
        assert report.entries == 4
        assert report.covered == 2
        assert report.missing == [12, 21]
        assert report.duplicates == [11]
        assert report.unreachable == [33]
        assert report.coverage == pytest.approx(0.5)
        assert not report.is_complete

    def test_oversized_indices(self):
        wordlist = Wordlist.from_lines(["11 a", "99999999999999999999 huge", f"{2 ** 64 - 1} edge"])
        report = analyze_wordlist(wordlist, TWO_DICE)
        assert report.entries == 2
        assert report.covered == 1
        assert report.unreachable == [2 ** 64 - 1]

    def test_empty_wordlist(self):
        report = analyze_wordlist(Wordlist([]), TWO_DICE)
        assert report.covered == 0
        assert report.effective_bits_per_word == 0.0

    def test_invalid_scheme(self):
        with pytest.raises(ValueError):
            analyze_wordlist(builtin_wordlist(), DiceScheme(low=2, high=2))

    def test_str(self):
        assert "Covered: 7776 (100.0%)" in str(analyze_wordlist(builtin_wordlist()))


class TestRollDistribution:
    """Face tallies over simulated rolls."""

    def test_counts_add_up(self):
        distribution = roll_distribution(200)
        assert distribution.face_counts.shape == (6,)
        assert distribution.face_counts.sum() == 1000
        assert np.isclose(distribution.frequencies.sum(), 1.0)
        assert distribution.degrees_of_freedom == 5

    def test_roughly_uniform(self):
        distribution = roll_distribution(20000)
        # 5 degrees of freedom, p < 1e-6 upper tail
        assert distribution.chi_square < 40

    def test_hit_rate(self):
        assert roll_distribution(50, wordlist=builtin_wordlist()).hit_rate == 1.0
        assert roll_distribution(50, wordlist=Wordlist.from_lines(["1 x"])).hit_rate == 0.0
        assert roll_distribution(50).hit_rate is None

    def test_no_samples(self):
        distribution = roll_distribution(0)
        assert distribution.face_counts.tolist() == [0] * 6
        assert distribution.chi_square == 0.0
