"""Coverage checks for wordlists against a dice scheme.

The generator never validates a wordlist: indices that are missing simply
produce no word and duplicated indices shadow each other. These helpers
report how well a wordlist fits the dice scheme used to pick from it, and
how uniform the dice actually are.
"""
import itertools
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..config import DiceScheme
from ..core.dice import roll_dice, to_index
from ..core.wordlist import Wordlist


@dataclass
class CoverageReport:
    """How a wordlist covers the indices a dice scheme can roll."""
    scheme: DiceScheme
    entries: int
    index_space: int
    covered: int
    missing: List[int]
    duplicates: List[int]
    unreachable: List[int]

    @property
    def coverage(self) -> float:
        """Fraction of rollable indices that resolve to a word."""
        if not self.index_space:
            return 0.0
        return self.covered / self.index_space

    @property
    def is_complete(self) -> bool:
        return not self.missing

    @property
    def effective_bits_per_word(self) -> float:
        """Entropy per word counting only reachable, distinct words."""
        if not self.covered:
            return 0.0
        return float(np.log2(self.covered))

    def __str__(self) -> str:
        return (
            f"Coverage for {self.scheme} ({self.entries} entries):\n"
            f"  Index Space: {self.index_space}\n"
            f"  Covered: {self.covered} ({self.coverage:.1%})\n"
            f"  Missing: {len(self.missing)}\n"
            f"  Duplicated: {len(self.duplicates)}\n"
            f"  Unreachable: {len(self.unreachable)}\n"
            f"  Effective Bits/Word: {self.effective_bits_per_word:.2f}"
        )


@dataclass
class RollDistribution:
    """Observed face frequencies over a batch of simulated rolls."""
    samples: int
    scheme: DiceScheme
    face_counts: np.ndarray
    chi_square: float
    hit_rate: Optional[float] = None

    @property
    def frequencies(self) -> np.ndarray:
        total = self.face_counts.sum()
        if not total:
            return np.zeros_like(self.face_counts, dtype=float)
        return self.face_counts / total

    @property
    def degrees_of_freedom(self) -> int:
        return max(self.scheme.faces - 1, 0)


def scheme_indices(scheme: DiceScheme) -> np.ndarray:
    """Every distinct index the scheme can roll, sorted."""
    faces = range(scheme.low, scheme.high)
    indices = {to_index(digits) for digits in itertools.product(faces, repeat=scheme.dice_per_word)}
    return np.array(sorted(indices), dtype=np.uint64)


def analyze_wordlist(wordlist: Wordlist, scheme: Optional[DiceScheme] = None) -> CoverageReport:
    """Compare wordlist indices with the indices ``scheme`` can produce."""
    scheme = scheme or DiceScheme()
    if not scheme.is_valid:
        raise ValueError(f"Invalid dice scheme: {scheme}")

    rollable = scheme_indices(scheme)
    listed = np.array(wordlist.indices, dtype=np.uint64)
    unique, counts = np.unique(listed, return_counts=True)

    covered_mask = np.isin(rollable, unique)
    return CoverageReport(
        scheme=scheme,
        entries=len(wordlist),
        index_space=int(rollable.size),
        covered=int(covered_mask.sum()),
        missing=rollable[~covered_mask].tolist(),
        duplicates=unique[counts > 1].tolist(),
        unreachable=unique[~np.isin(unique, rollable)].tolist(),
    )


def roll_distribution(
    samples: int,
    scheme: Optional[DiceScheme] = None,
    wordlist: Optional[Wordlist] = None,
) -> RollDistribution:
    """Roll ``samples`` words worth of dice and tally the faces.

    When a wordlist is given, also reports the fraction of rolls that
    resolve to a word.
    """
    scheme = scheme or DiceScheme()
    rolls = roll_dice(samples, scheme.dice_per_word, scheme.low, scheme.high)

    values = np.array(rolls, dtype=np.int64).reshape(-1)
    face_counts = np.bincount(values - scheme.low, minlength=scheme.faces)

    expected = values.size / scheme.faces
    if expected:
        chi_square = float(((face_counts - expected) ** 2 / expected).sum())
    else:
        chi_square = 0.0

    hit_rate = None
    if wordlist is not None and samples:
        hits = sum(1 for roll in rolls if to_index(roll) in wordlist)
        hit_rate = hits / samples

    return RollDistribution(
        samples=samples,
        scheme=scheme,
        face_counts=face_counts,
        chi_square=chi_square,
        hit_rate=hit_rate,
    )
