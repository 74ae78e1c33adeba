"""Entropy of Diceware passphrases."""
from dataclasses import dataclass
import logging

import numpy as np


logger = logging.getLogger(__name__)


def calc_entropy(possibilities: int, phrase_length: int) -> float:
    """Bits of entropy of ``phrase_length`` words drawn from ``possibilities``.

    An empty wordlist gives a non-finite result.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        bits = np.log2(np.float64(possibilities)) * phrase_length
    return float(bits)


@dataclass(frozen=True)
class Entropy:
    """Wordlist size and the entropy it yields for one passphrase."""
    possibilities: int
    bits: float

    @classmethod
    def calculate(cls, possibilities: int, phrase_length: int) -> "Entropy":
        bits = calc_entropy(possibilities, phrase_length)
        logger.debug("Entropy of %d words from %d: %.2f bits", phrase_length, possibilities, bits)
        return cls(possibilities=possibilities, bits=bits)

    def __str__(self) -> str:
        return f"{self.bits:.2f} bits"
