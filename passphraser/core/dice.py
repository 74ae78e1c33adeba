"""Dice rolling and roll-to-index reduction for Diceware."""
from typing import List, Sequence
import logging
import random


logger = logging.getLogger(__name__)

# OS-backed generator, suitable for password generation
_system_random = random.SystemRandom()


def to_index(digits: Sequence[int]) -> int:
    """Read a sequence of digits left-to-right as a base-10 numeral.

    ``[5, 2, 3, 1, 6]`` becomes ``52316``.
    """
    index = 0
    for digit in digits:
        index = index * 10 + digit
    return index


def roll_dice(runs: int, dice_per_run: int, low: int, high: int) -> List[List[int]]:
    """Roll ``dice_per_run`` dice ``runs`` times.

    Every die is drawn uniformly from ``[low, high)``. An empty range means
    the dice scheme is misconfigured and raises ``ValueError``.
    """
    if high <= low:
        raise ValueError(f"Empty dice range: [{low}, {high})")
    if runs < 0 or dice_per_run < 0:
        raise ValueError(f"Cannot roll {dice_per_run} dice {runs} times")

    logger.debug("Rolling %d x %dd[%d,%d)", runs, dice_per_run, low, high)
    return [
        [_system_random.randrange(low, high) for _ in range(dice_per_run)]
        for _ in range(runs)
    ]

