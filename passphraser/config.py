"""Configuration for passphrase generation."""
from dataclasses import dataclass, field

from .core.formatting import Preset


DEFAULT_LENGTH = 6
ENV_PREFIX = "PASSPHRASER"


@dataclass(frozen=True)
class DiceScheme:
    """How many dice are rolled per word and which faces they have.

    ``high`` is exclusive, so the default scheme is five six-sided dice.
    """
    dice_per_word: int = 5
    low: int = 1
    high: int = 7

    @property
    def faces(self) -> int:
        return self.high - self.low

    @property
    def is_valid(self) -> bool:
        return self.high > self.low and self.dice_per_word >= 0

    def __str__(self):
        return f"{self.dice_per_word}d[{self.low},{self.high})"


@dataclass
class GeneratorConfig:
    """Settings a passphrase generator is built from."""
    length: int = DEFAULT_LENGTH
    scheme: DiceScheme = field(default_factory=DiceScheme)
    preset: Preset = field(default_factory=Preset.default)
