"""Passphrase assembly and the generator builder."""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import logging

from ..config import DEFAULT_LENGTH, DiceScheme, GeneratorConfig
from .dice import roll_dice, to_index
from .entropy import Entropy
from .formatting import Preset, format_words
from .wordlist import Wordlist, builtin_wordlist


logger = logging.getLogger(__name__)

WordlistSource = Union[Wordlist, Iterable[str]]


def _as_wordlist(source: WordlistSource) -> Wordlist:
    if isinstance(source, Wordlist):
        return source
    return Wordlist.from_lines(list(source))


def passphrase(wordlist: WordlistSource, rolls: Iterable[Sequence[int]]) -> List[str]:
    """Map dice rolls to words, in roll order.

    A roll whose index is not in the wordlist contributes nothing, so the
    result may be shorter than the number of rolls.
    """
    wordlist = _as_wordlist(wordlist)
    words = []
    for roll in rolls:
        index = to_index(roll)
        word = wordlist.lookup(index)
        if word is None:
            logger.debug("No word for index %d, skipping", index)
            continue
        words.append(word)
    return words


@dataclass(frozen=True)
class Passphrase:
    """Generated words together with their preset and entropy."""
    words: Tuple[str, ...]
    preset: Preset
    entropy: Entropy
    requested: int

    @property
    def is_complete(self) -> bool:
        """True if every requested word was found in the wordlist."""
        return len(self.words) == self.requested

    def format(self) -> str:
        """Render using the preset active at generation time."""
        return self.format_with(self.preset)

    def format_with(self, preset: Preset) -> str:
        """Render using another preset, without changing this passphrase."""
        return format_words(self.words, preset)

    def __len__(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return self.format()


class Passphraser:
    """Configures and generates passphrases.

    Setters return the builder so calls can be chained::

        passphrase = Passphraser(6).length(10).preset(Preset.pascal()).generate()
    """

    def __init__(self, length: int = DEFAULT_LENGTH, scheme: Optional[DiceScheme] = None):
        self._length = 0
        self.length(length)
        self._wordlist = builtin_wordlist()
        self._preset = Preset.default()
        self._scheme = scheme or DiceScheme()

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "Passphraser":
        return cls(config.length, config.scheme).preset(config.preset)

    def length(self, length: int) -> "Passphraser":
        """Set the number of words to generate."""
        if length < 0:
            raise ValueError(f"Passphrase length must not be negative, got {length}")
        self._length = length
        return self

    def wordlist(self, source: WordlistSource) -> "Passphraser":
        """Pick words from ``source`` instead of the built-in list.

        Raw lines are copied, so later changes to ``source`` are not seen.
        """
        self._wordlist = _as_wordlist(source)
        return self

    def preset(self, preset: Preset) -> "Passphraser":
        """Set the formatting preset."""
        self._preset = preset
        return self

    @property
    def config(self) -> GeneratorConfig:
        return GeneratorConfig(length=self._length, scheme=self._scheme, preset=self._preset)

    def generate(self) -> Passphrase:
        """Roll dice, look up words and compute the entropy."""
        scheme = self._scheme
        rolls = roll_dice(self._length, scheme.dice_per_word, scheme.low, scheme.high)
        words = passphrase(self._wordlist, rolls)

        if len(words) < self._length:
            logger.debug("Generated %d of %d words", len(words), self._length)

        entropy = Entropy.calculate(len(self._wordlist), self._length)
        return Passphrase(tuple(words), self._preset, entropy, self._length)


def generate_words(length: int = DEFAULT_LENGTH, lines: Optional[Iterable[str]] = None) -> List[str]:
    """Generate a plain list of words, without formatting or entropy."""
    wordlist = builtin_wordlist() if lines is None else Wordlist.from_lines(lines)
    scheme = DiceScheme()
    rolls = roll_dice(length, scheme.dice_per_word, scheme.low, scheme.high)
    return passphrase(wordlist, rolls)
