"""Passphraser - Diceware passphrase generator."""
from .core.passphrase import Passphrase, Passphraser, generate_words, passphrase
from .core.formatting import Preset, PresetType, format_words
from .core.entropy import Entropy, calc_entropy
from .core.wordlist import WordEntry, Wordlist, builtin_wordlist, parse_line
from .core.dice import roll_dice, to_index
from .config import DiceScheme, GeneratorConfig

__version__ = "0.1.0"

__all__ = [
    "Passphrase",
    "Passphraser",
    "generate_words",
    "passphrase",
    "Preset",
    "PresetType",
    "format_words",
    "Entropy",
    "calc_entropy",
    "WordEntry",
    "Wordlist",
    "builtin_wordlist",
    "parse_line",
    "roll_dice",
    "to_index",
    "DiceScheme",
    "GeneratorConfig",
]
