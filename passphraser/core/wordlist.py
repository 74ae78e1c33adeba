"""Wordlist parsing and lookup."""
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging


logger = logging.getLogger(__name__)

BUILTIN_WORDLIST = "eff_long_wordlist.txt"

# Largest index a line may carry, an unsigned 64-bit integer
MAX_INDEX = 2 ** 64 - 1


@dataclass(frozen=True)
class WordEntry:
    """An ``index word`` pair taken from one wordlist line."""
    index: int
    word: str

    def __str__(self) -> str:
        return f"{self.index} {self.word}"


def parse_line(line: str) -> Optional[WordEntry]:
    """Parse a single ``<index> <word>`` line.

    Returns ``None`` for anything that is not exactly two whitespace
    separated tokens with a decimal index up to ``MAX_INDEX``.
    """
    components = line.split()
    if len(components) != 2:
        return None

    index, word = components
    if not (index.isascii() and index.isdigit()):
        return None
    if int(index) > MAX_INDEX:
        return None
    return WordEntry(int(index), word)


def parse_wordlist(lines: Iterable[str]) -> List[WordEntry]:
    """Parse raw lines, silently dropping the ones that don't parse."""
    entries = []
    dropped = 0
    for line in lines:
        entry = parse_line(line)
        if entry is None:
            dropped += 1
            continue
        entries.append(entry)

    if dropped:
        logger.debug("Dropped %d malformed wordlist lines", dropped)
    return entries


class Wordlist:
    """An immutable snapshot of parsed wordlist entries."""

    def __init__(self, entries: Iterable[WordEntry]):
        self._entries: Tuple[WordEntry, ...] = tuple(entries)
        self._by_index: Dict[int, str] = {}
        for entry in self._entries:
            # First listed entry wins on duplicate indices
            self._by_index.setdefault(entry.index, entry.word)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Wordlist":
        """Build a wordlist from raw ``index word`` lines."""
        return cls(parse_wordlist(lines))

    def lookup(self, index: int) -> Optional[str]:
        """Word stored under ``index``, or ``None`` if there is none."""
        return self._by_index.get(index)

    @property
    def entries(self) -> Tuple[WordEntry, ...]:
        return self._entries

    @property
    def indices(self) -> List[int]:
        """All indices in listing order, duplicates included."""
        return [entry.index for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries)

    def __contains__(self, index: object) -> bool:
        return index in self._by_index

    def __repr__(self) -> str:
        return f"Wordlist({len(self)} entries)"


def builtin_lines() -> List[str]:
    """Raw lines of the bundled EFF long wordlist."""
    text = (resources.files("passphraser") / "data" / BUILTIN_WORDLIST).read_text(encoding="utf-8")
    return text.splitlines()


@lru_cache(maxsize=None)
def builtin_wordlist() -> Wordlist:
    """The bundled EFF long wordlist, parsed once per process."""
    wordlist = Wordlist.from_lines(builtin_lines())
    logger.debug("Loaded built-in wordlist with %d entries", len(wordlist))
    return wordlist
