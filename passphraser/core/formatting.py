"""Formatting presets for rendering passphrase words."""
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Sequence


class PresetType(Enum):
    """Formatting styles."""
    PASCAL_CASE = "pascal"
    KEBAB_CASE = "kebab"
    SNAKE_CASE = "snake"
    ARBITRARY = "arbitrary"
    DEFAULT = "default"

    @property
    def description(self):
        """Get style description."""
        descriptions = {
            PresetType.PASCAL_CASE: "Capitalized words, no delimiter",
            PresetType.KEBAB_CASE: "Words joined with '-'",
            PresetType.SNAKE_CASE: "Words joined with '_'",
            PresetType.ARBITRARY: "Custom delimiter and capitalization",
            PresetType.DEFAULT: "Words joined with a space",
        }
        return descriptions[self]


DELIM_DEFAULT = " "

# (delimiter, capitalize) for every parameterless style
_STYLES = {
    PresetType.PASCAL_CASE: ("", True),
    PresetType.KEBAB_CASE: ("-", False),
    PresetType.SNAKE_CASE: ("_", False),
    PresetType.DEFAULT: (DELIM_DEFAULT, False),
}


@dataclass(frozen=True)
class Preset:
    """A formatting preset. Only ``ARBITRARY`` carries parameters."""
    preset_type: PresetType = PresetType.DEFAULT
    capitalize: bool = False
    delimiter: Optional[str] = None

    def __post_init__(self):
        if self.preset_type != PresetType.ARBITRARY and (self.capitalize or self.delimiter is not None):
            raise ValueError(f"{self.preset_type.name} preset takes no parameters")

    @classmethod
    def pascal(cls) -> "Preset":
        return cls(PresetType.PASCAL_CASE)

    @classmethod
    def kebab(cls) -> "Preset":
        return cls(PresetType.KEBAB_CASE)

    @classmethod
    def snake(cls) -> "Preset":
        return cls(PresetType.SNAKE_CASE)

    @classmethod
    def arbitrary(cls, capitalize: bool = False, delimiter: Optional[str] = None) -> "Preset":
        return cls(PresetType.ARBITRARY, capitalize, delimiter)

    @classmethod
    def default(cls) -> "Preset":
        return cls(PresetType.DEFAULT)

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Preset":
        """Preset for ``pascal``, ``kebab`` or ``snake``; anything else is the default."""
        named = {
            "pascal": PresetType.PASCAL_CASE,
            "kebab": PresetType.KEBAB_CASE,
            "snake": PresetType.SNAKE_CASE,
        }
        return cls(named.get(name or "", PresetType.DEFAULT))

    @property
    def style(self):
        """The ``(delimiter, capitalize)`` pair this preset renders with."""
        if self.preset_type == PresetType.ARBITRARY:
            delimiter = DELIM_DEFAULT if self.delimiter is None else self.delimiter
            return delimiter, self.capitalize
        return _STYLES[self.preset_type]

    def __str__(self):
        if self.preset_type == PresetType.ARBITRARY:
            return f"Arbitrary(capitalize={self.capitalize}, delimiter={self.delimiter!r})"
        return self.preset_type.value.title()


def capitalize(word: str) -> str:
    """Uppercase the first character and leave the rest alone."""
    return word[:1].upper() + word[1:]


def format_words(words: Sequence[str], preset: Preset) -> str:
    """Join words according to ``preset``."""
    delimiter, should_capitalize = preset.style
    if should_capitalize:
        words = [capitalize(word) for word in words]
    return delimiter.join(words)
