from pathlib import Path
from typing import List, Optional, Union
from rich.console import Console
from rich.table import Table
from ..core.formatting import Preset
from ..core.passphrase import Passphrase
from ..analysis import CoverageReport, RollDistribution


console = Console()
err_console = Console(stderr=True)

ENTROPY_FAQ = "https://theworld.com/~reinhold/dicewarefaq.html#entropy"


def read_wordlist(path: Union[str, Path]) -> List[str]:
    """Read a wordlist file into raw lines. Raises ``OSError`` if unreadable."""
    with open(path, encoding="utf-8") as wordlist:
        return wordlist.read().splitlines()


def resolve_preset(name: Optional[str], capitalize: bool, delimiter: Optional[str]) -> Preset:
    """Combine the preset name with the capitalize/delimiter overrides."""
    preset = Preset.from_name(name)

    if capitalize:
        preset = Preset.arbitrary(capitalize=True)

    if delimiter is not None:
        preset = Preset.arbitrary(capitalize=capitalize, delimiter=delimiter)

    return preset


class PassphraseView:
    """Renders passphrases and reports to the terminal."""

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or console
        self.err = err or err_console

    def display_passphrase(self, passphrase: Passphrase):
        self.out.print(passphrase.format(), style="bold green", markup=False, highlight=False, soft_wrap=True)

    def display_entropy(self, passphrase: Passphrase):
        """Display wordlist size and entropy."""
        entropy = passphrase.entropy
        self.out.print(f"\nPossibilities: [blue]{entropy.possibilities}[/blue]", highlight=False)
        self.out.print(f"Entropy: [blue]{entropy.bits:.2f} bits[/blue]", highlight=False)
        self.out.print(f"\nMore about entropy at {ENTROPY_FAQ}", highlight=False, soft_wrap=True)

    def display_coverage(self, report: CoverageReport, distribution: RollDistribution):
        """Display wordlist coverage and dice uniformity."""
        table = Table(title=f"Wordlist Coverage ({report.scheme})")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Entries", str(report.entries))
        table.add_row("Index Space", str(report.index_space))
        table.add_row("Covered", f"{report.covered} ({report.coverage:.1%})")
        table.add_row("Missing", str(len(report.missing)))
        table.add_row("Duplicated", str(len(report.duplicates)))
        table.add_row("Unreachable", str(len(report.unreachable)))
        table.add_row("Effective Bits/Word", f"{report.effective_bits_per_word:.2f}")
        self.out.print(table)

        table = Table(title=f"Dice Faces ({distribution.samples} rolls)")
        table.add_column("Face", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_column("Frequency", style="green")

        for offset, count in enumerate(distribution.face_counts):
            table.add_row(
                str(report.scheme.low + offset),
                str(int(count)),
                f"{distribution.frequencies[offset]:.2%}",
            )
        self.out.print(table)

        self.out.print(
            f"Chi-square: [yellow]{distribution.chi_square:.2f}[/yellow] "
            f"({distribution.degrees_of_freedom} degrees of freedom)",
            highlight=False,
        )
        if distribution.hit_rate is not None:
            self.out.print(f"Rolls resolving to a word: [yellow]{distribution.hit_rate:.1%}[/yellow]", highlight=False)

    def display_error(self, message: str):
        self.err.print(f"[red]{message}[/red]", highlight=False)
