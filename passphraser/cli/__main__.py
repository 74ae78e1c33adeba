import logging
import sys
import click
from rich.logging import RichHandler
from .. import __version__
from ..config import DEFAULT_LENGTH, ENV_PREFIX
from ..core.formatting import PresetType
from ..core.passphrase import Passphraser
from ..core.wordlist import Wordlist, builtin_wordlist
from ..analysis import analyze_wordlist, roll_distribution
from .interface import PassphraseView, err_console, read_wordlist, resolve_preset


logger = logging.getLogger(__name__)

CHECK_SAMPLES = 10000

NAMED_PRESETS = [PresetType.PASCAL_CASE, PresetType.KEBAB_CASE, PresetType.SNAKE_CASE]
PRESET_HELP = "Formatting preset to use: " + "; ".join(
    f"{preset_type.value}: {preset_type.description}" for preset_type in NAMED_PRESETS
) + "."


@click.command(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.version_option(__version__, prog_name="passphraser")
@click.option('--length', '-l', type=click.IntRange(min=0), default=DEFAULT_LENGTH, show_default=True,
              help='How many words to generate.')
@click.option('--wordlist', '-w', type=click.Path(), help='Path to a custom wordlist.')
@click.option('--entropy', '-e', is_flag=True, help='Show entropy of the passphrase.')
@click.option('--capitalize', '-c', is_flag=True, help='Capitalize words.')
@click.option('--delimiter', '-d', help='Delimiter to use for joining words.')
@click.option('--preset', '-p', type=click.Choice([preset_type.value for preset_type in NAMED_PRESETS]),
              help=PRESET_HELP)
@click.option('--check', is_flag=True, help='Report wordlist coverage and dice uniformity instead.')
@click.option('--verbose', '-v', is_flag=True, help='Log what the generator is doing.')
def main(length, wordlist, entropy, capitalize, delimiter, preset, check, verbose):
    """Generates strong Diceware passphrases."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    view = PassphraseView()

    if wordlist:
        try:
            words = Wordlist.from_lines(read_wordlist(wordlist))
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Reading %s failed: %s", wordlist, e)
            view.display_error("Couldn't read the wordlist. Make sure the file exists.")
            sys.exit(1)
        logger.info("Loaded %d entries from %s", len(words), wordlist)
    else:
        words = builtin_wordlist()

    if check:
        report = analyze_wordlist(words)
        distribution = roll_distribution(CHECK_SAMPLES, report.scheme, words)
        view.display_coverage(report, distribution)
        return

    builder = Passphraser(length).wordlist(words)
    passphrase = builder.preset(resolve_preset(preset, capitalize, delimiter)).generate()

    if not passphrase.words:
        view.display_error("Couldn't generate a passphrase with given parameters.")
        sys.exit(1)

    view.display_passphrase(passphrase)
    if entropy:
        view.display_entropy(passphrase)


if __name__ == "__main__":
    main()
