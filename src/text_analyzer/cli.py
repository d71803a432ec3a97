"""Command-line front-end: `analyse [options] <input> ...`"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from text_analyzer.analyzer import TextAnalyzer
from text_analyzer.config import AnalyzerConfig, Settings, load_settings
from text_analyzer.preprocess import ModelNotFoundError
from text_analyzer.provider import NLPProvider, NoPipelineError

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


class UsageError(Exception):
    """Missing or malformed command-line arguments."""

    def __init__(self, message: str, usage: str = ''):
        super().__init__(message)
        self.usage = usage


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message, self.format_usage())


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser(settings: Optional[Settings] = None) -> ArgumentParser:
    settings = settings or Settings()
    parser = ArgumentParser(
        prog="analyse",
        description="Analyses input text using a range of natural language approaches.",
    )
    parser.add_argument("input", nargs="+", help="The text you want to analyze")
    parser.add_argument(
        "--maximum-alternatives",
        type=positive_int,
        default=settings.maximum_alternatives,
        help="The maximum number of alternatives to suggest",
    )
    parser.add_argument(
        "--far-away",
        type=float,
        default=settings.far_away,
        help="Minimum similarity of suggested alternatives, better be around 0.9",
    )

    flags = parser.add_argument_group("analyses")
    flags.add_argument("-d", "--detect-language", action="store_true", help="Show detected language.")
    flags.add_argument("-s", "--sentiment-analysis", action="store_true",
                       help="Print how positive or negative the input is.")
    flags.add_argument("-l", "--lemmatize", action="store_true", help="Show the stem form of each word in the input.")
    flags.add_argument("-a", "--alternatives", action="store_true",
                       help="Show the alternative words for each word in the input.")
    flags.add_argument("-n", "--names", action="store_true",
                       help="Print names of people, places, and organizations in the input.")
    flags.add_argument("-m", "--mame", action="store_true", help="Detect only the names in the input.")
    flags.add_argument("-p", "--place", action="store_true", help="Detect only the places in the input.")
    flags.add_argument("-o", "--organization", action="store_true",
                       help="Detect only the organizations in the input.")
    flags.add_argument("-e", "--everything", action="store_true", help="Enables all the flags.")

    parser.add_argument("-c", "--config", type=Path, default=None, help="Settings file (YAML).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    return parser


def _settings_path(argv: List[str]) -> Optional[Path]:
    """Find --config before the full parser is built, since it provides the option defaults."""
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument("-c", "--config", type=Path, default=None)
    known, _ = pre_parser.parse_known_args(argv)
    return known.config


def setup_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def parse_args(argv: Sequence[str], settings: Optional[Settings] = None) -> argparse.Namespace:
    return build_parser(settings).parse_args(list(argv))


def main(argv: Optional[Sequence[str]] = None, provider=None) -> int:
    """
    Run the analyzer.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        provider: NLP provider to use (default: NLPProvider built from settings)

    Returns:
        Exit status: 0 on success, 1 if a required model is missing or not configured, 2 on usage errors
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_settings(_settings_path(argv))
        args = parse_args(argv, settings)
    except UsageError as e:
        sys.stderr.write(e.usage)
        sys.stderr.write(f"analyse: error: {e}\n")
        return 2
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        sys.stderr.write(f"analyse: error: could not read settings: {e}\n")
        return 2

    setup_logging(settings.log_level, args.verbose)
    config = AnalyzerConfig.from_namespace(args)
    analyzer = TextAnalyzer(provider or NLPProvider(settings), config, args.input)
    logger.debug(f"Resolved configuration: {analyzer.config}")

    try:
        lines = analyzer.report()
    except (ModelNotFoundError, NoPipelineError) as e:
        logger.error(str(e))
        return 1

    print('\n'.join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
