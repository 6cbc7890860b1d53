import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from sdcards import config
from sdcards.errors import CardsError, ConfigError
from sdcards.pipeline import run

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="sdcards",
        description="Create Anki cards from a SpanishDict lookup",
    )
    p.add_argument("--word", "-word", default="", help="word to create cards for")
    p.add_argument(
        "--collections-dir",
        "-collectionsDir",
        dest="collections_dir",
        default="",
        help="Anki collection.media directory (e.g. ~/Library/Application Support/Anki2/User 1/collection.media)",
    )
    p.add_argument(
        "--output-file",
        "-outputFile",
        dest="output_file",
        default="",
        help="CSV file to append cards to",
    )
    p.add_argument(
        "--number-defns",
        "-numberDefns",
        dest="number_defns",
        type=int,
        default=1,
        help="number of definitions to turn into cards (default: 1, the most common one)",
    )
    return p.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    if not args.word.strip():
        raise ConfigError("word is required")
    if not args.collections_dir:
        raise ConfigError("collectionsDir is required")
    if not Path(args.collections_dir).is_dir():
        raise ConfigError(f"directory does not exist: {args.collections_dir}")
    if not args.output_file:
        raise ConfigError("outputFile is required")
    if args.number_defns < 1:
        raise ConfigError(f"numberDefns must be at least 1, got {args.number_defns}")


def main(argv=None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    try:
        _setup_logging()
    except ValueError as err:
        # basicConfig rejects unknown level names
        logging.basicConfig(level=logging.INFO)
        logger.error("config failed: invalid SDCARDS_LOG_LEVEL: %s", err)
        return 1

    try:
        validate_args(args)
        logger.info(
            "args: word=%s outputFile=%s collectionsDir=%s numberDefns=%d",
            args.word,
            args.output_file,
            args.collections_dir,
            args.number_defns,
        )
        run(args.word, args.collections_dir, args.output_file, args.number_defns)
    except CardsError as err:
        logger.error("%s failed: %s", err.stage, err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
