import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from sdcards.errors import CsvWriteError
from sdcards.models import Card

logger = logging.getLogger(__name__)


def write_cards(cards: Iterable[Card], output_file) -> int:
    """Append one row per exportable card to `output_file`. Returns rows written.

    The file is created when missing; existing rows are kept. Cards without
    an infinitive are skipped. Rows written before a failure stay in the file.
    """
    path = Path(output_file)
    written = 0
    try:
        with path.open("a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            for card in cards:
                if not card.exportable:
                    continue
                writer.writerow(card.csv_row())
                written += 1
    except (OSError, UnicodeError, csv.Error) as err:
        raise CsvWriteError(f"writing cards to {path} failed: {err}") from err

    logger.info("Wrote %d card(s) to %s", written, path)
    return written
