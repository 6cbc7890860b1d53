import logging

import httpx

from sdcards import config
from sdcards.services.card_builder import make_cards
from sdcards.services.csv_writer import write_cards
from sdcards.services.extractor import extract_blob, parse_response
from sdcards.services.media import MediaResolver
from sdcards.services.page_fetcher import fetch_page

logger = logging.getLogger(__name__)


def run(
    word: str,
    collections_dir,
    output_file,
    count: int = 1,
    client: httpx.Client | None = None,
) -> int:
    """Look up `word`, download its media and append its cards to `output_file`.

    Returns the number of CSV rows written. Any CardsError other than a
    per-card media failure aborts the run.
    """
    owns_client = client is None
    if owns_client:
        client = config.make_client()

    try:
        html = fetch_page(word, client)
        response = parse_response(extract_blob(html))
        media = MediaResolver(collections_dir, response.asset_host, client)
        cards = make_cards(response, media, count)
        logger.info("Built %d card(s) for %r", len(cards), word)
        return write_cards(cards, output_file)
    finally:
        if owns_client:
            client.close()
