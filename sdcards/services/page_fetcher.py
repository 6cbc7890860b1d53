import logging
from urllib.parse import quote

import httpx

from sdcards import config
from sdcards.errors import NetworkError

logger = logging.getLogger(__name__)


def lookup_url(word: str) -> str:
    """Return the lookup page URL for `word`."""
    return f"{config.get_lookup_url()}/{quote(word.strip(), safe='')}"


def fetch_page(word: str, client: httpx.Client) -> str:
    """Fetch the dictionary page for `word`. Single attempt, no retry."""
    url = lookup_url(word)
    logger.info("Fetching %s", url)

    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as err:
        raise NetworkError(
            f"lookup failed (status {err.response.status_code}) for {url}"
        ) from err
    except httpx.RequestError as err:
        raise NetworkError(f"lookup request failed for {url}: {err}") from err

    return response.text
