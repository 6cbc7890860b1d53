import json
import logging
import re

from pydantic import ValidationError

from sdcards.errors import DecodeError, PatternNotFoundError
from sdcards.models import Response

logger = logging.getLogger(__name__)

MARKER = "SD_COMPONENT_DATA"

# `SD_COMPONENT_DATA = `, `window.SD_COMPONENT_DATA=` and similar; the value follows.
_ASSIGNMENT = re.compile(re.escape(MARKER) + r"\s*[^=;\n]*?=\s*")
_FIRST_TERMINATOR = re.compile(r"(.*?);", re.DOTALL)
_DECODER = json.JSONDecoder()


def extract_blob(html: str) -> str:
    """Return the JSON text assigned to SD_COMPONENT_DATA in a lookup page.

    The captured segment stops at the `;` that closes the JSON value, so a
    `;` inside a string literal or script following the statement is never
    swallowed. When the value cannot be scanned as JSON the text up to the
    first `;` is returned and decoding reports the problem.
    """
    match = _ASSIGNMENT.search(html or "")
    if match is None:
        raise PatternNotFoundError(f"{MARKER} not found")

    start = match.end()
    try:
        _, end = _DECODER.raw_decode(html, start)
    except json.JSONDecodeError:
        fallback = _FIRST_TERMINATOR.match(html, start)
        if fallback is None:
            raise PatternNotFoundError(f"{MARKER} assignment is not terminated") from None
        return fallback.group(1).strip()
    logger.debug("Extracted %s blob (%d chars)", MARKER, end - start)
    return html[start:end]


def parse_response(blob: str) -> Response:
    """Decode an extracted blob into a Response."""
    try:
        return Response.model_validate_json(blob)
    except ValidationError as err:
        raise DecodeError(f"invalid {MARKER} payload: {err}") from err
