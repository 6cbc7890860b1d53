import os

import httpx

from sdcards.errors import ConfigError

DEFAULTS = {
    "lookup_url": "https://www.spanishdict.com/translate",
    "timeout": "30",
    "user_agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
    "log_level": "INFO",
}


def get_lookup_url() -> str:
    """Return the dictionary lookup endpoint, without a trailing slash."""
    url = os.environ.get("SDCARDS_LOOKUP_URL", "").strip()
    return (url or DEFAULTS["lookup_url"]).rstrip("/")


def get_timeout() -> float:
    raw = os.environ.get("SDCARDS_TIMEOUT", "").strip() or DEFAULTS["timeout"]
    try:
        timeout = float(raw)
    except ValueError as err:
        raise ConfigError(f"SDCARDS_TIMEOUT must be a number, got {raw!r}") from err
    if timeout <= 0:
        raise ConfigError(f"SDCARDS_TIMEOUT must be positive, got {raw!r}")
    return timeout


def get_user_agent() -> str:
    return os.environ.get("SDCARDS_USER_AGENT", "").strip() or DEFAULTS["user_agent"]


def get_log_level() -> str:
    return os.environ.get("SDCARDS_LOG_LEVEL", "").strip().upper() or DEFAULTS["log_level"]


def make_client() -> httpx.Client:
    """Build the HTTP client shared by the page fetch and the media downloads."""
    return httpx.Client(
        timeout=get_timeout(),
        headers={"User-Agent": get_user_agent()},
        follow_redirects=True,
    )
