import io
import logging
import posixpath
from pathlib import Path
from urllib.parse import quote

import httpx
from PIL import Image, UnidentifiedImageError

from sdcards.errors import MediaDownloadError
from sdcards.models import Headword, Translation
from sdcards.utils import media_filename

logger = logging.getLogger(__name__)

# Characters kept verbatim when escaping a single path segment.
PATH_SEGMENT_SAFE = "$&+:=@"


def asset_base(asset_host: str) -> str:
    """Return the asset host as a base URL, adding https:// when no scheme is given."""
    host = (asset_host or "").strip().rstrip("/")
    if host.startswith(("http://", "https://")):
        return host
    return f"https://{host}"


def rewrite_image_path(image_path: str) -> str:
    """Re-escape the filename of an asset path and ask for the 300px variant.

    The asset host serves filenames that were escaped twice, so the filename
    alone is escaped again; the directory part is kept as-is. Only the first
    `/original/` segment is swapped for `/300/`.
    """
    directory, filename = posixpath.split(image_path)
    escaped = quote(filename, safe=PATH_SEGMENT_SAFE)
    path = f"{directory}/{escaped}" if directory else escaped
    return path.replace("/original/", "/300/", 1)


def _to_jpeg(data: bytes) -> bytes:
    try:
        with Image.open(io.BytesIO(data)) as img:
            if img.format == "JPEG":
                return data
            buf = io.BytesIO()
            img.convert("RGB").save(buf, format="JPEG")
    except (UnidentifiedImageError, OSError) as err:
        raise MediaDownloadError(f"downloaded image could not be decoded: {err}") from err
    return buf.getvalue()


class MediaResolver:
    """Downloads headword audio and sense images into the Anki media folder."""

    def __init__(self, collections_dir, asset_host: str, client: httpx.Client):
        self.collections_dir = Path(collections_dir)
        self.asset_host = asset_host
        self.client = client

    def image_url(self, image_path: str) -> str:
        """Absolute URL of the 300px variant of an asset path."""
        return f"{asset_base(self.asset_host)}{rewrite_image_path(image_path)}"

    def download(self, url: str) -> bytes:
        """Fetch `url` in a single attempt and return the body."""
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise MediaDownloadError(
                f"download failed (status {err.response.status_code}): {url}"
            ) from err
        except httpx.RequestError as err:
            raise MediaDownloadError(f"download request failed for {url}: {err}") from err
        return response.content

    def save(self, filename: str, data: bytes) -> Path:
        """Write `data` into the collections directory under `filename`."""
        path = self.collections_dir / filename
        try:
            path.write_bytes(data)
        except OSError as err:
            raise MediaDownloadError(f"could not write {path}: {err}") from err
        return path

    def resolve_audio(self, headword: Headword) -> str:
        """Download the headword pronunciation and return its `[sound:...]` tag.

        Without an audio URL the tag is still emitted with an empty name.
        """
        audio_name = ""
        if headword.audio_url:
            logger.info("Audio URL: %s", headword.audio_url)
            audio_name = media_filename(headword.display_text, "mp3")
            path = self.save(audio_name, self.download(headword.audio_url))
            logger.info("Saved audio file to: %s", path)
        return f"[sound:{audio_name}]"

    def resolve_image(self, translation: Translation, subheadword: str) -> str:
        """Download a translation's image and return an `<img>` tag, or "" without one."""
        if not translation.image_path:
            return ""

        url = self.image_url(translation.image_path)
        logger.info("Image URL: %s", url)
        image_name = media_filename(subheadword, "jpg")
        path = self.save(image_name, _to_jpeg(self.download(url)))
        logger.info("Saved image to: %s", path)
        return f'<img src="{image_name}">'
