"""Pytest configuration and shared fixtures."""

import io
import json

import httpx
import pytest
from PIL import Image

from sdcards.models import Response

LOOKUP_URL = "https://dict.test/translate"
AUDIO_URL = "https://audio.test/correr.mp3"
ASSET_HOST = "assets.example.com"


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
    """Point every test at a fake lookup endpoint."""
    monkeypatch.setenv("SDCARDS_LOOKUP_URL", LOOKUP_URL)
    monkeypatch.setenv("SDCARDS_TIMEOUT", "5")
    monkeypatch.delenv("SDCARDS_USER_AGENT", raising=False)
    monkeypatch.delenv("SDCARDS_LOG_LEVEL", raising=False)


def sense(subheadword, translation="", examples=None, image_path="", **extra):
    return {
        "subheadword": subheadword,
        "gender": extra.pop("gender", None),
        "translations": [
            {
                "translation": translation,
                "examples": examples if examples is not None else [],
                "imagePath": image_path,
            }
        ],
        **extra,
    }


def example(text_es, text_en=""):
    return {"textEs": text_es, "textEn": text_en}


def payload(pos_groups=None, audio_url="", display_text="correr", neodict=None):
    if neodict is None:
        neodict = [{"subheadword": display_text, "posGroups": pos_groups or []}]
    return {
        "resultCardHeaderProps": {
            "headwordAndQuickdefsProps": {
                "headword": {
                    "displayText": display_text,
                    "textToPronounce": display_text,
                    "audioUrl": audio_url,
                }
            }
        },
        "sdDictionaryResultsProps": {
            "entry": {"neodict": neodict},
            "hegemoneAssetHost": ASSET_HOST,
        },
    }


def page(data) -> str:
    blob = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
    return (
        "<html><head><script>window.SD_COMPONENT_DATA = "
        f"{blob};</script>\n<script>window.SD_OTHER = {{\"a\": 1}};</script></head>"
        "<body></body></html>"
    )


class FakeSite:
    """Serves canned responses through httpx.MockTransport and records requests."""

    def __init__(self):
        self.routes = {}
        self.requested = []
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="not found")
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        if isinstance(route, str):
            return httpx.Response(200, text=route)
        return httpx.Response(200, content=route)


@pytest.fixture
def site():
    fake = FakeSite()
    yield fake
    fake.client.close()


@pytest.fixture
def sample_image_bytes():
    """Simple test image as PNG bytes."""
    img = Image.new("RGB", (100, 100), color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf.read()


@pytest.fixture
def sample_jpeg_bytes():
    img = Image.new("RGB", (40, 30), color="red")
    buf = io.BytesIO()
    img.save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def correr_payload():
    """Two part-of-speech groups; the second sense has no examples."""
    return payload(
        audio_url=AUDIO_URL,
        pos_groups=[
            {
                "pos": {"nameEn": "intransitive verb", "abbrEn": "intr"},
                "senses": [
                    sense(
                        "correr",
                        "to run",
                        [example("Me gusta correr.", "I like to run.")],
                        image_path="/original/run.png",
                        gender="m",
                    ),
                    sense("correr", "to hurry", [], gender={"masc": True}),
                ],
            },
            {
                "pos": {"nameEn": "transitive verb"},
                "senses": [
                    sense(
                        "correrse",
                        "to move over",
                        [example("Córrete un poco.", "Move over a bit.")],
                    ),
                ],
            },
        ],
    )


@pytest.fixture
def correr_response(correr_payload):
    return Response.model_validate(correr_payload)


@pytest.fixture
def make_sense():
    return sense


@pytest.fixture
def make_example():
    return example


@pytest.fixture
def make_payload():
    return payload


@pytest.fixture
def make_page():
    return page
