import logging

from sdcards.errors import ConfigError, MediaDownloadError, NoEntryError
from sdcards.models import Card, Response, Sense
from sdcards.services.media import MediaResolver

logger = logging.getLogger(__name__)


def flatten_senses(response: Response, count: int) -> list[Sense]:
    """Return up to `count` senses in document order.

    Entries, their part-of-speech groups and their senses are walked in the
    order the page lists them; the scan stops once `count` senses are
    collected. Fewer senses than requested is not an error.
    """
    if count < 1:
        raise ConfigError(f"number of definitions must be at least 1, got {count}")
    if not response.entries:
        raise NoEntryError("no dictionary entry")

    senses: list[Sense] = []
    for entry in response.entries:
        for pos_group in entry.pos_groups:
            for sense in pos_group.senses:
                senses.append(sense)
                if len(senses) >= count:
                    return senses
    return senses


def build_card(sense: Sense, audio_tag: str, media: MediaResolver) -> Card:
    """Turn a usable sense into a card. Callers filter unusable senses first."""
    translation = sense.translations[0]
    return Card(
        sentence=translation.examples[0].text_es,
        picture=media.resolve_image(translation, sense.subheadword),
        audio=audio_tag,
        infinitive=sense.subheadword,
        definition=translation.translation,
    )


def make_cards(response: Response, media: MediaResolver, count: int) -> list[Card]:
    """Build cards for the first `count` senses of a lookup.

    A failed headword audio download aborts the run; a failed image download
    only drops the card it belongs to.
    """
    senses = flatten_senses(response, count)
    audio_tag = media.resolve_audio(response.headword)

    cards: list[Card] = []
    for number, sense in enumerate(senses, start=1):
        if not sense.is_usable:
            logger.info("No examples for definition %d (%s), skipping", number, sense.subheadword)
            continue
        try:
            cards.append(build_card(sense, audio_tag, media))
        except MediaDownloadError as err:
            logger.error("Error creating card for %s: %s", sense.subheadword, err)
    return cards
