from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _null_to(empty):
    """Map JSON null onto the field's empty value instead of failing validation."""
    return BeforeValidator(lambda value: empty() if value is None else value)


Text = Annotated[str, _null_to(str)]
Number = Annotated[int, _null_to(int)]
Flag = Annotated[bool, _null_to(bool)]


def _object(model):
    return Annotated[model, _null_to(model)]


class SDModel(BaseModel):
    """Base for the decoded SD_COMPONENT_DATA payload.

    Keys are camelCase on the wire, unknown keys are ignored and decoded
    values are read-only.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Pronunciation(SDModel):
    id: Number = 0
    ipa: Text = ""
    abc: Text = ""
    spa: Text = ""
    region: Text = ""
    has_video: Number = 0
    speaker_id: Number = 0
    version: Number = 0
    source: Text = ""


class Headword(SDModel):
    display_text: Text = ""
    text_to_pronounce: Text = ""
    audio_url: Text = ""
    pronunciations: Annotated[list[Pronunciation], _null_to(list)] = []
    word_lang: Text = ""
    type: Text = ""


class HeadwordAndQuickdefsProps(SDModel):
    headword: _object(Headword) = Headword()
    quickdef1: _object(Headword) = Headword()
    quickdef2: _object(Headword) = Headword()


class ResultCardHeaderProps(SDModel):
    headword_and_quickdefs_props: _object(HeadwordAndQuickdefsProps) = HeadwordAndQuickdefsProps()


class PartOfSpeech(SDModel):
    abbr_en: Text = ""
    abbr_es: Text = ""
    name_en: Text = ""
    name_es: Text = ""


class Example(SDModel):
    text_en: Text = ""
    text_es: Text = ""


class Translation(SDModel):
    context_en: Text = ""
    context_es: Text = ""
    examples: Annotated[list[Example], _null_to(list)] = []
    gender: Any = None
    id: Number = 0
    image_path: Text = ""
    is_opposite_language_headword: Flag = False
    is_quick_translation: Flag = False
    regions: Annotated[list[Any], _null_to(list)] = []
    register_labels: Annotated[list[Any], _null_to(list)] = []
    translation: Text = ""


class TranslationTexts(SDModel):
    texts: Annotated[list[str], _null_to(list)] = []
    tooltips: Annotated[list[Any], _null_to(list)] = []


class TranslationDisplay(SDModel):
    translation: Text = ""
    gender: Any = None
    is_quick_translation: Flag = False
    image_path: Text = ""
    translations_display: _object(TranslationTexts) = TranslationTexts()
    letters: Text = ""
    context: Text = ""
    regions_display: Annotated[list[Any], _null_to(list)] = []
    register_labels_display: Annotated[list[Any], _null_to(list)] = []
    examples_display: Annotated[list[list[str]], _null_to(list)] = []


class Sense(SDModel):
    context_en: Text = ""
    context_es: Text = ""
    gender: Any = None
    id: Number = 0
    part_of_speech: _object(PartOfSpeech) = PartOfSpeech()
    regions: Annotated[list[Any], _null_to(list)] = []
    register_labels: Annotated[list[Any], _null_to(list)] = []
    translations: Annotated[list[Translation], _null_to(list)] = []
    subheadword: Text = ""
    idx: Number = 0
    context: Text = ""
    regions_display: Annotated[list[Any], _null_to(list)] = []
    register_labels_display: Annotated[list[Any], _null_to(list)] = []
    translations_display: Annotated[list[TranslationDisplay], _null_to(list)] = []

    @property
    def is_usable(self) -> bool:
        """A sense can become a card when its first translation has examples."""
        return bool(self.translations) and bool(self.translations[0].examples)


class PosGroup(SDModel):
    pos: _object(PartOfSpeech) = PartOfSpeech()
    entry_lang: Text = ""
    senses: Annotated[list[Sense], _null_to(list)] = []


class DictionaryEntry(SDModel):
    subheadword: Text = ""
    pos_groups: Annotated[list[PosGroup], _null_to(list)] = []


class Entry(SDModel):
    chambers: Any = None
    collins: Any = None
    neodict: Annotated[list[DictionaryEntry], _null_to(list)] = []


class SdDictionaryResultsProps(SDModel):
    entry: _object(Entry) = Entry()
    hegemone_asset_host: Text = ""


class Response(SDModel):
    result_card_header_props: _object(ResultCardHeaderProps) = ResultCardHeaderProps()
    sd_dictionary_results_props: _object(SdDictionaryResultsProps) = SdDictionaryResultsProps()

    @property
    def headword(self) -> Headword:
        return self.result_card_header_props.headword_and_quickdefs_props.headword

    @property
    def entries(self) -> list[DictionaryEntry]:
        return self.sd_dictionary_results_props.entry.neodict

    @property
    def asset_host(self) -> str:
        return self.sd_dictionary_results_props.hegemone_asset_host


# Anki import order; no header row is written.
CSV_COLUMNS = ("sentence", "infinitive", "picture", "audio", "definition", "conjugation")


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentence: str = ""
    picture: str = ""
    audio: str = ""
    infinitive: str = ""
    definition: str = ""
    conjugation: str = ""
    tag: str = ""

    @property
    def exportable(self) -> bool:
        return bool(self.infinitive)

    def csv_row(self) -> list[str]:
        return [getattr(self, column) for column in CSV_COLUMNS]
