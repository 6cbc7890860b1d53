class CardsError(RuntimeError):
    """Base error for a failed lookup; `stage` names the step that failed."""

    stage = "pipeline"


class ConfigError(CardsError):
    stage = "config"


class NetworkError(CardsError):
    stage = "fetch"


class PatternNotFoundError(CardsError):
    stage = "extract"


class DecodeError(CardsError):
    stage = "parse"


class NoEntryError(CardsError):
    stage = "flatten"


class MediaDownloadError(CardsError):
    stage = "media"


class CsvWriteError(CardsError):
    stage = "csv"
