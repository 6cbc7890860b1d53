import time

_last_suffix = 0

# Spaces and path separators; a media name must stay one file inside collection.media.
_FILENAME_UNSAFE = str.maketrans({" ": "_", "/": "_", "\\": "_"})


def unique_suffix() -> int:
    """Nanosecond timestamp, strictly increasing across calls in this process."""
    global _last_suffix
    _last_suffix = max(time.time_ns(), _last_suffix + 1)
    return _last_suffix


def media_filename(name: str, extension: str) -> str:
    """Build a collision-free media filename such as 'correr1712345678901234567.mp3'.

    Args:
        name: Headword or subheadword the file belongs to
        extension: File extension without the dot

    Returns:
        The name with spaces and path separators replaced by underscores, a unique suffix and the extension
    """
    return f"{name.translate(_FILENAME_UNSAFE)}{unique_suffix()}.{extension}"
