"""Filename extension classification.

An extension is either one of the well-known audio/video encodings
(``KnownExtension``) or an ``UnknownExtension`` carrying the original text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..exceptions import NoExtensionError


class KnownExtension(str, Enum):
    """Recognized file encodings."""

    MP3 = "mp3"
    FLAC = "flac"
    OGG = "ogg"
    M4A = "m4a"
    MP4 = "mp4"
    MKV = "mkv"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownExtension:
    """Any other extension, kept exactly as it was written."""

    raw: str

    def __str__(self) -> str:
        return self.raw


Extension = Union[KnownExtension, UnknownExtension]

_KNOWN_BY_NAME = {member.value: member for member in KnownExtension}


def classify_extension(raw: str) -> Extension:
    """Classify an extension string.

    Matching is case-insensitive. Any other text, including a leading dot,
    is kept unchanged in the ``UnknownExtension``.

    Args:
        raw: Extension text, e.g. "mp3", "FLAC" or "aiff"

    Returns:
        The matching ``KnownExtension`` member, or ``UnknownExtension(raw)``

    Raises:
        NoExtensionError: If there is no extension text at all
    """
    if not raw:
        raise NoExtensionError(f"No extension given: {raw!r}")

    known = _KNOWN_BY_NAME.get(raw.lower())
    if known is not None:
        return known
    return UnknownExtension(raw)


def render_extension(extn: Extension) -> str:
    """Render an extension back to the text used in filenames."""
    return str(extn)
