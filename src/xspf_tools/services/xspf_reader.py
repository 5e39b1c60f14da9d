"""Reader for XSPF playlist documents.

Only the parts of the document needed to build a playlist are looked at: the
playlist ``title`` and the ``location``/``duration`` of each
``trackList/track``. Element lookup ignores XML namespaces, since files in the
wild use both the XSPF namespace and none at all.
"""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - local playlist files only
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..exceptions import PlaylistParseError
from ..models import Playlist
from .playlist_builder import build_playlist
from .track_builder import TrackBuilder, TrackEntry

logger = logging.getLogger(__name__)


@dataclass
class XspfDocument:
    """The parts of an XSPF document the playlist is built from."""

    title: Optional[str] = None
    elements: List[TrackEntry] = field(default_factory=list)


def _local_name(tag: str) -> str:
    """Strip the "{namespace}" part of an element tag."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in _children(element, name):
        return child.text or ""
    return None


def _read_root(root: ET.Element) -> XspfDocument:
    document = XspfDocument()

    for section in root:
        section_name = _local_name(section.tag)
        if section_name == "title":
            document.title = section.text or ""
        elif section_name == "trackList":
            for track in _children(section, "track"):
                document.elements.append(
                    TrackEntry(
                        location=_child_text(track, "location"),
                        duration=_child_text(track, "duration"),
                    )
                )

    return document


def parse_xspf_string(text: Union[str, bytes]) -> XspfDocument:
    """Parse XSPF document text.

    Raises:
        PlaylistParseError: If the text is not well-formed XML
    """
    try:
        root = ET.fromstring(text)  # nosec B314
    except ET.ParseError as e:
        raise PlaylistParseError(f"Cannot parse playlist: {e}") from e

    return _read_root(root)


def read_xspf(path: Path) -> XspfDocument:
    """Read and parse an XSPF file.

    Raises:
        PlaylistParseError: If the file cannot be read or parsed
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise PlaylistParseError(f"Cannot read playlist {path}: {e}") from e

    try:
        document = parse_xspf_string(data)
    except PlaylistParseError as e:
        raise PlaylistParseError(f"{path}: {e}") from e

    logger.info(
        f"Read {len(document.elements)} track entries from {path}"
        + (f" ('{document.title}')" if document.title is not None else "")
    )
    return document


def load_playlist(
    path: Path, track_builder: Optional[TrackBuilder] = None
) -> Playlist:
    """Read an XSPF file and build its playlist.

    Raises:
        PlaylistParseError: If the file cannot be read or parsed
    """
    document = read_xspf(path)
    return build_playlist(document.elements, document.title, track_builder)
