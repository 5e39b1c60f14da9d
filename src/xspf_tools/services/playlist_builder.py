"""Collect tracks from playlist track elements into a ``Playlist``."""

import logging
from typing import Iterable, List, Optional

from ..exceptions import TrackBuildError
from ..models import Playlist, Track
from .track_builder import TrackBuilder, TrackElement

logger = logging.getLogger(__name__)


def build_playlist(
    elements: Iterable[TrackElement],
    title: Optional[str] = None,
    track_builder: Optional[TrackBuilder] = None,
) -> Playlist:
    """Build a playlist from track elements, keeping document order.

    Elements that cannot be turned into a track (no location, unsupported
    URI, bad path) are skipped so that one malformed entry does not lose the
    rest of the playlist.

    Args:
        elements: Track elements in document order
        title: Playlist title, if the document has one
        track_builder: Builder to use (defaults to a new ``TrackBuilder``)

    Returns:
        Playlist holding every track that could be built
    """
    builder = track_builder or TrackBuilder()

    tracks: List[Track] = []
    skipped = 0
    for position, element in enumerate(elements, start=1):
        try:
            track = builder.from_element(element)
        except TrackBuildError as e:
            skipped += 1
            logger.warning(f"Skipping track {position}: {e}")
            continue

        logger.debug(f"Track {position}: {track.info}")
        tracks.append(track)

    if skipped:
        logger.info(f"Built playlist with {len(tracks)} tracks ({skipped} skipped)")
    else:
        logger.info(f"Built playlist with {len(tracks)} tracks")

    return Playlist(tracks=tracks, title=title)
