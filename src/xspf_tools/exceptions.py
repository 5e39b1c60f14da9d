"""Exceptions raised by the XSPF tools."""


class XspfToolsError(Exception):
    """Base exception for all XSPF tools errors."""

    pass


class NoExtensionError(XspfToolsError, ValueError):
    """Raised when a filename has no extension to classify."""

    pass


class TrackBuildError(XspfToolsError):
    """Raised when a single track cannot be built from its source data."""

    pass


class UnsupportedUriError(TrackBuildError):
    """Raised for track locations that are not ``file:///`` URIs."""

    pass


class MissingLocationError(TrackBuildError):
    """Raised when a track element has no location."""

    pass


class TrackPathError(TrackBuildError):
    """Raised when a path lacks the ``<date>/<filename>`` segments."""

    pass


class MissingExtensionError(TrackBuildError):
    """Raised when a track filename has no extension."""

    pass


class PlaylistParseError(XspfToolsError):
    """Raised when a playlist document cannot be read or parsed."""

    pass


class ExportError(XspfToolsError):
    """Raised for invalid export parameters."""

    pass
