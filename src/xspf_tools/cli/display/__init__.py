"""CLI display and formatting utilities."""

from .formatters import display_export_results, display_playlist_summary

__all__ = [
    "display_export_results",
    "display_playlist_summary",
]
