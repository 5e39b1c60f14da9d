"""CLI command modules."""

from .export import export_command
from .playlist import json_command, list_command, summary_command

__all__ = [
    "export_command",
    "json_command",
    "list_command",
    "summary_command",
]
