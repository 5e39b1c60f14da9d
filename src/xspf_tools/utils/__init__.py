"""Utility helpers for the XSPF tools."""

from .logging_config import get_package_logger, setup_logging

__all__ = ["get_package_logger", "setup_logging"]
