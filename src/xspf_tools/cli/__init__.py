"""Command-line interface for the XSPF tools."""
