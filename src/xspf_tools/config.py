"""Configuration management for the XSPF tools."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Export settings
        self.export_directory = Path(
            os.getenv(
                "XSPF_TOOLS_EXPORT_DIRECTORY",
                str(Path.home() / "Music" / "xspf-export"),
            )
        ).expanduser()
        self.overwrite_existing = (
            os.getenv("XSPF_TOOLS_OVERWRITE", "false").strip().lower() in _TRUE_VALUES
        )

        # Output settings
        self.json_indent = int(os.getenv("XSPF_TOOLS_JSON_INDENT", "2"))

        # Logging settings
        self.log_level = os.getenv("XSPF_TOOLS_LOG_LEVEL", "INFO").upper()


def get_config() -> Config:
    """Get application configuration."""
    return Config()
