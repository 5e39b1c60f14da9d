"""Command-line interface for the XSPF tools.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..config import get_config
from ..utils.logging_config import setup_logging
from .commands import export_command, json_command, list_command, summary_command


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.version_option(package_name="xspf-tools")
@click.pass_context
def cli(ctx: Any, log_level: Optional[str], log_file: Optional[str]) -> None:
    """XSPF playlist tools.

    List, summarize, dump and export the tracks of an XSPF playlist.
    """
    config = get_config()

    setup_logging(
        log_level=log_level or config.log_level,
        log_file=Path(log_file) if log_file else None,
    )

    ctx.obj = config


# Register commands
cli.add_command(list_command)
cli.add_command(json_command)
cli.add_command(summary_command)
cli.add_command(export_command)


if __name__ == "__main__":
    cli()
