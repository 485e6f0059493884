"""CLI module for gifmaker commands.

Commands live in separate modules and are registered on the ``main`` group.
"""

from pathlib import Path

import click

from .. import __version__
from ..config import DEFAULT_LOGGING_CONFIG
from ..io import setup_logging
from .check_cmd import check
from .make_cmd import make


@click.group()
@click.version_option(version=__version__, prog_name="gifmaker")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=DEFAULT_LOGGING_CONFIG.LOG_LEVEL,
    show_default=True,
    help="Logging verbosity",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_LOGGING_CONFIG.LOG_DIR,
    help="Also write a timestamped log file to this directory",
)
def main(log_level: str, log_dir: Path | None) -> None:
    """🎞️ gifmaker — animated GIFs from plain-text frame grids."""
    setup_logging(log_dir, log_level)


main.add_command(make)
main.add_command(check)

__all__ = ["check", "main", "make"]
