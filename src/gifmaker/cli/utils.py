"""Shared utilities for CLI commands."""

import sys
from pathlib import Path

import click

from ..errors import GifMakerError
from ..io import read_document


def handle_generic_error(command_name: str, error: Exception) -> None:
    """Handle generic command errors with consistent formatting."""
    click.echo(f"❌ {command_name} failed: {error}", err=True)
    sys.exit(1)


def handle_keyboard_interrupt(command_name: str) -> None:
    """Handle keyboard interrupt with consistent formatting."""
    click.echo(f"\n⏹️  {command_name} interrupted by user", err=True)
    sys.exit(1)


def load_document(input_file: Path) -> str:
    """Read INPUT_FILE, exiting with a message when it cannot be read."""
    try:
        return read_document(input_file)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Cannot read {input_file}: {e}", err=True)
        sys.exit(1)


def report_format_error(error: GifMakerError) -> None:
    """Print a document error and exit with status 1."""
    click.echo(f"❌ {error}", err=True)
    line = getattr(error, "line", None)
    if line is not None:
        click.echo(f"   • Line: {line}", err=True)
    sys.exit(1)


def display_common_header(title: str) -> None:
    """Display a common header for CLI commands."""
    click.echo(f"🎞️  {title}")


def display_path_info(label: str, path: Path, emoji: str = "📁") -> None:
    """Display path information with consistent formatting."""
    click.echo(f"{emoji} {label}: {path}")
