"""Render a text document into an animated GIF file."""

from pathlib import Path

import click

from ..animation import convert
from ..errors import GifMakerError
from ..io import atomic_write
from .utils import (
    display_common_header,
    display_path_info,
    handle_generic_error,
    handle_keyboard_interrupt,
    load_document,
    report_format_error,
)


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only print errors",
)
def make(input_file: Path, output_file: Path, quiet: bool) -> None:
    """Render INPUT_FILE into an animated GIF at OUTPUT_FILE.

    INPUT_FILE holds three sections separated by `---` lines: meta settings,
    the named colour palette and the frames.
    """
    try:
        text = load_document(input_file)

        if not quiet:
            display_common_header("gifmaker")
            display_path_info("Input", input_file, "📄")

        try:
            data = convert(text)
        except GifMakerError as e:
            report_format_error(e)
            return

        with atomic_write(output_file) as f:
            f.write(data)

        if not quiet:
            display_path_info("Output", output_file, "🖼️ ")
            click.echo(f"✅ Wrote {len(data)} bytes")

    except KeyboardInterrupt:
        handle_keyboard_interrupt("make")
    except OSError as e:
        handle_generic_error("make", e)
