"""Validate a text document and summarise its frames without writing a GIF."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..animation import build_animation
from ..encoder import validate_animation
from ..errors import GifMakerError
from .utils import load_document, report_format_error


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def check(input_file: Path) -> None:
    """Parse and rasterize INPUT_FILE, then print a frame summary."""
    text = load_document(input_file)

    try:
        animation = build_animation(text)
        validate_animation(animation.images, animation.delays)
    except GifMakerError as e:
        report_format_error(e)
        return

    console = Console()

    table = Table(title=f"🎞️  {input_file.name}")
    table.add_column("Frame", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Delay (1/100 s)", justify="right")

    for number, (image, delay) in enumerate(zip(animation.images, animation.delays), start=1):
        table.add_row(str(number), f"{image.width}x{image.height}", str(delay))

    console.print(table)
    console.print(
        f"🎨 Palette: {len(animation.palette)} colours, scale {animation.settings.scale}"
    )

    console.print("✅ Document is valid")
