"""End-to-end conversion of a text document into an animated GIF.

The pipeline runs strictly forward::

    text -> sections -> (settings, palette, frames) -> indexed images + delays -> bytes

Every stage is a pure function of its input. The first error aborts the
conversion; there is never partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO

from .config import EncoderConfig
from .encoder import encode_animation
from .errors import section_errors
from .frames import Frame, parse_frames
from .meta import Settings, parse_meta
from .palette import Palette, parse_palette
from .raster import IndexedImage, rasterize
from .sections import split_sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Animation:
    """Rasterized frames ready for the container encoder."""

    images: tuple[IndexedImage, ...]
    delays: tuple[int, ...]
    settings: Settings
    palette: Palette

    def __len__(self) -> int:
        return len(self.images)


def effective_delay(frame: Frame, settings: Settings) -> int:
    """The frame's own delay when positive, else the global default."""
    return frame.delay if frame.delay > 0 else settings.delay


def assemble(settings: Settings, palette: Palette, frames: Sequence[Frame]) -> Animation:
    """Rasterize frames in order and pair each with its effective delay.

    Frames are never reordered, merged or dropped.

    Raises:
        FormatError: If a frame uses a colour the palette does not define
    """
    images = []
    delays = []
    for number, frame in enumerate(frames, start=1):
        with section_errors(f"frame {number}"):
            images.append(rasterize(frame, settings.scale, palette))
        delays.append(effective_delay(frame, settings))
    return Animation(
        images=tuple(images), delays=tuple(delays), settings=settings, palette=palette
    )


def build_animation(text: str) -> Animation:
    """Parse a document and rasterize all of its frames.

    Args:
        text: Complete input document

    Returns:
        The assembled animation

    Raises:
        FormatError: If the document is malformed
    """
    sections = split_sections(text)

    with section_errors("metadata"):
        settings = parse_meta(sections.meta)
    with section_errors("palette"):
        palette = parse_palette(sections.palette)
    with section_errors("images"):
        frames = parse_frames(sections.frames)

    animation = assemble(settings, palette, frames)
    logger.info(
        f"ℹ️  Assembled {len(animation)} frames "
        f"(scale={settings.scale}, palette={len(palette)} colours)"
    )
    return animation


def convert(text: str, config: EncoderConfig | None = None) -> bytes:
    """Convert a document into GIF bytes.

    Raises:
        FormatError: If the document is malformed
        EncodeError: If the GIF container cannot be written
    """
    animation = build_animation(text)
    return encode_animation(animation.images, animation.delays, config)


def create(text: str, stream: BinaryIO, config: EncoderConfig | None = None) -> None:
    """Convert a document and write the GIF to a binary stream."""
    stream.write(convert(text, config))
