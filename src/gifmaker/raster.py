"""Rasterization of colour-name grids into indexed, upscaled pixel buffers."""

import logging
from dataclasses import dataclass

import numpy as np

from .errors import FormatError
from .frames import Frame
from .palette import Palette

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class IndexedImage:
    """Pixel buffer that stores palette indices instead of colours.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: Row-major array of shape ``(height, width)`` with palette indices
        palette: Palette the indices refer to
    """

    width: int
    height: int
    pixels: np.ndarray
    palette: Palette

    def index_at(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])


def resolve_indices(frame: Frame, palette: Palette) -> np.ndarray:
    """Map every cell of *frame* to its palette index.

    Raises:
        FormatError: If a cell names a colour the palette does not define
    """
    lookup = palette.lookup()
    indices = np.zeros((frame.height, frame.width), dtype=np.int32)
    for y, row in enumerate(frame.cells):
        for x, name in enumerate(row):
            try:
                indices[y, x] = lookup[name]
            except KeyError:
                raise FormatError(
                    f"unknown colour `{name}` at column {x + 1}, row {y + 1}",
                    line=",".join(row),
                ) from None
    return indices


def rasterize(frame: Frame, scale: int, palette: Palette) -> IndexedImage:
    """Turn a frame into an ``IndexedImage`` scaled by *scale*.

    Each source cell becomes a uniform ``scale x scale`` block (nearest
    neighbour replication).

    Args:
        frame: Parsed frame
        scale: Integer upscale factor, at least 1
        palette: Palette used to resolve colour names

    Returns:
        Image of ``frame.width * scale`` by ``frame.height * scale`` pixels

    Raises:
        FormatError: If a cell names an unknown colour
        ValueError: If scale is below 1
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    indices = resolve_indices(frame, palette)
    pixels = np.repeat(np.repeat(indices, scale, axis=0), scale, axis=1)

    height, width = pixels.shape
    logger.debug(f"Rasterized {frame.width}x{frame.height} frame to {width}x{height}")
    return IndexedImage(width=width, height=height, pixels=pixels, palette=palette)
