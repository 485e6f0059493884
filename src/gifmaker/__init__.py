"""gifmaker - animated GIFs from plain-text frame grids."""

__version__: str = "0.1.0"

from .animation import Animation, assemble, build_animation, convert, create, effective_delay
from .encoder import encode_animation
from .errors import EncodeError, FormatError, GifMakerError
from .frames import Frame, parse_frame, parse_frames
from .meta import Settings, parse_meta
from .palette import Colour, Palette, PaletteEntry, parse_colour, parse_palette
from .raster import IndexedImage, rasterize
from .sections import Sections, split_sections

__all__ = [
    "Animation",
    "Colour",
    "EncodeError",
    "Frame",
    "FormatError",
    "GifMakerError",
    "IndexedImage",
    "Palette",
    "PaletteEntry",
    "Sections",
    "Settings",
    "assemble",
    "build_animation",
    "convert",
    "create",
    "effective_delay",
    "encode_animation",
    "parse_colour",
    "parse_frame",
    "parse_frames",
    "parse_meta",
    "parse_palette",
    "rasterize",
    "split_sections",
]
