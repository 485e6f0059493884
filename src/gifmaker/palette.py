"""Named colour palette parsing.

A palette line looks like ``name:RR,GG,BB,AA`` where each channel is exactly
two hex digits. The palette keeps the order of its lines: the entry on the
*i*-th non-blank line becomes colour index *i* in the GIF colour table, so
the order is part of the output format and must never be rearranged.

Grids refer to colours by name. Name lookups go through ``Palette.lookup()``,
a mapping derived from the ordered entries in which the last definition of a
repeated name wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .errors import FormatError

logger = logging.getLogger(__name__)

COLOUR_PATTERN = re.compile(
    r"(\w+):([0-9a-fA-F]{2}),([0-9a-fA-F]{2}),([0-9a-fA-F]{2}),([0-9a-fA-F]{2})"
)


def hex_channel(digits: str) -> int:
    """Convert two hex digits (either case) to an 8-bit channel value."""
    return int(digits, 16)


@dataclass(frozen=True)
class Colour:
    """An 8-bit RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class PaletteEntry:
    """A colour and the name grids use to refer to it."""

    name: str
    colour: Colour


class Palette(Sequence):
    """Ordered, immutable sequence of ``PaletteEntry``.

    Position in the sequence is the colour index written to the GIF.
    """

    def __init__(self, entries: Sequence[PaletteEntry] = ()):
        self._entries = tuple(entries)
        self._lookup = {entry.name: index for index, entry in enumerate(self._entries)}

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Palette):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Palette({list(self._entries)!r})"

    def lookup(self) -> dict[str, int]:
        """Return a name -> index mapping, last definition of a name wins."""
        return dict(self._lookup)

    def index_of(self, name: str) -> int:
        """Return the colour index for *name*.

        Raises:
            FormatError: If no entry has that name
        """
        try:
            return self._lookup[name]
        except KeyError:
            raise FormatError(f"unknown colour: `{name}`") from None

    def rgb_table(self) -> list[int]:
        """Flatten the palette into ``[r, g, b, r, g, b, ...]``."""
        table: list[int] = []
        for entry in self._entries:
            table.extend(entry.colour.rgb)
        return table

    def transparent_index(self) -> int | None:
        """Index of the first fully transparent entry, if any."""
        for index, entry in enumerate(self._entries):
            if entry.colour.alpha == 0:
                return index
        return None


def parse_colour(line: str) -> PaletteEntry:
    """Parse a single ``name:RR,GG,BB,AA`` line.

    Raises:
        FormatError: If the line does not match the colour pattern
    """
    match = COLOUR_PATTERN.fullmatch(line)
    if match is None:
        raise FormatError(f"failed to parse colour: `{line}`", line=line)

    name, red, green, blue, alpha = match.groups()
    return PaletteEntry(
        name=name,
        colour=Colour(
            red=hex_channel(red),
            green=hex_channel(green),
            blue=hex_channel(blue),
            alpha=hex_channel(alpha),
        ),
    )


def parse_palette(text: str) -> Palette:
    """Parse the palette section, one colour per non-blank line.

    Args:
        text: Palette section text

    Returns:
        Palette in line order

    Raises:
        FormatError: If any line is not a valid colour definition
    """
    entries = []
    seen: set[str] = set()
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        entry = parse_colour(line)
        if entry.name in seen:
            logger.warning(
                f"⚠️  Colour `{entry.name}` is defined more than once, "
                "the last definition is used for lookups"
            )
        seen.add(entry.name)
        entries.append(entry)

    palette = Palette(entries)
    logger.debug(f"Parsed palette with {len(palette)} colours")
    return palette
