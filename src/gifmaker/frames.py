"""Frame parsing for the image section.

Frames are separated by lines holding a single ``-``. Each frame may start
with an options line such as ``d:20`` or ``delay:20;other:x`` and continues
with rows of comma-separated colour names::

    d:50
    b,w,b
    w,b,w
    -
    w,b,w
    b,w,b
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import FormatError
from .meta import parse_int
from .sections import split_lines_on

logger = logging.getLogger(__name__)

FRAME_SEPARATOR = "-"
DELAY_OPTION_KEYS = ("d", "delay")


@dataclass(frozen=True)
class Frame:
    """One animation step.

    Attributes:
        cells: Rows of colour names, all of the same length
        delay: Frame delay in hundredths of a second, 0 uses the default
    """

    cells: tuple[tuple[str, ...], ...]
    delay: int = 0

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def value(self, x: int, y: int) -> str:
        return self.cells[y][x]


def parse_options(line: str) -> int:
    """Parse a frame options line and return the frame delay.

    Unknown options are ignored. A missing delay option yields 0.

    Raises:
        FormatError: If a delay option does not hold an integer
    """
    delay = 0
    for option in line.split(";"):
        parts = option.strip().split(":")
        if parts[0].strip() not in DELAY_OPTION_KEYS:
            continue
        value = parse_int(parts[1].strip()) if len(parts) > 1 else None
        if value is None:
            raise FormatError(f"invalid delay image option: `{option}`", line=line)
        delay = value
    return delay


def parse_frame(block: str) -> Frame:
    """Parse one frame block into a ``Frame``.

    Args:
        block: Frame text, optionally starting with an options line

    Returns:
        The parsed frame

    Raises:
        FormatError: If the block is empty, its options are invalid or its
            rows differ in length
    """
    text = block.strip()
    if not text:
        raise FormatError("image data is empty")

    rows = [row.strip() for row in text.splitlines()]

    delay = 0
    if ":" in rows[0]:
        delay = parse_options(rows[0])
        rows = rows[1:]

    if not rows:
        raise FormatError("image data is empty")

    cells = []
    width = 0
    for index, row in enumerate(rows):
        tokens = tuple(token.strip() for token in row.split(","))
        if index == 0:
            width = len(tokens)
        if len(tokens) != width:
            raise FormatError("image data have rows of different length", line=row)
        cells.append(tokens)

    return Frame(cells=tuple(cells), delay=delay)


def parse_frames(text: str) -> tuple[Frame, ...]:
    """Parse the image section into frames, in document order.

    Blocks that are blank after trimming are skipped.

    Raises:
        FormatError: If any frame block is malformed; the message names the
            1-based frame number
    """
    frames = []
    for block in split_lines_on(text, FRAME_SEPARATOR):
        if not block.strip():
            continue
        try:
            frames.append(parse_frame(block))
        except FormatError as e:
            raise FormatError(
                f"frame {len(frames) + 1}: {e.message}", line=e.line
            ) from e

    logger.debug(f"Parsed {len(frames)} frames")
    return tuple(frames)
