"""Splitting of an input document into its meta, palette and image sections."""

import logging
from typing import NamedTuple

from .errors import FormatError

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "---"


class Sections(NamedTuple):
    """Raw text of the three document sections, in document order."""

    meta: str
    palette: str
    frames: str


def split_lines_on(text: str, separator: str) -> list[str]:
    """Split *text* on lines that consist solely of *separator*.

    Whitespace around the separator is ignored. The separator lines
    themselves are not part of any chunk.
    """
    chunks: list[list[str]] = [[]]
    for line in text.splitlines():
        if line.strip() == separator:
            chunks.append([])
        else:
            chunks[-1].append(line)
    return ["\n".join(chunk) for chunk in chunks]


def split_sections(text: str) -> Sections:
    """Split a document into meta, palette and frames text.

    Args:
        text: Complete input document

    Returns:
        The three section texts

    Raises:
        FormatError: If the document does not have exactly three sections
    """
    parts = split_lines_on(text, SECTION_SEPARATOR)
    if len(parts) != 3:
        raise FormatError(
            "invalid input file: expecting meta, palette, and image sections "
            f"separated by `{SECTION_SEPARATOR}` lines (found {len(parts)} sections)"
        )
    logger.debug(f"Split document into sections of {[len(p) for p in parts]} chars")
    return Sections(*parts)
