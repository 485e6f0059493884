"""Standardized Error Handling Utilities

Every failure gifmaker reports is a ``GifMakerError``. Parsing problems are
always ``FormatError`` so callers only need one ``except`` clause to report
a bad input document; container problems surface as ``EncodeError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class GifMakerError(Exception):
    """Base exception class for all gifmaker errors."""

    def __init__(
        self, message: str, cause: Exception | None = None, context: dict | None = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.cause:
            return f"{base_msg} (caused by: {self.cause})"
        return base_msg


class FormatError(GifMakerError):
    """Raised when the input document does not follow the text format.

    Attributes:
        line: The offending input line, verbatim, when one applies
        section: Name of the document section the error came from, attached
            by ``section_errors`` once the error leaves a section parser
    """

    def __init__(
        self,
        message: str,
        line: str | None = None,
        section: str | None = None,
        context: dict | None = None,
    ):
        super().__init__(message, context=context)
        self.line = line
        self.section = section

    def __str__(self) -> str:
        if self.section:
            return f"invalid {self.section}: {self.message}"
        return self.message


class EncodeError(GifMakerError):
    """Raised when the animation container cannot be produced."""

    pass


@contextmanager
def section_errors(section: str) -> Iterator[None]:
    """Attach a section name to any ``FormatError`` raised inside the block.

    Usage:
        with section_errors("palette"):
            palette = parse_palette(text)

    Args:
        section: Human-readable section name used in the error message

    Raises:
        FormatError: The original error re-raised with ``section`` set
    """
    try:
        yield
    except FormatError as e:
        if e.section is not None:
            raise
        error = FormatError(e.message, line=e.line, section=section, context=e.context)
        logger.error(f"🚨 Parsing {section} failed: {e.message}")
        raise error from e
