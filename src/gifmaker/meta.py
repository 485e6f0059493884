"""Global animation settings parsed from the meta section."""

import logging
import re
from dataclasses import dataclass

from .errors import FormatError

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

DEFAULT_SCALE = 1
DEFAULT_DELAY = 1


@dataclass(frozen=True)
class Settings:
    """Settings that apply to every frame of the animation.

    Attributes:
        scale: Integer upscale factor, each source cell becomes a
            ``scale x scale`` block of pixels
        delay: Default frame delay in hundredths of a second
    """

    scale: int = DEFAULT_SCALE
    delay: int = DEFAULT_DELAY


def parse_int(value: str) -> int | None:
    """Parse a plain decimal integer with an optional sign.

    Returns None for anything else, including surrounding whitespace,
    digit separators and the empty string.
    """
    if _INT_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


def parse_meta(text: str) -> Settings:
    """Parse the meta section into ``Settings``.

    Every non-blank line is a ``key:value`` pair. Recognised keys are
    ``scale`` and ``delay``; values below 1 are raised to 1.

    Args:
        text: Meta section text

    Returns:
        Parsed settings, defaults for absent keys

    Raises:
        FormatError: On an unknown key or a non-integer value
    """
    values = {"scale": DEFAULT_SCALE, "delay": DEFAULT_DELAY}

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = line.split(":")
        key = parts[0]
        if key not in values:
            raise FormatError(f"invalid option: `{raw_line}`", line=raw_line)

        number = parse_int(parts[1]) if len(parts) > 1 else None
        if number is None:
            raise FormatError(f"invalid {key}: `{raw_line}`", line=raw_line)
        values[key] = number

    for key, number in values.items():
        if number < 1:
            logger.warning(f"⚠️  {key} {number} is below 1, using 1")
            values[key] = 1

    settings = Settings(**values)
    logger.debug(f"Parsed settings: {settings}")
    return settings
