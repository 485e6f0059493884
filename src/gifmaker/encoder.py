"""GIF container encoding of indexed images, backed by Pillow."""

from __future__ import annotations

import io
import logging
import struct
from collections.abc import Sequence

import numpy as np
from PIL import Image

from .config import DEFAULT_ENCODER_CONFIG, EncoderConfig
from .errors import EncodeError
from .raster import IndexedImage

logger = logging.getLogger(__name__)


def validate_image(image: IndexedImage, config: EncoderConfig = DEFAULT_ENCODER_CONFIG) -> None:
    """Check that *image* fits the GIF container limits.

    Raises:
        EncodeError: If the palette is empty or too large, or a dimension
            exceeds what a GIF header can hold
    """
    palette_size = len(image.palette)
    if palette_size == 0:
        raise EncodeError("cannot encode image with an empty palette")
    if palette_size > config.MAX_PALETTE_SIZE:
        raise EncodeError(
            f"palette has {palette_size} colours, GIF allows at most "
            f"{config.MAX_PALETTE_SIZE}"
        )
    if image.width > config.MAX_DIMENSION or image.height > config.MAX_DIMENSION:
        raise EncodeError(
            f"image is too large to encode: {image.width}x{image.height}, "
            f"GIF allows at most {config.MAX_DIMENSION} pixels per side"
        )


def validate_animation(
    images: Sequence[IndexedImage],
    delays: Sequence[int],
    config: EncoderConfig = DEFAULT_ENCODER_CONFIG,
) -> None:
    """Check that images and delays can be encoded, without encoding them.

    Raises:
        EncodeError: If there is nothing to encode, the inputs disagree in
            length, or any image breaks the container limits
    """
    if not images:
        raise EncodeError("must provide at least one image")
    if len(images) != len(delays):
        raise EncodeError(
            f"mismatched image and delay count: {len(images)} images, {len(delays)} delays"
        )
    for image in images:
        validate_image(image, config)


def to_pil_image(image: IndexedImage, config: EncoderConfig = DEFAULT_ENCODER_CONFIG) -> Image.Image:
    """Build a Pillow ``"P"`` image that keeps the palette indices unchanged.

    Raises:
        EncodeError: If the image breaks the GIF container limits
    """
    validate_image(image, config)

    pixels = np.ascontiguousarray(image.pixels, dtype=np.uint8)
    pil_image = Image.frombytes("P", (image.width, image.height), pixels.tobytes())
    pil_image.putpalette(image.palette.rgb_table())
    return pil_image


def encode_animation(
    images: Sequence[IndexedImage],
    delays: Sequence[int],
    config: EncoderConfig | None = None,
) -> bytes:
    """Encode indexed images into animated GIF bytes.

    Args:
        images: Frames in display order
        delays: Per-frame delay in hundredths of a second, parallel to images
        config: Encoder configuration (defaults to DEFAULT_ENCODER_CONFIG)

    Returns:
        The GIF file contents

    Raises:
        EncodeError: If validate_animation rejects the input or Pillow fails
            to write the container
    """
    if config is None:
        config = DEFAULT_ENCODER_CONFIG

    validate_animation(images, delays, config)

    frames = [to_pil_image(image, config) for image in images]

    save_kwargs = {
        "format": "GIF",
        "save_all": True,
        "append_images": frames[1:],
        "duration": [delay * config.DELAY_UNIT_MS for delay in delays],
        "optimize": False,
    }
    if len(frames) > 1:
        save_kwargs["loop"] = config.LOOP

    # GIF has binary transparency, the first fully transparent colour wins.
    transparent_index = images[0].palette.transparent_index()
    if transparent_index is not None:
        save_kwargs["transparency"] = transparent_index

    buffer = io.BytesIO()
    try:
        frames[0].save(buffer, **save_kwargs)
    except (OSError, ValueError, struct.error) as e:
        raise EncodeError("failed to write GIF container", cause=e) from e

    data = buffer.getvalue()
    logger.info(f"ℹ️  Encoded {len(frames)} frames into {len(data)} bytes")
    return data
