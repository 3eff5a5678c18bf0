"""
Compression entry points used by the CLI and HTTP facades.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from gitfit_shared.files import DEFAULT_MAX_SIZE, DEFAULT_QUALITY, MIN_WIDTH
from gitfit_shared.formats import ImageFormat

from .codec import decode, open_image
from .search import CompressionRequest, SizeSearch

logger = logging.getLogger(__name__)


def compress(
    image: Image.Image,
    byte_budget: int = DEFAULT_MAX_SIZE,
    fmt: ImageFormat | str = ImageFormat.JPEG,
    quality: int = DEFAULT_QUALITY,
    min_width: int = MIN_WIDTH,
) -> bytes:
    """
    Encode ``image`` at the largest width the search finds under ``byte_budget``.

    The format is resolved before anything else, so an unknown format
    fails with UnsupportedFormat whatever the budget.
    """
    fmt = ImageFormat.parse(fmt)
    request = CompressionRequest(
        format=fmt,
        quality=quality,
        byte_budget=byte_budget,
        min_width=min_width,
    )
    return SizeSearch(image, request).run().data


def compress_bytes(
    data: bytes,
    byte_budget: int = DEFAULT_MAX_SIZE,
    fmt: ImageFormat | str = ImageFormat.JPEG,
    quality: int = DEFAULT_QUALITY,
) -> bytes:
    """Decode an upload and compress it."""
    fmt = ImageFormat.parse(fmt)
    return compress(decode(data), byte_budget, fmt, quality)


def compress_file(
    input_path: Path,
    output_path: Path,
    byte_budget: int = DEFAULT_MAX_SIZE,
    fmt: ImageFormat | str = ImageFormat.JPEG,
    quality: int = DEFAULT_QUALITY,
) -> int:
    """
    Compress ``input_path`` and write the result to ``output_path``.

    Returns the number of bytes written. The output file is only
    created once compression has succeeded.
    """
    fmt = ImageFormat.parse(fmt)
    image = open_image(input_path)
    logger.debug("Compressing %s (%dx%d) to %s", input_path, image.width, image.height, fmt)

    data = compress(image, byte_budget, fmt, quality)

    Path(output_path).write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), output_path)
    return len(data)
