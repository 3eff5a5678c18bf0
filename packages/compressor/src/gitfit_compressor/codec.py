"""
Pillow-backed codec adapter: decoding and Lanczos resampling.

Encoding lives on ``ImageFormat`` so each format carries its own encoder.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from gitfit_shared.errors import DecodeError

logger = logging.getLogger(__name__)


def decode(data: bytes) -> Image.Image:
    """
    Decode bytes into a loaded pixel buffer with EXIF orientation applied.

    Raises DecodeError for anything Pillow cannot read.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            decoded = ImageOps.exif_transpose(img)
            decoded.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"failed to decode image: {e}") from e

    logger.debug("Decoded %s image %dx%d", decoded.mode, decoded.width, decoded.height)
    return decoded


def open_image(path: Path) -> Image.Image:
    """Read and decode an image from disk. OSError propagates for missing files."""
    return decode(Path(path).read_bytes())


def scaled_height(width: int, height: int, target_width: int) -> int:
    """Height that preserves aspect ratio at ``target_width``, never below 1."""
    return max(1, int(round(height * target_width / width)))


def resample(image: Image.Image, width: int) -> Image.Image:
    """Return a copy scaled to ``width`` with a Lanczos filter."""
    if image.mode.startswith("I;16"):
        image = image.convert("I")
    elif image.mode in ("1", "P"):
        # Pillow falls back to nearest-neighbour for these modes
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")
    height = scaled_height(image.width, image.height, width)
    return image.resize((width, height), Image.Resampling.LANCZOS)
