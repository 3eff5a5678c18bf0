"""
Supported output formats.

Each member knows its Pillow encoder, file extension and MIME type,
and how to turn a pixel buffer into bytes. Adding a format means
adding a member and its branch in ``_prepare``/``encode``.
"""

from __future__ import annotations

import io
from enum import Enum
from pathlib import Path

from PIL import Image

from .errors import EncodeError, UnsupportedFormat

_ALIASES: dict[str, str] = {"jpg": "jpeg"}

_JPEG_MODES = frozenset({"RGB", "L", "CMYK"})
_PNG_MODES = frozenset({"1", "L", "LA", "P", "RGB", "RGBA", "I;16"})
_GIF_MODES = frozenset({"1", "L", "P"})


class ImageFormat(Enum):
    """Closed set of encodable formats."""

    JPEG = ("jpeg", "JPEG", ".jpg", "image/jpeg")
    PNG = ("png", "PNG", ".png", "image/png")
    GIF = ("gif", "GIF", ".gif", "image/gif")

    def __init__(self, label: str, pil_format: str, extension: str, mime: str):
        self.label = label
        self.pil_format = pil_format
        self.extension = extension
        self.mime = mime

    def __str__(self) -> str:
        return self.label

    @property
    def uses_quality(self) -> bool:
        return self is ImageFormat.JPEG

    @classmethod
    def parse(cls, value: ImageFormat | str) -> ImageFormat:
        """Resolve a user-supplied name; raises UnsupportedFormat."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        for fmt in cls:
            if fmt.label == name:
                return fmt
        raise UnsupportedFormat(str(value))

    @classmethod
    def from_extension(cls, path: Path | str) -> ImageFormat:
        """Infer a format from a file suffix. Anything unknown is jpeg."""
        suffix = Path(path).suffix.lower()
        if suffix == ".png":
            return cls.PNG
        if suffix == ".gif":
            return cls.GIF
        return cls.JPEG

    def _prepare(self, image: Image.Image) -> Image.Image:
        """Convert the buffer into a mode this encoder accepts."""
        if self is ImageFormat.JPEG:
            if image.mode not in _JPEG_MODES:
                return image.convert("RGB")
            return image
        if self is ImageFormat.PNG:
            if image.mode == "I":
                return image.convert("I;16")
            if image.mode not in _PNG_MODES:
                return image.convert("RGBA")
            return image
        if image.mode not in _GIF_MODES:
            return image.convert("RGB").quantize(colors=256)
        return image

    def encode(self, image: Image.Image, quality: int = 85) -> bytes:
        """
        Encode a pixel buffer. ``quality`` only affects jpeg.

        Raises EncodeError if Pillow rejects the buffer.
        """
        buf = io.BytesIO()
        try:
            prepared = self._prepare(image)
            if self is ImageFormat.JPEG:
                prepared.save(buf, format=self.pil_format, quality=quality)
            else:
                prepared.save(buf, format=self.pil_format)
        except (OSError, ValueError) as e:
            raise EncodeError(self.label, image.width, str(e)) from e
        return buf.getvalue()
