"""Option resolution for the gitfit CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gitfit_shared.files import DEFAULT_MAX_SIZE, DEFAULT_QUALITY, is_valid_quality, with_format_extension
from gitfit_shared.formats import ImageFormat


class UsageError(ValueError):
    """Raised when command-line options are inconsistent."""


@dataclass(frozen=True)
class CompressOptions:
    """Validated options for one CLI compression run."""

    input_path: Path
    output_path: Path
    max_size: int = DEFAULT_MAX_SIZE
    format: ImageFormat = ImageFormat.JPEG
    quality: int = DEFAULT_QUALITY

    @classmethod
    def resolve(
        cls,
        input_path: Path | None,
        output_path: Path | None,
        max_size: int = DEFAULT_MAX_SIZE,
        format_name: str | None = None,
        quality: int = DEFAULT_QUALITY,
    ) -> CompressOptions:
        """
        Validate raw options and fill in defaults.

        The format is inferred from the input extension when omitted, and
        the output path gets ``.<format>`` appended if it has no extension.

        Raises UsageError, or UnsupportedFormat for an unknown format.
        """
        if input_path is None or output_path is None:
            raise UsageError("you must provide both --input and --output file paths")

        if not input_path.exists():
            raise UsageError(f"input file {input_path} does not exist")

        if format_name:
            fmt = ImageFormat.parse(format_name)
        else:
            fmt = ImageFormat.from_extension(input_path)

        if not is_valid_quality(quality):
            raise UsageError("value for --quality must be between 1 and 100 inclusive")

        if max_size <= 0:
            raise UsageError("value for --maxsize must be a positive number of bytes")

        return cls(
            input_path=input_path,
            output_path=with_format_extension(output_path, fmt),
            max_size=max_size,
            format=fmt,
            quality=quality,
        )
