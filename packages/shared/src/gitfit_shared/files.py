"""
Path and naming helpers shared by the CLI and the backend.
"""

from __future__ import annotations

from pathlib import Path

from werkzeug.utils import secure_filename

from .formats import ImageFormat

DEFAULT_MAX_SIZE = 1_048_576
DEFAULT_QUALITY = 85
MIN_WIDTH = 100


def with_format_extension(output_path: Path, fmt: ImageFormat) -> Path:
    """Append ``.<format>`` when the output path has no extension."""
    if output_path.suffix:
        return output_path
    return output_path.with_name(f"{output_path.name}.{fmt.label}")


def safe_download_name(upload_name: str | None, fmt: ImageFormat) -> str:
    """Build the attachment filename for a compressed upload."""
    stem = Path(secure_filename(upload_name or "")).stem
    if not stem:
        stem = "gitfit"
    return f"{stem}-compressed{fmt.extension}"


def is_valid_quality(quality: int) -> bool:
    return 1 <= quality <= 100
