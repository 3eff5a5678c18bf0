"""
Shared vocabulary for gitfit: output formats, typed errors and
path helpers.

The package is a dependency of the compressor, the backend and the CLI.
"""

from .errors import (
    BudgetUnattainable,
    DecodeError,
    EncodeError,
    Forbidden,
    GitfitError,
    NotFound,
    UnsupportedFormat,
)
from .files import (
    DEFAULT_MAX_SIZE,
    DEFAULT_QUALITY,
    MIN_WIDTH,
    is_valid_quality,
    safe_download_name,
    with_format_extension,
)
from .formats import ImageFormat

__all__ = [
    # Formats
    "ImageFormat",
    # Errors
    "GitfitError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormat",
    "BudgetUnattainable",
    "NotFound",
    "Forbidden",
    # Files
    "DEFAULT_MAX_SIZE",
    "DEFAULT_QUALITY",
    "MIN_WIDTH",
    "is_valid_quality",
    "safe_download_name",
    "with_format_extension",
]
