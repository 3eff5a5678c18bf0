"""
Typed errors shared by the compressor and the blob store.

Facades translate these into exit codes or HTTP statuses; the core
only raises them.
"""

from __future__ import annotations


class GitfitError(Exception):
    """Base exception for all gitfit errors."""


class DecodeError(GitfitError):
    """Raised when input bytes cannot be decoded as an image."""


class EncodeError(GitfitError):
    """Raised when a probe encode fails. Aborts the whole search."""

    def __init__(self, format_name: str, width: int, reason: str):
        self.format_name = format_name
        self.width = width
        self.reason = reason
        super().__init__(f"failed to encode {format_name} at width {width}: {reason}")


class UnsupportedFormat(GitfitError):
    """Raised when the target format is not jpeg, png or gif."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(
            f"unsupported file format: {format_name}. Supported formats are: jpeg, png, gif"
        )


class BudgetUnattainable(GitfitError):
    """Raised when no probed width encodes under the byte budget."""

    def __init__(self, byte_budget: int, min_width: int):
        self.byte_budget = byte_budget
        self.min_width = min_width
        super().__init__(
            f"failed to compress image under {byte_budget} bytes "
            f"(minimum width {min_width}px)"
        )


class NotFound(GitfitError):
    """Raised when a blob id is unknown or its entry has expired."""

    def __init__(self, blob_id: str):
        self.blob_id = blob_id
        super().__init__(f"Blob not found or expired: {blob_id}")


class Forbidden(GitfitError):
    """Raised when a token does not authorize retrieval of a blob."""

    def __init__(self, blob_id: str):
        self.blob_id = blob_id
        super().__init__(f"Invalid token for blob: {blob_id}")
