"""
Size-constrained image compression engine.

This package trades resolution for file size: it searches for the
widest resampled encoding that fits under a byte budget. It does no
networking and no user interaction.
"""

from .codec import decode, open_image, resample, scaled_height
from .compress import compress, compress_bytes, compress_file
from .search import CompressionRequest, Probe, SizeSearch

__all__ = [
    "decode",
    "open_image",
    "resample",
    "scaled_height",
    "compress",
    "compress_bytes",
    "compress_file",
    "CompressionRequest",
    "Probe",
    "SizeSearch",
]
