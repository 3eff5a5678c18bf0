"""Backend HTTP routes."""

from .compress import compress_bp
from .downloads import downloads_bp

__all__ = ["compress_bp", "downloads_bp"]
