"""
gitfit command-line tool.

Deployment:
    pip install gitfit
    gitfit --input photo.png --output avatar.jpg --maxsize 500000
"""

from .cli import cli, main
from .config import CompressOptions, UsageError

__all__ = ["cli", "main", "CompressOptions", "UsageError"]
