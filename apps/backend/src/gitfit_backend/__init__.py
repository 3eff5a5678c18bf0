"""
gitfit backend - Flask API for compressing uploads

This app:
1. Accepts image uploads and compresses them under a byte budget
2. Holds each result in memory for a few minutes
3. Serves it back through a token-gated download link

Deployment:
    pip install gitfit
    gitfit-server
"""

from .app import create_app
from .config import Config

__all__ = ["create_app", "Config"]
