"""Configuration management for the gitfit backend."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Backend configuration loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 8080
    frontend_url: str = "http://localhost:5173"
    static_dir: Path = Path("web/dist")
    blob_ttl: float = 300.0
    sweep_interval: float = 60.0
    max_upload_bytes: int = 32 * 1024 * 1024

    @classmethod
    def load(cls) -> Config:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("GITFIT_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", os.getenv("GITFIT_PORT", "8080"))),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5173"),
            static_dir=Path(os.getenv("GITFIT_STATIC_DIR", "web/dist")),
            blob_ttl=float(os.getenv("GITFIT_BLOB_TTL", "300.0")),
            sweep_interval=float(os.getenv("GITFIT_SWEEP_INTERVAL", "60.0")),
            max_upload_bytes=int(os.getenv("GITFIT_MAX_UPLOAD_BYTES", str(32 * 1024 * 1024))),
        )
