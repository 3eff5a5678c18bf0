"""
Ephemeral, token-gated in-memory storage for compression results.

Entries live for a fixed TTL. Reads treat an entry as gone once its
expiry has passed; a janitor thread physically removes expired entries
on a fixed interval. The lock guards only map reads and writes.
"""
from __future__ import annotations

import hmac
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable

from gitfit_shared.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300.0
DEFAULT_SWEEP_INTERVAL = 60.0
TOKEN_BYTES = 16


@dataclass(frozen=True)
class StoredBlob:
    """A compression result held by the store."""
    id: str
    token: str
    data: bytes
    mime: str
    filename: str
    created_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass(frozen=True)
class BlobTicket:
    """What ``put`` hands back: enough to build a download URL."""
    id: str
    token: str
    expires_at: float


class EphemeralBlobStore:
    """Holds blobs keyed by random id, gated by a random token."""
    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL,
        clock: Callable[[], float] = time.time,
        autostart: bool = True,
    ):
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self._clock = clock

        self._lock = threading.Lock()
        self._blobs: dict[str, StoredBlob] = {}

        self._shutdown_event = threading.Event()
        self._janitor: threading.Thread | None = None

        if autostart:
            self.start()

    def __len__(self) -> int:
        with self._lock:
            return len(self._blobs)

    def start(self) -> None:
        """Start the janitor thread if it is not already running."""
        if self._janitor is not None and self._janitor.is_alive():
            return
        self._shutdown_event.clear()
        self._janitor = threading.Thread(
            target=self._run_janitor,
            name="blob-janitor",
            daemon=True,
        )
        self._janitor.start()
        logger.debug("Blob janitor started (interval %.1fs)", self.sweep_interval)

    def shutdown(self, timeout: float | None = None) -> None:
        """Stop the janitor and wait for it to exit."""
        self._shutdown_event.set()
        janitor = self._janitor
        if janitor is None:
            return
        if janitor is not threading.current_thread():
            janitor.join(timeout)
            if janitor.is_alive():
                logger.warning("Blob janitor did not stop within %s seconds", timeout)
        if not janitor.is_alive():
            self._janitor = None

    @property
    def running(self) -> bool:
        return self._janitor is not None and self._janitor.is_alive()

    def put(self, data: bytes, mime: str, filename: str) -> BlobTicket:
        """Store ``data`` and return its id, token and expiry."""
        token = secrets.token_hex(TOKEN_BYTES)
        created_at = self._clock()
        expires_at = created_at + self.ttl

        with self._lock:
            blob_id = secrets.token_hex(TOKEN_BYTES)
            while blob_id in self._blobs:
                blob_id = secrets.token_hex(TOKEN_BYTES)
            self._blobs[blob_id] = StoredBlob(
                id=blob_id,
                token=token,
                data=data,
                mime=mime,
                filename=filename,
                created_at=created_at,
                expires_at=expires_at,
            )

        return BlobTicket(id=blob_id, token=token, expires_at=expires_at)

    def lookup(self, blob_id: str, token: str) -> StoredBlob:
        """
        Return the live entry for ``blob_id`` if ``token`` matches.

        Raises:
            NotFound: Unknown id, or the entry has expired
            Forbidden: Token mismatch
        """
        with self._lock:
            blob = self._blobs.get(blob_id)

        if blob is None or blob.is_expired(self._clock()):
            raise NotFound(blob_id)

        if not hmac.compare_digest(token.encode("utf-8"), blob.token.encode("utf-8")):
            raise Forbidden(blob_id)

        return blob

    def get(self, blob_id: str, token: str) -> bytes:
        """Return the stored bytes. Retrieval does not consume the entry."""
        return self.lookup(blob_id, token).data

    def sweep(self) -> int:
        """Remove every expired entry. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, blob in self._blobs.items() if blob.is_expired(now)]
            for k in expired:
                del self._blobs[k]

        if expired:
            logger.debug("Swept %d expired blob(s)", len(expired))
        return len(expired)

    def _run_janitor(self) -> None:
        while not self._shutdown_event.wait(self.sweep_interval):
            self.sweep()
