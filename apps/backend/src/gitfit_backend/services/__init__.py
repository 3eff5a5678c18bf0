"""Backend services."""

from .blob_store import BlobTicket, EphemeralBlobStore, StoredBlob

__all__ = ["BlobTicket", "EphemeralBlobStore", "StoredBlob"]
