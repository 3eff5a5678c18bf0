"""Upload and compression route."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from gitfit_compressor import compress_bytes
from gitfit_shared.errors import BudgetUnattainable, DecodeError, EncodeError, UnsupportedFormat
from gitfit_shared.files import DEFAULT_MAX_SIZE, DEFAULT_QUALITY, is_valid_quality, safe_download_name
from gitfit_shared.formats import ImageFormat

logger = logging.getLogger(__name__)

compress_bp = Blueprint("compress", __name__, url_prefix="/api")


def _parse_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_max_size(value: str | None) -> int:
    n = _parse_int(value)
    return n if n is not None and n > 0 else DEFAULT_MAX_SIZE


def _parse_quality(value: str | None) -> int:
    n = _parse_int(value)
    return n if n is not None and is_valid_quality(n) else DEFAULT_QUALITY


def _request_scheme() -> str:
    if request.is_secure or request.headers.get("X-Forwarded-Proto") == "https":
        return "https"
    return "http"


@compress_bp.post("/compress")
def compress_upload():
    """Compress an uploaded image and publish it behind a download token."""
    blob_store = current_app.config["blob_store"]

    f = request.files.get("avatar")
    if f is None:
        return jsonify({"error": "missing 'avatar' file field"}), 400

    max_size = _parse_max_size(request.form.get("maxsize"))
    quality = _parse_quality(request.form.get("quality"))
    try:
        fmt = ImageFormat.parse(request.form.get("format") or "jpeg")
    except UnsupportedFormat as e:
        return jsonify({"error": "unsupported format", "detail": str(e)}), 400

    upload = f.read()
    logger.info("Compressing upload %r (%d bytes) to %s under %d bytes",
                f.filename, len(upload), fmt, max_size)

    try:
        data = compress_bytes(upload, max_size, fmt, quality)
    except DecodeError as e:
        logger.warning("Rejected upload %r: %s", f.filename, e)
        return jsonify({"error": "invalid image", "detail": str(e)}), 400
    except BudgetUnattainable as e:
        logger.warning("Compression failed for %r: %s", f.filename, e)
        return jsonify({"error": "compression failed", "detail": str(e)}), 422
    except EncodeError as e:
        logger.error("Encoder failed for %r: %s", f.filename, e)
        return jsonify({"error": "compression failed", "detail": str(e)}), 500

    filename = safe_download_name(f.filename, fmt)
    ticket = blob_store.put(data, fmt.mime, filename)
    logger.info("Stored %s (%d bytes) as blob %s", filename, len(data), ticket.id)

    download_url = (
        f"{_request_scheme()}://{request.host}/api/download/{ticket.id}?token={ticket.token}"
    )

    return jsonify({
        "filename": filename,
        "size": len(data),
        "mime": fmt.mime,
        "message": "compression successful",
        "download_url": download_url,
        "expires_in": int(blob_store.ttl),
    })
