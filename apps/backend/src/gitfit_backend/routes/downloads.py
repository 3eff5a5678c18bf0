"""Token-gated download route."""

from __future__ import annotations

import io
import logging

from flask import Blueprint, current_app, jsonify, request, send_file

from gitfit_shared.errors import Forbidden, NotFound

logger = logging.getLogger(__name__)

downloads_bp = Blueprint("downloads", __name__, url_prefix="/api")


@downloads_bp.get("/download/<blob_id>")
def download(blob_id: str):
    """Serve a stored compression result if the token matches."""
    blob_store = current_app.config["blob_store"]
    token = request.args.get("token", "")

    try:
        blob = blob_store.lookup(blob_id, token)
    except NotFound:
        return jsonify({"error": "file not found or expired"}), 404
    except Forbidden:
        logger.warning("Rejected download of %s: invalid token", blob_id)
        return jsonify({"error": "invalid token"}), 403

    response = send_file(io.BytesIO(blob.data), mimetype=blob.mime, max_age=0)
    response.headers["Content-Disposition"] = f'attachment; filename="{blob.filename}"'
    return response
