"""Flask application factory for the gitfit backend."""

from __future__ import annotations

import atexit
import logging
import sys
import time
from datetime import datetime, timezone

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .routes import compress_bp, downloads_bp
from .services import EphemeralBlobStore

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    blob_store: EphemeralBlobStore | None = None,
) -> Flask:
    """Create and configure the Flask application."""
    if config is None:
        config = Config.load()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    static_dir = config.static_dir.resolve()
    app = Flask(
        __name__,
        static_folder=str(static_dir / "assets"),
        static_url_path="/assets",
    )
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes
    CORS(app, resources={r"/api/*": {"origins": config.frontend_url}}, supports_credentials=True)

    if blob_store is None:
        blob_store = EphemeralBlobStore(
            ttl=config.blob_ttl,
            sweep_interval=config.sweep_interval,
        )
        atexit.register(blob_store.shutdown)

    app.config["blob_store"] = blob_store
    app.config["static_dir"] = static_dir
    app.config["started_at"] = time.time()

    app.register_blueprint(compress_bp)
    app.register_blueprint(downloads_bp)

    @app.get("/api/health")
    def health():
        uptime = int(time.time() - app.config["started_at"])
        return {
            "status": "ok",
            "uptime": f"{uptime}s",
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        }

    @app.errorhandler(404)
    def not_found(error):
        if not request.path.startswith("/api/") and (static_dir / "index.html").is_file():
            return send_from_directory(static_dir, "index.html")
        return jsonify({
            "error": "not found",
            "message": "API endpoint does not exist",
        }), 404

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return jsonify({"error": error.description}), error.code

    logger.info("gitfit backend initialized")
    return app


def main() -> None:
    """Entry point for running the server."""
    config = Config.load()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
