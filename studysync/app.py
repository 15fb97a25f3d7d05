# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

from studysync.infrastructure.container import container
from studysync.infrastructure.db import init_db
from studysync.interfaces.http.controllers.misc_controller import MiscController
from studysync.shared.config import load_config
from studysync.shared.errors.base import StorageError
from studysync.shared.logging import logger, setup_logging
from studysync.shared.middleware.error_handler import configure_error_handling
from studysync.shared.middleware.request_logger import configure_request_logging


def create_app() -> Flask:
    config = load_config()
    setup_logging(config.log_level, debug_mode=config.debug_logging)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    storage_error: StorageError | None = None
    try:
        init_db()
    except SQLAlchemyError as exc:
        logger.error(f"Database unavailable at startup: {type(exc).__name__}")
        storage_error = StorageError()

    if storage_error is not None:
        # Every request fails until the service restarts against a reachable store.
        @app.before_request
        def _storage_unavailable():
            return jsonify(storage_error.to_dict()), storage_error.status

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    create_app().run(host="0.0.0.0", port=5000, debug=load_config().debug_logging)


if __name__ == "__main__":
    main()
