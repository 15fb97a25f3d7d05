# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from studysync.infrastructure.health import check_database
from studysync.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            check_database()
        except SQLAlchemyError as exc:
            logger.error(f"health: database unreachable ({type(exc).__name__})")
            return jsonify({"success": False, "database": "unreachable"}), 500
        return jsonify({"success": True, "database": "ok"}), 200
