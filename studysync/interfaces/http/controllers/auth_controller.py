# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from studysync.application.services.auth_service import AuthResult, AuthService
from studysync.interfaces.http.dto.auth import AuthRequestDTO, AuthResponseDTO, WhoAmIResponseDTO
from studysync.shared.config import AppConfig, load_config
from studysync.shared.errors.validation import raise_validation_error
from studysync.shared.logging import logger


def _request_params() -> dict[str, object]:
    params: dict[str, object] = {}
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    params.update(request.form.to_dict())
    # The query string decides the action, as the planner's forms post to ?action=...
    params.update(request.args.to_dict())
    return params


def _session_token(cookie_name: str) -> str:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:]
    return request.cookies.get(cookie_name, "")


class AuthController:
    def __init__(self, *, auth_service: AuthService, config: AppConfig | None = None) -> None:
        self._auth_service = auth_service
        self._config = config or load_config()
        self._actions: dict[str, Callable[[AuthRequestDTO], tuple[Response, int]]] = {
            "signup": self._signup,
            "login": self._login,
            "logout": self._logout,
            "whoami": self._whoami,
        }

    def handle(self) -> tuple[Response, int]:
        try:
            dto = AuthRequestDTO.model_validate(_request_params())
        except ValidationError as exc:
            raise_validation_error(exc)

        handler = self._actions.get(dto.action)
        if handler is None:
            logger.info(f"auth: unsupported action '{dto.action[:32]}'")
            payload = AuthResponseDTO(success=False, message="Unsupported action")
            return jsonify(payload.model_dump()), 200
        return handler(dto)

    def _render(self, result: AuthResult) -> Response:
        return jsonify(AuthResponseDTO(success=result.success, message=result.message).model_dump())

    def _signup(self, dto: AuthRequestDTO) -> tuple[Response, int]:
        result = self._auth_service.signup(dto.username, dto.password)
        return self._render(result), int(result.status)

    def _login(self, dto: AuthRequestDTO) -> tuple[Response, int]:
        result = self._auth_service.login(dto.username, dto.password)
        response = self._render(result)
        if result.success and result.session is not None:
            response.set_cookie(
                self._config.session.cookie_name,
                result.session.token,
                httponly=True,
                samesite=self._config.security.cookie_samesite,
                secure=self._config.security.cookie_secure,
                max_age=self._config.session.lifetime_seconds,
            )
        return response, int(result.status)

    def _logout(self, dto: AuthRequestDTO) -> tuple[Response, int]:
        result = self._auth_service.logout(_session_token(self._config.session.cookie_name))
        response = self._render(result)
        if result.success:
            response.delete_cookie(self._config.session.cookie_name)
        return response, int(result.status)

    def _whoami(self, dto: AuthRequestDTO) -> tuple[Response, int]:
        result = self._auth_service.whoami(_session_token(self._config.session.cookie_name))
        payload = WhoAmIResponseDTO(
            success=result.success,
            message=result.message,
            username=result.session.username if result.session else None,
        )
        return jsonify(payload.model_dump()), int(result.status)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/auth", view_func=self.handle, methods=["GET", "POST"])
        return bp
