# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class DomainError(AppError):
    """Caller-correctable failure, reported with HTTP 200 and success=false."""

    def __init__(
        self,
        *,
        code: str | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_message = message or cast(str, getattr(self, "message", "Request failed"))
        super().__init__(
            code=resolved_code,
            status=HTTPStatus.OK,
            message=resolved_message,
            context=context,
        )


class ValidationError(DomainError):
    code = "validation_error"
    message = "Invalid request"


class ConflictError(DomainError):
    code = "conflict"
    message = "Conflict"


class AuthenticationError(DomainError):
    code = "authentication_failed"
    message = "Authentication failed"


class StorageError(AppError):
    def __init__(
        self,
        message: str = "Cannot connect to database. Run studysync-setup-db first or check credentials.",
        *,
        code: str = "storage_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            context=context,
        )
