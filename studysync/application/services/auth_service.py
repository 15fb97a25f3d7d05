# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signup/login boundary that turns use-case errors into tagged results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus
from time import perf_counter
from typing import TypeVar

from studysync.application.use_cases.accounts.login import LoginUseCase
from studysync.application.use_cases.accounts.logout import LogoutUseCase
from studysync.application.use_cases.accounts.resolve_session import ResolveSessionUseCase
from studysync.application.use_cases.accounts.signup import SignupUseCase
from studysync.domain.accounts.entities import Session
from studysync.shared.errors.base import AppError, StorageError
from studysync.shared.logging import logger

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class AuthResult:
    success: bool
    message: str
    status: HTTPStatus = HTTPStatus.OK
    # Set only by a successful login or whoami; never serialized.
    session: Session | None = None

    def to_dict(self) -> dict[str, object]:
        return {"success": self.success, "message": self.message}

    @classmethod
    def failure(cls, error: AppError) -> AuthResult:
        return cls(success=False, message=error.message, status=error.status)


class AuthService:
    def __init__(
        self,
        *,
        signup_use_case: SignupUseCase,
        login_use_case: LoginUseCase,
        logout_use_case: LogoutUseCase,
        resolve_session_use_case: ResolveSessionUseCase,
    ) -> None:
        self._signup = signup_use_case
        self._login = login_use_case
        self._logout = logout_use_case
        self._resolve_session = resolve_session_use_case

    def signup(self, username: str, password: str) -> AuthResult:
        outcome = self._run("auth.signup", username, lambda: self._signup.execute(username, password))
        if isinstance(outcome, AuthResult):
            return outcome
        logger.info(f"auth.signup: ok user_id={outcome.id} username='{outcome.username}'")
        return AuthResult(success=True, message="Account created")

    def login(self, username: str, password: str) -> AuthResult:
        outcome = self._run("auth.login", username, lambda: self._login.execute(username, password))
        if isinstance(outcome, AuthResult):
            return outcome
        logger.info(f"auth.login: ok user_id={outcome.user_id} username='{outcome.username}'")
        return AuthResult(success=True, message="Logged in", session=outcome)

    def logout(self, token: str) -> AuthResult:
        outcome = self._run("auth.logout", "", lambda: self._logout.execute(token))
        if isinstance(outcome, AuthResult):
            return outcome
        logger.info("auth.logout: ok")
        return AuthResult(success=True, message="Logged out")

    def whoami(self, token: str) -> AuthResult:
        outcome = self._run("auth.whoami", "", lambda: self._resolve_session.execute(token))
        if isinstance(outcome, AuthResult):
            return outcome
        if outcome is None:
            return AuthResult(success=False, message="Not logged in")
        return AuthResult(success=True, message="Logged in", session=outcome)

    def _run(self, event: str, username: str, call: Callable[[], T]) -> T | AuthResult:
        t0 = perf_counter()
        label = (username or "").strip()
        try:
            return call()
        except StorageError as exc:
            logger.error(f"{event}: storage failure username='{label}' code={exc.code}")
            return AuthResult.failure(exc)
        except AppError as exc:
            logger.warning(f"{event}: rejected username='{label}' code={exc.code}")
            return AuthResult.failure(exc)
        finally:
            dt = (perf_counter() - t0) * 1000
            logger.debug(f"{event}: done dt_ms={dt:.0f}")
