# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from studysync.application.services.auth_service import AuthService
from studysync.application.services.password_hashing import WerkzeugPasswordHasher
from studysync.application.use_cases.accounts.login import LoginUseCase
from studysync.application.use_cases.accounts.logout import LogoutUseCase
from studysync.application.use_cases.accounts.resolve_session import ResolveSessionUseCase
from studysync.application.use_cases.accounts.signup import SignupUseCase
from studysync.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
    SqlAlchemySessionStore,
)
from studysync.interfaces.http.controllers.auth_controller import AuthController
from studysync.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.security.password_hash_method)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository()

    @cached_property
    def session_store(self) -> SqlAlchemySessionStore:
        return SqlAlchemySessionStore(
            lifetime=timedelta(seconds=self._config.session.lifetime_seconds)
        )

    @cached_property
    def signup_use_case(self) -> SignupUseCase:
        return SignupUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_use_case(self) -> LoginUseCase:
        return LoginUseCase(
            accounts=self.account_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_use_case(self) -> LogoutUseCase:
        return LogoutUseCase(sessions=self.session_store)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(sessions=self.session_store)

    @cached_property
    def auth_service(self) -> AuthService:
        return AuthService(
            signup_use_case=self.signup_use_case,
            login_use_case=self.login_use_case,
            logout_use_case=self.logout_use_case,
            resolve_session_use_case=self.resolve_session_use_case,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_service=self.auth_service, config=self._config)


container = Container()
