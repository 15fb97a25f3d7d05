# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from studysync.domain.accounts.entities import USERNAME_MAX_LENGTH, Session
from studysync.domain.accounts.exceptions import InvalidCredentialsError, MissingFieldsError
from studysync.domain.accounts.repositories import AccountRepository, PasswordHasher, SessionStore


class LoginUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Session:
        username = (username or "").strip()
        if not username or not password:
            raise MissingFieldsError()
        # No stored account can have a longer name.
        if len(username) > USERNAME_MAX_LENGTH:
            raise InvalidCredentialsError()

        account = self._accounts.find_by_username(username)
        password_valid = account is not None and self._password_hasher.verify(
            password, account.password_hash
        )

        if not password_valid:
            raise InvalidCredentialsError()

        return self._sessions.create(account)
