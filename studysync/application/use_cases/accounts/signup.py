# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from studysync.domain.accounts.entities import USERNAME_MAX_LENGTH, Account
from studysync.domain.accounts.exceptions import (
    MissingFieldsError,
    UsernameTakenError,
    UsernameTooLongError,
)
from studysync.domain.accounts.repositories import AccountRepository, PasswordHasher


class SignupUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Account:
        username = (username or "").strip()
        if not username or not password:
            raise MissingFieldsError()
        if len(username) > USERNAME_MAX_LENGTH:
            raise UsernameTooLongError()

        # Fast path only; the unique constraint behind add() settles races.
        if self._accounts.find_by_username(username) is not None:
            raise UsernameTakenError()

        hashed = self._password_hasher.hash(password)
        return self._accounts.add(username, hashed)
