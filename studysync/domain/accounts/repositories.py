# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, Session


class AccountRepository(Protocol):
    def find_by_username(self, username: str) -> Account | None: ...

    # Raises UsernameTakenError when the username already exists.
    def add(self, username: str, password_hash: str) -> Account: ...


class SessionStore(Protocol):
    def create(self, account: Account) -> Session: ...
    def get(self, token: str) -> Session | None: ...
    def invalidate(self, token: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
