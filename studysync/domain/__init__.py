# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts.entities import USERNAME_MAX_LENGTH, Account, Session
from .accounts.exceptions import (
    InvalidCredentialsError,
    MissingFieldsError,
    UsernameTakenError,
    UsernameTooLongError,
)
from .accounts.repositories import AccountRepository, PasswordHasher, SessionStore

__all__ = [
    "USERNAME_MAX_LENGTH",
    "Account",
    "AccountRepository",
    "InvalidCredentialsError",
    "MissingFieldsError",
    "PasswordHasher",
    "Session",
    "SessionStore",
    "UsernameTakenError",
    "UsernameTooLongError",
]
