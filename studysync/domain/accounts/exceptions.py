# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from studysync.shared.errors.base import AuthenticationError, ConflictError, ValidationError


class MissingFieldsError(ValidationError):
    code = "missing_fields"
    message = "Missing fields"


class UsernameTakenError(ConflictError):
    code = "username_taken"
    message = "Username already taken"


class InvalidCredentialsError(AuthenticationError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class UsernameTooLongError(ValidationError):
    code = "username_too_long"
    message = "Username too long"
