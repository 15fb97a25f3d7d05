# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.auth_service import AuthResult, AuthService
from .use_cases.accounts.login import LoginUseCase
from .use_cases.accounts.logout import LogoutUseCase
from .use_cases.accounts.resolve_session import ResolveSessionUseCase
from .use_cases.accounts.signup import SignupUseCase

__all__ = [
    "AuthResult",
    "AuthService",
    "LoginUseCase",
    "LogoutUseCase",
    "ResolveSessionUseCase",
    "SignupUseCase",
]
