from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    DomainError,
    StorageError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "StorageError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
