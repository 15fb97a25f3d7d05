# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

# Matches the accounts.username column width.
USERNAME_MAX_LENGTH = 100


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    username: str
    password_hash: str
    created_at: datetime
    email: str | None = None


@dataclass(slots=True, frozen=True)
class Session:
    """Server-side login state; the token is the only value handed to clients."""

    token: str
    user_id: int
    username: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at
