# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from studysync.domain.accounts.entities import Session
from studysync.domain.accounts.repositories import SessionStore


class ResolveSessionUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str) -> Session | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None or session.is_expired():
            return None
        return session
