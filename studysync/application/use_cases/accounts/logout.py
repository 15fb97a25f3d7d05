"""Use-case for ending a login session."""

from __future__ import annotations

from studysync.domain.accounts.repositories import SessionStore


class LogoutUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str) -> None:
        if token:
            self._sessions.invalidate(token)
