"""In-memory stand-ins for the account ports."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from studysync.domain.accounts.entities import Account, Session
from studysync.domain.accounts.exceptions import UsernameTakenError
from studysync.domain.accounts.repositories import AccountRepository, PasswordHasher, SessionStore


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> Account | None:
        return self._accounts.get(username)

    def add(self, username: str, password_hash: str) -> Account:
        if username in self._accounts:
            raise UsernameTakenError()
        account = Account(
            id=self._seq,
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._accounts[username] = account
        return account


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def create(self, account: Account) -> Session:
        now = datetime.now(UTC)
        session = Session(
            token=f"token-{account.id}-{len(self._sessions) + 1}",
            user_id=account.id,
            username=account.username,
            created_at=now,
            expires_at=now + timedelta(hours=1),
        )
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> Session | None:
        return self._sessions.get(token)

    def invalidate(self, token: str) -> None:
        self._sessions.pop(token, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


