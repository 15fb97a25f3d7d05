# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from studysync.domain.accounts.entities import Account as DomainAccount
from studysync.domain.accounts.entities import Session as DomainSession
from studysync.domain.accounts.exceptions import UsernameTakenError
from studysync.domain.accounts.repositories import AccountRepository, SessionStore
from studysync.infrastructure.db.models import Account, SessionRecord
from studysync.infrastructure.db.session import session_scope
from studysync.shared.errors.base import StorageError
from studysync.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(row: Account) -> DomainAccount:
    return DomainAccount(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
        email=row.email,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def find_by_username(self, username: str) -> DomainAccount | None:
        try:
            with session_scope() as session:
                row = session.scalars(
                    select(Account).where(Account.username == username).limit(1)
                ).first()
                if not row:
                    return None
                return _to_domain(row)
        except SQLAlchemyError as exc:
            logger.error(f"accounts.find_by_username: {type(exc).__name__}")
            raise StorageError() from exc

    def add(self, username: str, password_hash: str) -> DomainAccount:
        try:
            with session_scope() as session:
                row = Account(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"accounts.add: unique constraint rejected username='{username}'")
            raise UsernameTakenError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"accounts.add: {type(exc).__name__}")
            raise StorageError() from exc


class SqlAlchemySessionStore(SessionStore):
    def __init__(self, *, lifetime: timedelta = timedelta(days=7)) -> None:
        self._lifetime = lifetime

    def create(self, account: DomainAccount) -> DomainSession:
        now = datetime.now(UTC)
        token_value = secrets.token_urlsafe(48)
        expires_at = now + self._lifetime
        try:
            with session_scope() as session:
                session.add(
                    SessionRecord(
                        token=token_value,
                        user_id=account.id,
                        username=account.username,
                        created_at=now,
                        expires_at=expires_at,
                    )
                )
        except SQLAlchemyError as exc:
            logger.error(f"sessions.create: {type(exc).__name__}")
            raise StorageError() from exc
        logger.info(f"sessions.create: user_id={account.id} exp={expires_at.isoformat()}")
        return DomainSession(
            token=token_value,
            user_id=account.id,
            username=account.username,
            created_at=now,
            expires_at=expires_at,
        )

    def get(self, token: str) -> DomainSession | None:
        try:
            with session_scope() as session:
                row = session.scalars(
                    select(SessionRecord).where(SessionRecord.token == token).limit(1)
                ).first()
                if not row:
                    return None
                return DomainSession(
                    token=row.token,
                    user_id=row.user_id,
                    username=row.username,
                    created_at=_as_utc(row.created_at),
                    expires_at=_as_utc(row.expires_at),
                )
        except SQLAlchemyError as exc:
            logger.error(f"sessions.get: {type(exc).__name__}")
            raise StorageError() from exc

    def invalidate(self, token: str) -> None:
        try:
            with session_scope() as session:
                session.execute(delete(SessionRecord).where(SessionRecord.token == token))
        except SQLAlchemyError as exc:
            logger.error(f"sessions.invalidate: {type(exc).__name__}")
            raise StorageError() from exc
