# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from storehub.domain.users.entities import NewUser
from storehub.domain.users.entities import User as DomainUser
from storehub.domain.users.repositories import PasswordHasher, UserStore
from storehub.infrastructure.db.models import UserRecord
from storehub.infrastructure.db.session import session_scope

# Signed 64-bit INTEGER range; no row can carry an id outside it.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _to_domain(row: UserRecord) -> DomainUser:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserStore(UserStore):
    def __init__(self, session_factory: sessionmaker[Session], *, hasher: PasswordHasher) -> None:
        self._session_factory = session_factory
        self._hasher = hasher

    def create_user(self, new_user: NewUser) -> DomainUser:
        with session_scope(self._session_factory) as session:
            row = UserRecord(
                username=new_user.username,
                password_hash=self._hasher.hash(new_user.password),
                created_at=datetime.now(UTC),
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def get_user(self, user_id: int) -> DomainUser | None:
        if not _MIN_ID <= user_id <= _MAX_ID:
            return None
        with session_scope(self._session_factory) as session:
            row = session.get(UserRecord, user_id)
            if row is None:
                return None
            return _to_domain(row)

    def list_users(self) -> list[DomainUser]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(select(UserRecord).order_by(UserRecord.id)).all()
            return [_to_domain(row) for row in rows]
