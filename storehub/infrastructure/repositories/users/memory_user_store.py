# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from threading import Lock

from storehub.domain.users.entities import NewUser, User
from storehub.domain.users.repositories import PasswordHasher, UserStore


class InMemoryUserStore(UserStore):
    """Process-local store; ids start at 1 and are never reused."""

    def __init__(self, *, hasher: PasswordHasher) -> None:
        self._hasher = hasher
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._lock = Lock()

    def create_user(self, new_user: NewUser) -> User:
        password_hash = self._hasher.hash(new_user.password)
        with self._lock:
            user = User(
                id=self._next_id,
                username=new_user.username,
                password_hash=password_hash,
                created_at=datetime.now(UTC),
            )
            self._users[user.id] = user
            self._next_id += 1
        return user

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())
