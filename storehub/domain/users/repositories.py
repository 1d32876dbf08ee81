# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import NewUser, User


class UserStore(Protocol):
    def create_user(self, new_user: NewUser) -> User: ...
    def get_user(self, user_id: int) -> User | None: ...
    def list_users(self) -> Sequence[User]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
