# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storehub.domain.users.entities import UserSummary
from storehub.domain.users.repositories import UserStore
from storehub.shared.errors.base import InternalError
from storehub.shared.logging import logger


class ListUsersUseCase:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self) -> list[UserSummary]:
        try:
            users = self._users.list_users()
        except Exception as exc:
            logger.opt(exception=exc).error("users.list: store failure")
            raise InternalError("Failed to fetch users") from exc
        return [user.summary() for user in sorted(users, key=lambda u: u.id)]


__all__ = ["ListUsersUseCase"]
