# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from storehub.domain.users.entities import UserSummary
from storehub.domain.users.exceptions import InvalidUserIdError, UserNotFoundError
from storehub.domain.users.repositories import UserStore
from storehub.shared.errors.base import InternalError
from storehub.shared.logging import logger
from storehub.shared.security.sanitizer import trim

_USER_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: object) -> int:
    if isinstance(raw, bool):
        raise InvalidUserIdError()
    if isinstance(raw, int):
        return raw
    text = trim(str(raw))
    if not _USER_ID_RE.fullmatch(text):
        raise InvalidUserIdError()
    return int(text)


class GetUserUseCase:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self, raw_id: object) -> UserSummary:
        user_id = parse_user_id(raw_id)
        try:
            user = self._users.get_user(user_id)
        except Exception as exc:
            logger.opt(exception=exc).error(f"users.get: store failure for user_id={user_id}")
            raise InternalError("Failed to fetch user") from exc
        if user is None:
            raise UserNotFoundError(context={"user_id": user_id})
        return user.summary()


__all__ = ["GetUserUseCase", "parse_user_id"]
