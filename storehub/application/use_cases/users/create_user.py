# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storehub.domain.users.entities import MIN_PASSWORD_LENGTH, NewUser, UserSummary
from storehub.domain.users.exceptions import (
    BadUsernameFormatError,
    MissingCredentialsError,
    PasswordTooShortError,
)
from storehub.domain.users.repositories import UserStore
from storehub.shared.errors.base import AppError, InternalError
from storehub.shared.logging import logger
from storehub.shared.security.patterns import validate_input
from storehub.shared.security.sanitizer import strip_tags, trim


def _as_text(value: Any) -> str:
    """Render a JSON scalar the way a JavaScript client would stringify it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CreateUserUseCase:
    """Sanitize, validate and persist a user from an untrusted payload."""

    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self, payload: Any) -> UserSummary:
        new_user = self.parse(payload)
        try:
            user = self._users.create_user(new_user)
        except AppError:
            raise
        except Exception as exc:
            logger.opt(exception=exc).error(
                f"users.create: store failure for username={new_user.username}"
            )
            raise InternalError("Failed to create user") from exc

        logger.info(f"users.create: ok user_id={user.id}")
        return user.summary()

    @staticmethod
    def parse(payload: Any) -> NewUser:
        fields: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
        raw_username = fields.get("username")
        raw_password = fields.get("password")
        if not raw_username or not raw_password:
            raise MissingCredentialsError()

        username = strip_tags(_as_text(raw_username))
        password = trim(_as_text(raw_password))

        # Re-checked after stripping: tags may leave a too-short or
        # otherwise malformed username behind.
        if not validate_input(username, "username"):
            raise BadUsernameFormatError()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()

        return NewUser(username=username, password=password)
