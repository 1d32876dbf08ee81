# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storehub.domain.exceptions import InvariantViolation
from storehub.shared.security.patterns import validate_input

MIN_PASSWORD_LENGTH = 8


@dataclass(slots=True, frozen=True)
class NewUser:
    """The only fields a store ever receives for a create."""

    username: str
    password: str

    def __post_init__(self) -> None:
        if not self.username:
            raise InvariantViolation("username must not be empty", field="username")
        if not validate_input(self.username, "username"):
            raise InvariantViolation("username has an invalid format", field="username")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise InvariantViolation(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )

    def __repr__(self) -> str:
        return f"NewUser(username={self.username!r}, password='***')"


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def summary(self) -> UserSummary:
        return UserSummary(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class UserSummary:
    """Public projection of a user; never carries credentials."""

    id: int
    username: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "username": self.username}
