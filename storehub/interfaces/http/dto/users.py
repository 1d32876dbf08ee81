# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class UserDTO(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class UserResponseDTO(BaseModel):
    user: UserDTO
    message: str | None = None


class UserListDTO(BaseModel):
    users: list[UserDTO]


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthDTO(BaseModel):
    status: str = "ok"
    timestamp: str = Field(default_factory=_utc_timestamp)
