# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainError, InvariantViolation
from .users.entities import NewUser, User, UserSummary

__all__ = [
    "DomainError",
    "InvariantViolation",
    "NewUser",
    "User",
    "UserSummary",
]
