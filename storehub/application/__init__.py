# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.create_user import CreateUserUseCase
from .use_cases.users.get_user import GetUserUseCase
from .use_cases.users.list_users import ListUsersUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
]
