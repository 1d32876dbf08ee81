# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory_user_store import InMemoryUserStore
from .sqlalchemy_user_store import SqlAlchemyUserStore

__all__ = ["InMemoryUserStore", "SqlAlchemyUserStore"]
