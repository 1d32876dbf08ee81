# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from storehub.application.services.password_hashing import WerkzeugPasswordHasher
from storehub.application.use_cases.users.create_user import CreateUserUseCase
from storehub.application.use_cases.users.get_user import GetUserUseCase
from storehub.application.use_cases.users.list_users import ListUsersUseCase
from storehub.domain.users.repositories import PasswordHasher, UserStore
from storehub.infrastructure.db import build_engine, build_session_factory, init_db
from storehub.infrastructure.repositories.users import InMemoryUserStore, SqlAlchemyUserStore
from storehub.interfaces.http.controllers.misc_controller import MiscController
from storehub.interfaces.http.controllers.users_controller import UsersController
from storehub.shared.config import AppConfig
from storehub.shared.logging import logger
from storehub.shared.middleware.csrf import csrf_protect
from storehub.shared.middleware.rate_limit import rate_limit
from storehub.shared.security.rate_limiter import SlidingWindowRateLimiter


class Container:
    """Builds and owns the application's components for one config."""

    def __init__(self, config: AppConfig, *, user_store: UserStore | None = None) -> None:
        self.config = config
        self._user_store_override = user_store

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def engine(self) -> Engine:
        engine = build_engine(self.config.database)
        init_db(engine)
        return engine

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def user_store(self) -> UserStore:
        if self._user_store_override is not None:
            return self._user_store_override
        if self.config.user_store == "sql":
            logger.info("container: using SQLAlchemy user store")
            return SqlAlchemyUserStore(self.session_factory, hasher=self.password_hasher)
        logger.info("container: using in-memory user store")
        return InMemoryUserStore(hasher=self.password_hasher)

    @cached_property
    def rate_limiter(self) -> SlidingWindowRateLimiter:
        return SlidingWindowRateLimiter()

    @cached_property
    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(users=self.user_store)

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_store)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_store)

    @cached_property
    def users_controller(self) -> UsersController:
        security = self.config.security
        return UsersController(
            create_user=self.create_user_use_case,
            get_user=self.get_user_use_case,
            list_users=self.list_users_use_case,
            create_guards=(
                rate_limit(self.rate_limiter, security),
                csrf_protect(security),
            ),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()

    def dispose(self) -> None:
        engine = self.__dict__.get("engine")
        if engine is not None:
            engine.dispose()
