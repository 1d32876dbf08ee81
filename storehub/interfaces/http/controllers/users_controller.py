# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, Response, jsonify, request

from storehub.application.use_cases.users.create_user import CreateUserUseCase
from storehub.application.use_cases.users.get_user import GetUserUseCase
from storehub.application.use_cases.users.list_users import ListUsersUseCase
from storehub.interfaces.http.dto.users import UserDTO, UserListDTO, UserResponseDTO


class UsersController:
    def __init__(
        self,
        *,
        create_user: CreateUserUseCase,
        get_user: GetUserUseCase,
        list_users: ListUsersUseCase,
        create_guards: tuple[Callable[[Callable], Callable], ...] = (),
    ) -> None:
        self._create_user = create_user
        self._get_user = get_user
        self._list_users = list_users
        self._create_guards = create_guards

    def index(self) -> tuple[Response, int]:
        users = self._list_users.execute()
        payload = UserListDTO(users=[UserDTO.model_validate(u) for u in users])
        return jsonify(payload.model_dump()), 200

    def show(self, user_id: str) -> tuple[Response, int]:
        user = self._get_user.execute(user_id)
        payload = UserResponseDTO(user=UserDTO.model_validate(user))
        return jsonify(payload.model_dump(exclude_none=True)), 200

    def create(self) -> tuple[Response, int]:
        # Unknown shape on purpose: the use case owns every field check.
        body = request.get_json(silent=True)
        user = self._create_user.execute(body)
        payload = UserResponseDTO(
            user=UserDTO.model_validate(user),
            message="User created successfully",
        )
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        create_view = self.create
        for guard in reversed(self._create_guards):
            create_view = guard(create_view)

        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("", endpoint="list", view_func=self.index, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=create_view, methods=["POST"])
        bp.add_url_rule("/<user_id>", endpoint="get", view_func=self.show, methods=["GET"])
        return bp
