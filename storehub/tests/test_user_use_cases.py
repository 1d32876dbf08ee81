from __future__ import annotations

from datetime import UTC, datetime

import pytest

from storehub.application.use_cases.users.create_user import CreateUserUseCase
from storehub.application.use_cases.users.get_user import GetUserUseCase, parse_user_id
from storehub.application.use_cases.users.list_users import ListUsersUseCase
from storehub.domain import InvariantViolation
from storehub.domain.users.entities import NewUser, User, UserSummary
from storehub.domain.users.exceptions import (
    BadUsernameFormatError,
    InvalidUserIdError,
    MissingCredentialsError,
    PasswordTooShortError,
    UserNotFoundError,
)
from storehub.domain.users.repositories import UserStore
from storehub.shared.errors import InternalError, ValidationError


class RecordingUserStore(UserStore):
    def __init__(self) -> None:
        self.received: list[NewUser] = []
        self._users: dict[int, User] = {}
        self._seq = 1

    def create_user(self, new_user: NewUser) -> User:
        self.received.append(new_user)
        user = User(
            id=self._seq,
            username=new_user.username,
            password_hash=f"hashed:{new_user.password}",
            created_at=datetime.now(UTC),
        )
        self._users[user.id] = user
        self._seq += 1
        return user

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        return list(self._users.values())


class BrokenUserStore(UserStore):
    def create_user(self, new_user: NewUser) -> User:
        raise RuntimeError("disk full at /var/lib/users.db")

    def get_user(self, user_id: int) -> User | None:
        raise RuntimeError("connection reset")

    def list_users(self) -> list[User]:
        raise RuntimeError("connection reset")


@pytest.fixture()
def store() -> RecordingUserStore:
    return RecordingUserStore()


def test_create_user_success(store: RecordingUserStore) -> None:
    use_case = CreateUserUseCase(users=store)

    summary = use_case.execute({"username": "valid_user", "password": "longenough1"})

    assert summary == UserSummary(id=1, username="valid_user")
    assert store.received == [NewUser(username="valid_user", password="longenough1")]


def test_create_user_drops_extra_fields(store: RecordingUserStore) -> None:
    use_case = CreateUserUseCase(users=store)

    use_case.execute(
        {"username": "valid_user", "password": "longenough1", "id": 99, "is_admin": True}
    )

    received = store.received[0]
    assert not hasattr(received, "__dict__")
    assert (received.username, received.password) == ("valid_user", "longenough1")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"username": "valid_user"},
        {"password": "longenough1"},
        {"username": "", "password": "longenough1"},
        {"username": "valid_user", "password": None},
        {"username": 0, "password": "longenough1"},
        None,
        ["valid_user", "longenough1"],
        "username=valid_user",
    ],
)
def test_missing_fields_rejected(store: RecordingUserStore, payload: object) -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        CreateUserUseCase(users=store).execute(payload)

    assert exc_info.value.status == 400
    assert exc_info.value.message == "Username and password required"
    assert store.received == []


def test_short_username_rejected(store: RecordingUserStore) -> None:
    with pytest.raises(BadUsernameFormatError) as exc_info:
        CreateUserUseCase(users=store).execute({"username": "ab", "password": "longenough1"})

    assert exc_info.value.message.startswith("Username must be 3-20 characters")
    assert store.received == []


def test_short_password_rejected(store: RecordingUserStore) -> None:
    with pytest.raises(PasswordTooShortError) as exc_info:
        CreateUserUseCase(users=store).execute({"username": "valid_user", "password": "short"})

    assert exc_info.value.message == "Password must be at least 8 characters"


def test_password_is_trimmed_before_length_check(store: RecordingUserStore) -> None:
    with pytest.raises(PasswordTooShortError):
        CreateUserUseCase(users=store).execute(
            {"username": "valid_user", "password": "   short   "}
        )


def test_script_tags_never_reach_store(store: RecordingUserStore) -> None:
    payload = {"username": "test<script>alert(1)</script>", "password": "testpass123"}

    with pytest.raises(BadUsernameFormatError):
        CreateUserUseCase(users=store).execute(payload)

    assert store.received == []


def test_username_valid_after_stripping_tags(store: RecordingUserStore) -> None:
    summary = CreateUserUseCase(users=store).execute(
        {"username": "<b>bold_name</b>", "password": "longenough1"}
    )

    assert summary.username == "bold_name"


def test_username_too_short_after_stripping_tags(store: RecordingUserStore) -> None:
    with pytest.raises(BadUsernameFormatError):
        CreateUserUseCase(users=store).execute(
            {"username": "<i>ab</i>", "password": "longenough1"}
        )


def test_non_string_values_are_coerced(store: RecordingUserStore) -> None:
    summary = CreateUserUseCase(users=store).execute({"username": 12345, "password": 123456789})

    assert summary.username == "12345"
    assert store.received[0].password == "123456789"


def test_validation_errors_share_base_class(store: RecordingUserStore) -> None:
    with pytest.raises(ValidationError):
        CreateUserUseCase(users=store).execute({"username": "ab", "password": "x"})


def test_store_failure_becomes_internal_error() -> None:
    with pytest.raises(InternalError) as exc_info:
        CreateUserUseCase(users=BrokenUserStore()).execute(
            {"username": "valid_user", "password": "longenough1"}
        )

    error = exc_info.value
    assert error.status == 500
    assert error.to_dict() == {"error": "Failed to create user", "code": "internal_error"}
    assert isinstance(error.__cause__, RuntimeError)


def test_new_user_guards_its_invariant() -> None:
    with pytest.raises(InvariantViolation):
        NewUser(username="", password="longenough1")
    with pytest.raises(InvariantViolation):
        NewUser(username="valid_user", password="short")
    assert "longenough1" not in repr(NewUser(username="valid_user", password="longenough1"))


@pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 42 ", 42), ("+7", 7), (3, 3)])
def test_parse_user_id_accepts_integers(raw: object, expected: int) -> None:
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "12abc", "0x1f", True, None])
def test_parse_user_id_rejects_non_integers(raw: object) -> None:
    with pytest.raises(InvalidUserIdError):
        parse_user_id(raw)


def test_get_user_returns_summary(store: RecordingUserStore) -> None:
    CreateUserUseCase(users=store).execute({"username": "valid_user", "password": "longenough1"})

    assert GetUserUseCase(users=store).execute("1") == UserSummary(id=1, username="valid_user")


def test_get_user_missing_raises_not_found(store: RecordingUserStore) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        GetUserUseCase(users=store).execute("999")

    assert exc_info.value.status == 404
    assert exc_info.value.message == "User not found"


def test_get_user_store_failure() -> None:
    with pytest.raises(InternalError) as exc_info:
        GetUserUseCase(users=BrokenUserStore()).execute("1")

    assert exc_info.value.message == "Failed to fetch user"


def test_list_users_sorted_summaries(store: RecordingUserStore) -> None:
    create = CreateUserUseCase(users=store)
    create.execute({"username": "alice", "password": "longenough1"})
    create.execute({"username": "bob_2", "password": "longenough2"})

    assert ListUsersUseCase(users=store).execute() == [
        UserSummary(id=1, username="alice"),
        UserSummary(id=2, username="bob_2"),
    ]


def test_list_users_store_failure() -> None:
    with pytest.raises(InternalError) as exc_info:
        ListUsersUseCase(users=BrokenUserStore()).execute()

    assert exc_info.value.message == "Failed to fetch users"


@pytest.mark.parametrize(
    ("username", "expected"),
    [(1234.0, "1234"), (True, "true"), (12345, "12345")],
)
def test_scalar_usernames_render_like_json_clients(
    store: RecordingUserStore, username: object, expected: str
) -> None:
    summary = CreateUserUseCase(users=store).execute(
        {"username": username, "password": "longenough1"}
    )

    assert summary.username == expected


def test_byte_order_mark_is_trimmed_from_username(store: RecordingUserStore) -> None:
    summary = CreateUserUseCase(users=store).execute(
        {"username": "\ufeffvalid_user", "password": "longenough1"}
    )

    assert summary.username == "valid_user"
