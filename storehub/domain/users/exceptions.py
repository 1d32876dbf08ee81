# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storehub.shared.errors.base import NotFoundError, ValidationError


class MissingCredentialsError(ValidationError):
    code = "required_fields_missing"
    message = "Username and password required"


class BadUsernameFormatError(ValidationError):
    code = "bad_username_format"
    message = "Username must be 3-20 characters, alphanumeric only"


class PasswordTooShortError(ValidationError):
    code = "password_too_short"
    message = "Password must be at least 8 characters"


class InvalidUserIdError(ValidationError):
    code = "invalid_id"
    message = "Invalid user ID"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"
