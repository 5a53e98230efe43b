"""
Tests for the users domain layer.

Tests the User entity validation rule and the error taxonomy in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from app.domain.users.entities import User, is_valid_email
from app.domain.users.errors import (
    EmailAlreadyExistsError,
    ErrorKind,
    InvalidUserError,
    UserDomainError,
    UserInternalError,
    UserNotFoundError,
)

VALID = User(firstname="Alice", lastname="Smith", email="alice@example.com", age=25)


class TestUserValidation:
    """Tests for User.validate()."""

    def test_valid_user_passes(self) -> None:
        """A user satisfying every rule validates without error."""
        VALID.validate()

    @pytest.mark.parametrize("age", [1, 150])
    def test_age_bounds_are_inclusive(self, age: int) -> None:
        """Ages 1 and 150 are both accepted."""
        replace(VALID, age=age).validate()

    @pytest.mark.parametrize(
        "changes, message",
        [
            ({"firstname": ""}, "firstname is required"),
            ({"lastname": ""}, "lastname is required"),
            ({"email": ""}, "email is required"),
            ({"email": "not-an-email"}, "invalid email format"),
            ({"age": 0}, "age must be between 1 and 150"),
            ({"age": 151}, "age must be between 1 and 150"),
        ],
    )
    def test_each_rule_reports_its_own_message(self, changes, message) -> None:
        """Breaking a single rule yields exactly that rule's message."""
        with pytest.raises(InvalidUserError) as exc_info:
            replace(VALID, **changes).validate()
        assert exc_info.value.message == message
        assert exc_info.value.kind is ErrorKind.BAD_REQUEST

    def test_first_failing_rule_wins(self) -> None:
        """With several broken rules only the first is reported."""
        user = User(firstname="", lastname="", email="", age=0)
        with pytest.raises(InvalidUserError, match="firstname is required"):
            user.validate()

    def test_email_pattern_is_lowercase_only(self) -> None:
        """Uppercase characters make an email invalid."""
        with pytest.raises(InvalidUserError, match="invalid email format"):
            replace(VALID, email="Alice@Example.com").validate()

    def test_user_is_immutable(self) -> None:
        """User values cannot be mutated in place."""
        with pytest.raises(FrozenInstanceError):
            VALID.firstname = "Bob"  # type: ignore[misc]


class TestEmailPattern:
    """Tests for is_valid_email."""

    @pytest.mark.parametrize(
        "email",
        ["a@b.co", "first.last+tag@sub.example.org", "x_y%z-1@host-1.io"],
    )
    def test_accepts_plain_addresses(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "plain",
            "@example.com",
            "a@b",
            "a@b.c",
            "a b@example.com",
            "A@example.com",
            "a@b.co\n",
        ],
    )
    def test_rejects_malformed_addresses(self, email: str) -> None:
        assert not is_valid_email(email)


class TestDomainErrors:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "error, kind, message",
        [
            (InvalidUserError(), ErrorKind.BAD_REQUEST, "bad request"),
            (UserNotFoundError(), ErrorKind.NOT_FOUND, "user not found"),
            (EmailAlreadyExistsError(), ErrorKind.CONFLICT, "email already exists"),
            (UserInternalError(), ErrorKind.INTERNAL, "internal server error"),
        ],
    )
    def test_default_kind_and_message(self, error, kind, message) -> None:
        """Each error carries its kind and default message."""
        assert isinstance(error, UserDomainError)
        assert error.kind is kind
        assert error.message == message
        assert str(error) == message

    def test_not_found_keeps_user_id(self) -> None:
        assert UserNotFoundError("abc").user_id == "abc"

    def test_custom_message_overrides_default(self) -> None:
        assert InvalidUserError("lastname is required").message == "lastname is required"
