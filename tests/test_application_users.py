"""
Tests for the users application layer (use cases).

Tests use cases with a mocked repository port. No real infrastructure needed.
Each test verifies orchestration: validation order, uniqueness enforcement,
and translation of repository outcomes into domain errors.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.application.users.get_user import GetUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.domain.users.entities import User
from app.domain.users.errors import (
    EmailAlreadyExistsError,
    InvalidUserError,
    UserInternalError,
    UserNotFoundError,
)
from app.domain.users.ports import DuplicateEmailError, RepositoryError, UserRepository

CREATED = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def repo() -> MagicMock:
    """Repository mock with an empty store."""
    mock = MagicMock(spec=UserRepository)
    mock.get_by_id.return_value = None
    mock.get_by_email.return_value = None
    return mock


def _stored_user(**changes) -> User:
    fields = dict(
        id=uuid4(),
        firstname="Alice",
        lastname="Smith",
        email="alice@example.com",
        age=25,
        created=CREATED,
    )
    fields.update(changes)
    return User(**fields)


def _create_command(**changes) -> CreateUserCommand:
    fields = dict(firstname="Alice", lastname="Smith", email="alice@example.com", age=25)
    fields.update(changes)
    return CreateUserCommand(**fields)


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    def test_fresh_email_creates_user(self, repo: MagicMock) -> None:
        """A valid command is stored once with a generated id and timestamp."""
        before = datetime.now(timezone.utc)
        result = CreateUserUseCase(repo).execute(_create_command())
        after = datetime.now(timezone.utc)

        assert isinstance(result.id, UUID)
        assert before <= result.created <= after
        assert result.created.tzinfo is not None
        repo.get_by_email.assert_called_once_with("alice@example.com")
        repo.create.assert_called_once()
        stored: User = repo.create.call_args.args[0]
        assert stored.id == result.id
        assert stored.created == result.created
        assert (stored.firstname, stored.lastname, stored.email, stored.age) == (
            "Alice",
            "Smith",
            "alice@example.com",
            25,
        )

    def test_uses_injected_id_and_clock(self, repo: MagicMock) -> None:
        """Id factory and clock are constructor dependencies."""
        fixed_id = uuid4()
        use_case = CreateUserUseCase(repo, id_factory=lambda: fixed_id, clock=lambda: CREATED)

        result = use_case.execute(_create_command())

        assert result.id == fixed_id
        assert result.created == CREATED

    def test_each_call_gets_a_new_id(self, repo: MagicMock) -> None:
        use_case = CreateUserUseCase(repo)
        first = use_case.execute(_create_command(email="a@example.com"))
        second = use_case.execute(_create_command(email="b@example.com"))
        assert first.id != second.id

    def test_command_is_not_mutated(self, repo: MagicMock) -> None:
        """The caller's command is left untouched."""
        command = _create_command()
        CreateUserUseCase(repo).execute(command)
        assert command == _create_command()

    def test_invalid_input_fails_before_repository(self, repo: MagicMock) -> None:
        """Validation errors short-circuit every repository call."""
        with pytest.raises(InvalidUserError, match="firstname is required"):
            CreateUserUseCase(repo).execute(_create_command(firstname=""))

        repo.get_by_email.assert_not_called()
        repo.create.assert_not_called()

    def test_existing_email_conflicts(self, repo: MagicMock) -> None:
        """An email returned by get_by_email is a conflict; nothing is created."""
        repo.get_by_email.return_value = _stored_user()

        with pytest.raises(EmailAlreadyExistsError):
            CreateUserUseCase(repo).execute(_create_command())

        repo.create.assert_not_called()

    def test_storage_unique_violation_conflicts(self, repo: MagicMock) -> None:
        """A concurrent insert caught by the unique constraint is a conflict."""
        repo.create.side_effect = DuplicateEmailError("alice@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            CreateUserUseCase(repo).execute(_create_command())

    def test_email_lookup_failure_is_internal(self, repo: MagicMock) -> None:
        """A failing uniqueness lookup is surfaced, not treated as absent."""
        repo.get_by_email.side_effect = RepositoryError("connection lost")

        with pytest.raises(UserInternalError) as exc_info:
            CreateUserUseCase(repo).execute(_create_command())

        assert exc_info.value.message == "internal server error"
        repo.create.assert_not_called()

    def test_create_failure_is_internal(self, repo: MagicMock) -> None:
        repo.create.side_effect = RepositoryError("disk full")

        with pytest.raises(UserInternalError) as exc_info:
            CreateUserUseCase(repo).execute(_create_command())

        assert "disk full" not in exc_info.value.message


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    def test_returns_stored_user(self, repo: MagicMock) -> None:
        stored = _stored_user()
        repo.get_by_id.return_value = stored

        result = GetUserUseCase(repo).execute(stored.id)

        assert result.id == stored.id
        assert result.email == stored.email
        assert result.created == CREATED

    def test_missing_user_is_not_found(self, repo: MagicMock) -> None:
        """None from the repository maps to NotFound, not Internal."""
        with pytest.raises(UserNotFoundError):
            GetUserUseCase(repo).execute(uuid4())

    def test_repository_failure_is_internal(self, repo: MagicMock) -> None:
        repo.get_by_id.side_effect = RepositoryError("timeout")

        with pytest.raises(UserInternalError):
            GetUserUseCase(repo).execute(uuid4())

    def test_repeated_reads_are_identical(self, repo: MagicMock) -> None:
        """Two reads with no writes in between give equal results."""
        stored = _stored_user()
        repo.get_by_id.return_value = stored
        use_case = GetUserUseCase(repo)

        assert use_case.execute(stored.id) == use_case.execute(stored.id)


class TestUpdateUserUseCase:
    """Tests for the UpdateUserUseCase."""

    def test_overlays_mutable_fields_only(self, repo: MagicMock) -> None:
        """id and created come from the stored record; the rest from input."""
        stored = _stored_user()
        repo.get_by_id.return_value = stored
        command = UpdateUserCommand(
            user_id=stored.id,
            firstname="Alicia",
            lastname="Jones",
            email="alicia@example.com",
            age=26,
        )

        result = UpdateUserUseCase(repo).execute(command)

        merged: User = repo.update.call_args.args[0]
        assert merged == User(
            id=stored.id,
            created=CREATED,
            firstname="Alicia",
            lastname="Jones",
            email="alicia@example.com",
            age=26,
        )
        assert result.id == stored.id
        assert result.created == CREATED
        assert result.firstname == "Alicia"

    def test_stored_record_is_not_mutated(self, repo: MagicMock) -> None:
        stored = _stored_user()
        repo.get_by_id.return_value = stored

        UpdateUserUseCase(repo).execute(
            UpdateUserCommand(
                user_id=stored.id, firstname="Bob", lastname="Smith",
                email="bob@example.com", age=30,
            )
        )

        assert stored.firstname == "Alice"

    def test_invalid_input_fails_before_lookup(self, repo: MagicMock) -> None:
        """Validation runs on the input before existence is checked."""
        command = UpdateUserCommand(user_id=uuid4(), firstname="Bob")

        with pytest.raises(InvalidUserError, match="lastname is required"):
            UpdateUserUseCase(repo).execute(command)

        repo.get_by_id.assert_not_called()
        repo.update.assert_not_called()

    def test_missing_user_is_not_found(self, repo: MagicMock) -> None:
        command = UpdateUserCommand(
            user_id=uuid4(), firstname="Bob", lastname="Smith",
            email="bob@example.com", age=30,
        )

        with pytest.raises(UserNotFoundError):
            UpdateUserUseCase(repo).execute(command)

        repo.update.assert_not_called()

    def test_lookup_failure_is_internal(self, repo: MagicMock) -> None:
        repo.get_by_id.side_effect = RepositoryError("timeout")
        command = UpdateUserCommand(
            user_id=uuid4(), firstname="Bob", lastname="Smith",
            email="bob@example.com", age=30,
        )

        with pytest.raises(UserInternalError):
            UpdateUserUseCase(repo).execute(command)

    def test_update_failure_is_internal(self, repo: MagicMock) -> None:
        stored = _stored_user()
        repo.get_by_id.return_value = stored
        repo.update.side_effect = RepositoryError("deadlock")

        with pytest.raises(UserInternalError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(
                    user_id=stored.id, firstname="Bob", lastname="Smith",
                    email="bob@example.com", age=30,
                )
            )

    def test_email_taken_by_other_user_conflicts(self, repo: MagicMock) -> None:
        stored = _stored_user()
        repo.get_by_id.return_value = stored
        repo.update.side_effect = DuplicateEmailError("bob@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(
                    user_id=stored.id, firstname="Bob", lastname="Smith",
                    email="bob@example.com", age=30,
                )
            )


class TestDeleteUserUseCase:
    """Tests for the DeleteUserUseCase."""

    def test_deletes_fetched_record(self, repo: MagicMock) -> None:
        stored = _stored_user()
        repo.get_by_id.return_value = stored

        assert DeleteUserUseCase(repo).execute(stored.id) is None

        repo.delete.assert_called_once_with(stored)

    def test_missing_user_is_not_found(self, repo: MagicMock) -> None:
        """A missing id never reaches repository delete."""
        with pytest.raises(UserNotFoundError):
            DeleteUserUseCase(repo).execute(uuid4())

        repo.delete.assert_not_called()

    def test_lookup_failure_is_internal(self, repo: MagicMock) -> None:
        repo.get_by_id.side_effect = RepositoryError("timeout")

        with pytest.raises(UserInternalError):
            DeleteUserUseCase(repo).execute(uuid4())

        repo.delete.assert_not_called()

    def test_delete_failure_is_internal(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = _stored_user()
        repo.delete.side_effect = RepositoryError("locked")

        with pytest.raises(UserInternalError):
            DeleteUserUseCase(repo).execute(uuid4())

