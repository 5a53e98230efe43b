"""
Use case: Register a new user.

Input: CreateUserCommand (firstname, lastname, email, age)
Output: UserResult
Side effects: Inserts one row through the UserRepository.
Failure cases: InvalidUserError, EmailAlreadyExistsError, UserInternalError.
"""

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

from app.application.users.dtos import CreateUserCommand, UserResult, to_user_result
from app.domain.users.entities import User
from app.domain.users.errors import EmailAlreadyExistsError, UserInternalError
from app.domain.users.ports import DuplicateEmailError, RepositoryError, UserRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateUserUseCase:
    """Orchestrates user registration.

    The email pre-check only improves the error returned to the caller;
    the storage unique constraint is what actually guarantees uniqueness,
    so a DuplicateEmailError raised on insert is reported as a conflict too.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        id_factory: Callable[[], UUID] = uuid4,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._user_repo = user_repo
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, command: CreateUserCommand) -> UserResult:
        """Run the create user use case.

        Args:
            command: The user fields supplied by the caller.

        Returns:
            The stored user, with its generated id and creation time.

        Raises:
            InvalidUserError: If a field breaks a validation rule.
            EmailAlreadyExistsError: If the email is already registered.
            UserInternalError: If the repository fails.
        """
        user = User(
            id=self._id_factory(),
            created=self._clock(),
            firstname=command.firstname,
            lastname=command.lastname,
            email=command.email,
            age=command.age,
        )
        user.validate()

        try:
            existing = self._user_repo.get_by_email(user.email)
        except RepositoryError as exc:
            logger.error("Email lookup failed before create.", exc_info=True)
            raise UserInternalError() from exc

        if existing is not None:
            logger.warning("Rejected create: email already registered.")
            raise EmailAlreadyExistsError()

        try:
            self._user_repo.create(user)
        except DuplicateEmailError as exc:
            logger.warning("Rejected create: email taken concurrently.")
            raise EmailAlreadyExistsError() from exc
        except RepositoryError as exc:
            logger.error("Failed to create user id=%s.", user.id, exc_info=True)
            raise UserInternalError() from exc

        logger.info("Created user id=%s", user.id)
        return to_user_result(user)
