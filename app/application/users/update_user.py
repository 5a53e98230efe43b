"""
Use case: Overwrite the mutable fields of an existing user.

Input: UpdateUserCommand (user_id, firstname, lastname, email, age)
Output: UserResult (the merged record)
Side effects: Updates one row through the UserRepository.
Failure cases: InvalidUserError, UserNotFoundError,
    EmailAlreadyExistsError, UserInternalError.
"""

import logging
from dataclasses import replace

from app.application.users.dtos import UpdateUserCommand, UserResult, to_user_result
from app.domain.users.entities import User
from app.domain.users.errors import (
    EmailAlreadyExistsError,
    UserInternalError,
    UserNotFoundError,
)
from app.domain.users.ports import DuplicateEmailError, RepositoryError, UserRepository

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Orchestrates a full overwrite of firstname, lastname, email and age.

    The input is validated before the stored record is fetched, so an
    invalid payload for an unknown id is reported as a bad request.
    ``id`` and ``created`` always come from the stored record.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> UserResult:
        """Run the update user use case.

        Args:
            command: Target id and the new field values.

        Returns:
            The merged user as persisted.

        Raises:
            InvalidUserError: If a field breaks a validation rule.
            UserNotFoundError: If no user has this id.
            EmailAlreadyExistsError: If storage rejects the email as taken.
            UserInternalError: If the repository fails.
        """
        User(
            id=command.user_id,
            firstname=command.firstname,
            lastname=command.lastname,
            email=command.email,
            age=command.age,
        ).validate()

        try:
            existing = self._user_repo.get_by_id(command.user_id)
        except RepositoryError as exc:
            logger.error(
                "Failed to load user id=%s for update.", command.user_id, exc_info=True
            )
            raise UserInternalError() from exc

        if existing is None:
            raise UserNotFoundError(command.user_id)

        merged = replace(
            existing,
            firstname=command.firstname,
            lastname=command.lastname,
            email=command.email,
            age=command.age,
        )

        try:
            self._user_repo.update(merged)
        except DuplicateEmailError as exc:
            logger.warning("Rejected update of id=%s: email taken.", merged.id)
            raise EmailAlreadyExistsError() from exc
        except RepositoryError as exc:
            logger.error("Failed to update user id=%s.", merged.id, exc_info=True)
            raise UserInternalError() from exc

        logger.info("Updated user id=%s", merged.id)
        return to_user_result(merged)
