"""
Use case: Remove a user.

Input: user id (UUID)
Output: None
Side effects: Deletes one row through the UserRepository.
Failure cases: UserNotFoundError, UserInternalError.
"""

import logging
from uuid import UUID

from app.domain.users.errors import UserInternalError, UserNotFoundError
from app.domain.users.ports import RepositoryError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Deletes a user after confirming it exists."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: UUID) -> None:
        """Run the delete user use case.

        Raises:
            UserNotFoundError: If no user has this id.
            UserInternalError: If the repository fails.
        """
        try:
            existing = self._user_repo.get_by_id(user_id)
        except RepositoryError as exc:
            logger.error(
                "Failed to load user id=%s for delete.", user_id, exc_info=True
            )
            raise UserInternalError() from exc

        if existing is None:
            raise UserNotFoundError(user_id)

        try:
            self._user_repo.delete(existing)
        except RepositoryError as exc:
            logger.error("Failed to delete user id=%s.", user_id, exc_info=True)
            raise UserInternalError() from exc

        logger.info("Deleted user id=%s", user_id)
