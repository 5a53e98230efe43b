"""
Use case: Retrieve a user by id.

Input: user id (UUID)
Output: UserResult
Side effects: None (read-only query).
Failure cases: UserNotFoundError, UserInternalError.
"""

import logging
from uuid import UUID

from app.application.users.dtos import UserResult, to_user_result
from app.domain.users.errors import UserInternalError, UserNotFoundError
from app.domain.users.ports import RepositoryError, UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Read-only query returning a single stored user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: UUID) -> UserResult:
        """Run the get user use case.

        Raises:
            UserNotFoundError: If no user has this id.
            UserInternalError: If the repository fails.
        """
        try:
            user = self._user_repo.get_by_id(user_id)
        except RepositoryError as exc:
            logger.error("Failed to load user id=%s.", user_id, exc_info=True)
            raise UserInternalError() from exc

        if user is None:
            raise UserNotFoundError(user_id)

        return to_user_result(user)
