"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.domain.users.entities import User


class RepositoryError(Exception):
    """Raised by repository adapters when storage fails.

    "Not found" is never signalled with this error: lookups return None.
    """


class DuplicateEmailError(RepositoryError):
    """Raised when the storage unique constraint on email is violated."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Duplicate email: {email}")
        self.email = email


class UserRepository(ABC):
    """Port for storing and retrieving users."""

    @abstractmethod
    def create(self, user: User) -> None:
        """Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already stored.
            RepositoryError: On any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Return the user with this id, or None if not found.

        Raises:
            RepositoryError: On storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user owning this email, or None if not found.

        Raises:
            RepositoryError: On storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> None:
        """Persist every mutable field of an existing user.

        Raises:
            DuplicateEmailError: If the new email belongs to another user.
            RepositoryError: On any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user: User) -> None:
        """Remove a user.

        Raises:
            RepositoryError: On storage failure.
        """
        raise NotImplementedError
