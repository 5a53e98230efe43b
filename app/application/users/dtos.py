"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from app.domain.users.entities import User


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user.

    Attributes:
        firstname: Given name.
        lastname: Family name.
        email: Email address, must be unique.
        age: Age in years.
    """

    firstname: str = ""
    lastname: str = ""
    email: str = ""
    age: int = 0


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for overwriting the mutable fields of a user.

    Omitted fields keep their zero value and overwrite the stored one.

    Attributes:
        user_id: Identifier of the user to update.
        firstname: New given name.
        lastname: New family name.
        email: New email address.
        age: New age in years.
    """

    user_id: UUID
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    age: int = 0


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a stored user."""

    id: UUID
    firstname: str
    lastname: str
    email: str
    age: int
    created: datetime


def to_user_result(user: User) -> UserResult:
    """Map a stored User entity to its output DTO."""
    return UserResult(
        id=user.id,
        firstname=user.firstname,
        lastname=user.lastname,
        email=user.email,
        age=user.age,
        created=user.created,
    )
