"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from app.domain.users.errors import InvalidUserError

EMAIL_PATTERN = re.compile(r"[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}")
MIN_AGE = 1
MAX_AGE = 150


def is_valid_email(email: str) -> bool:
    """Return True if the whole email matches the (lowercase-only) pattern."""
    return EMAIL_PATTERN.fullmatch(email) is not None


@dataclass(frozen=True)
class User:
    """A registered individual.

    ``id`` and ``created`` are assigned once by the create use case
    and are None only on values that have not been stored yet.

    Attributes:
        id: Unique identifier.
        firstname: Given name, non-empty.
        lastname: Family name, non-empty.
        email: Unique, lowercase email address.
        age: Age in years, 1-150.
        created: UTC creation timestamp.
    """

    firstname: str
    lastname: str
    email: str
    age: int
    id: Optional[UUID] = None
    created: Optional[datetime] = None

    def validate(self) -> None:
        """Check field values, first failing rule wins.

        Raises:
            InvalidUserError: With the message of the broken rule.
        """
        if not self.firstname:
            raise InvalidUserError("firstname is required")
        if not self.lastname:
            raise InvalidUserError("lastname is required")
        if not self.email:
            raise InvalidUserError("email is required")
        if not is_valid_email(self.email):
            raise InvalidUserError("invalid email format")
        if not (MIN_AGE <= self.age <= MAX_AGE):
            raise InvalidUserError(
                f"age must be between {MIN_AGE} and {MAX_AGE}"
            )
