"""
Adapter: User repository.

Implements UserRepository port on top of a SQLAlchemy engine.
Storage failures are wrapped in RepositoryError; unique-constraint
violations on email become DuplicateEmailError.
"""

import logging
from datetime import timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.users.entities import User
from app.domain.users.ports import DuplicateEmailError, RepositoryError, UserRepository
from app.infrastructure.db import users_table

logger = logging.getLogger(__name__)


def _row_to_user(row: RowMapping) -> User:
    created = row["created"]
    # SQLite drops the offset; every stored timestamp is UTC.
    if created is not None and created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return User(
        id=row["id"],
        firstname=row["firstname"],
        lastname=row["lastname"],
        email=row["email"],
        age=row["age"],
        created=created,
    )


class UserRepositoryAdapter(UserRepository):
    """Persists users to the ``users`` table.

    Implements the UserRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, user: User) -> None:
        """Insert a new user row.

        Args:
            user: A fully populated User (id and created set).
        """
        query = insert(users_table).values(
            id=user.id,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            age=user.age,
            created=user.created,
        )
        self._write(query, user.email)
        logger.debug("Inserted user id=%s.", user.id)

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Return the user with this id, or None if not found."""
        return self._fetch_one(select(users_table).where(users_table.c.id == user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user owning this email, or None if not found."""
        return self._fetch_one(
            select(users_table).where(users_table.c.email == email)
        )

    def update(self, user: User) -> None:
        """Overwrite the mutable columns of an existing row.

        ``id`` and ``created`` are never written.
        """
        query = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(
                firstname=user.firstname,
                lastname=user.lastname,
                email=user.email,
                age=user.age,
            )
        )
        self._write(query, user.email)
        logger.debug("Updated user id=%s.", user.id)

    def delete(self, user: User) -> None:
        """Delete the row of this user."""
        query = delete(users_table).where(users_table.c.id == user.id)
        try:
            with self._engine.begin() as conn:
                conn.execute(query)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to delete user: {exc}") from exc
        logger.debug("Deleted user id=%s.", user.id)

    def _fetch_one(self, query) -> Optional[User]:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).mappings().first()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to query users: {exc}") from exc
        return _row_to_user(row) if row is not None else None

    def _write(self, query, email: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(query)
        except IntegrityError as exc:
            # The only unique constraint besides the primary key is email.
            raise DuplicateEmailError(email) from exc
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to write user: {exc}") from exc
