"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the users context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.get_user import GetUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.core.config import settings
from app.domain.users.ports import UserRepository
from app.infrastructure.db import create_db_engine
from app.infrastructure.users.user_repository import UserRepositoryAdapter


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Return the process-wide SQLAlchemy engine."""
    return create_db_engine(settings)


def get_user_repository(engine: Engine = Depends(get_db_engine)) -> UserRepository:
    """Build the UserRepository adapter on the shared engine."""
    return UserRepositoryAdapter(engine=engine)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its infrastructure dependencies."""
    return UpdateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=user_repo)
