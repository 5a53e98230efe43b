"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Input parsing is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.dtos import CreateUserCommand, UpdateUserCommand, UserResult
from app.application.users.get_user import GetUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_update_user_use_case,
)
from app.interfaces.users.schemas import (
    DeleteUserResponse,
    ErrorResponse,
    UserFields,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

_ERRORS_BY_ID = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def to_user_response(result: UserResult) -> UserResponse:
    """Map a use case result to the wire schema."""
    return UserResponse(
        id=result.id,
        firstname=result.firstname,
        lastname=result.lastname,
        email=result.email,
        age=result.age,
        created=result.created,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a user",
    description="Register a user. The id and creation time are generated.",
)
def create_user(
    request: UserFields,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Create a user from the request body."""
    command = CreateUserCommand(
        firstname=request.firstname,
        lastname=request.lastname,
        email=request.email,
        age=request.age,
    )
    return to_user_response(use_case.execute(command))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=_ERRORS_BY_ID,
    summary="Get a user",
)
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return the user with the given id."""
    return to_user_response(use_case.execute(user_id))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_ERRORS_BY_ID, 409: {"model": ErrorResponse}},
    summary="Update a user",
    description=(
        "Overwrite firstname, lastname, email and age. "
        "Omitted fields are reset to their zero value."
    ),
)
def update_user(
    user_id: UUID,
    request: UserFields,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Update the user with the given id."""
    command = UpdateUserCommand(
        user_id=user_id,
        firstname=request.firstname,
        lastname=request.lastname,
        email=request.email,
        age=request.age,
    )
    return to_user_response(use_case.execute(command))


@router.delete(
    "/{user_id}",
    response_model=DeleteUserResponse,
    responses=_ERRORS_BY_ID,
    summary="Delete a user",
)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> DeleteUserResponse:
    """Delete the user with the given id."""
    use_case.execute(user_id)
    return DeleteUserResponse()
