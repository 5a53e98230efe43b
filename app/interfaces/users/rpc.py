"""
JSON-RPC 2.0 transport for the users bounded context.

Exposes the same four use cases as the HTTP router under a
``UserService`` namespace:

    → {"jsonrpc": "2.0", "id": 1, "method": "UserService.GetUser",
       "params": {"id": "6f1c..."}}
    ← {"jsonrpc": "2.0", "id": 1, "result": {"user": {...}}}

Domain failures are reported with canonical RPC status codes
(INVALID_ARGUMENT, NOT_FOUND, ALREADY_EXISTS, INTERNAL); envelope
failures use the negative JSON-RPC codes.
"""

import json
import logging
from enum import IntEnum
from typing import Any, Callable
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.application.users.get_user import GetUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.domain.users.errors import ErrorKind, UserDomainError
from app.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_update_user_use_case,
)
from app.interfaces.users.router import to_user_response
from app.interfaces.users.schemas import (
    CreateUserParams,
    RpcError,
    RpcId,
    RpcRequest,
    RpcResponse,
    UpdateUserParams,
    UserIdParams,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rpc"])

SERVICE_NAME = "UserService"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601


class RpcStatus(IntEnum):
    """Canonical RPC status codes (gRPC numbering)."""

    OK = 0
    INVALID_ARGUMENT = 3
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    INTERNAL = 13


RPC_STATUS_BY_KIND: dict[ErrorKind, RpcStatus] = {
    ErrorKind.BAD_REQUEST: RpcStatus.INVALID_ARGUMENT,
    ErrorKind.NOT_FOUND: RpcStatus.NOT_FOUND,
    ErrorKind.CONFLICT: RpcStatus.ALREADY_EXISTS,
    ErrorKind.INTERNAL: RpcStatus.INTERNAL,
}


class RpcStatusError(Exception):
    """A call rejected with an RPC status before reaching a use case."""

    def __init__(self, status: RpcStatus, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class MethodNotFoundError(Exception):
    """Raised when the requested method is not part of UserService."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Method not found: {method}")
        self.method = method


def _parse_user_id(raw: str) -> UUID:
    if not raw:
        raise RpcStatusError(RpcStatus.INVALID_ARGUMENT, "user ID is required")
    try:
        return UUID(raw)
    except ValueError as exc:
        raise RpcStatusError(
            RpcStatus.INVALID_ARGUMENT, f"invalid user ID format: {exc}"
        ) from exc


def _parse_params(model, params: dict[str, Any]):
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        raise RpcStatusError(RpcStatus.INVALID_ARGUMENT, "invalid request") from exc


class UserRpcService:
    """Translates UserService RPC calls into use case executions."""

    def __init__(
        self,
        create_use_case: CreateUserUseCase,
        get_use_case: GetUserUseCase,
        update_use_case: UpdateUserUseCase,
        delete_use_case: DeleteUserUseCase,
    ) -> None:
        self._create = create_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._methods: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            f"{SERVICE_NAME}.CreateUser": self.create_user,
            f"{SERVICE_NAME}.GetUser": self.get_user,
            f"{SERVICE_NAME}.UpdateUser": self.update_user,
            f"{SERVICE_NAME}.DeleteUser": self.delete_user,
        }

    def call(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        """Dispatch one call.

        Raises:
            MethodNotFoundError: If the method is unknown.
            RpcStatusError: If the params are unusable.
            UserDomainError: If the use case fails.
        """
        handler = self._methods.get(method)
        if handler is None:
            raise MethodNotFoundError(method)
        return handler(params)

    def create_user(self, params: dict[str, Any]) -> dict[str, Any]:
        request = _parse_params(CreateUserParams, params)
        if request.user is None:
            raise RpcStatusError(RpcStatus.INVALID_ARGUMENT, "user data is required")
        result = self._create.execute(
            CreateUserCommand(
                firstname=request.user.firstname,
                lastname=request.user.lastname,
                email=request.user.email,
                age=request.user.age,
            )
        )
        return {"user": to_user_response(result).model_dump(mode="json")}

    def get_user(self, params: dict[str, Any]) -> dict[str, Any]:
        request = _parse_params(UserIdParams, params)
        result = self._get.execute(_parse_user_id(request.id))
        return {"user": to_user_response(result).model_dump(mode="json")}

    def update_user(self, params: dict[str, Any]) -> dict[str, Any]:
        request = _parse_params(UpdateUserParams, params)
        user_id = _parse_user_id(request.id)
        if request.user is None:
            raise RpcStatusError(RpcStatus.INVALID_ARGUMENT, "user data is required")
        result = self._update.execute(
            UpdateUserCommand(
                user_id=user_id,
                firstname=request.user.firstname,
                lastname=request.user.lastname,
                email=request.user.email,
                age=request.user.age,
            )
        )
        return {"user": to_user_response(result).model_dump(mode="json")}

    def delete_user(self, params: dict[str, Any]) -> dict[str, Any]:
        request = _parse_params(UserIdParams, params)
        self._delete.execute(_parse_user_id(request.id))
        return {"message": "User deleted successfully"}


def get_user_rpc_service(
    create_use_case: CreateUserUseCase = Depends(get_create_user_use_case),
    get_use_case: GetUserUseCase = Depends(get_get_user_use_case),
    update_use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
    delete_use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> UserRpcService:
    """Build UserRpcService from the four use cases."""
    return UserRpcService(
        create_use_case=create_use_case,
        get_use_case=get_use_case,
        update_use_case=update_use_case,
        delete_use_case=delete_use_case,
    )


def _rpc_response(
    rpc_id: Any, result: dict[str, Any] | None = None, error: RpcError | None = None
) -> JSONResponse:
    """Build a JSON-RPC response that carries either a result or an error."""
    body = RpcResponse(id=rpc_id, result=result, error=error).model_dump(mode="json")
    body.pop("error" if error is None else "result")
    return JSONResponse(status_code=200, content=body)


def _echo_id(raw: Any) -> RpcId:
    """Return the request id if it is a valid JSON-RPC id, else None."""
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        return None
    return raw


def _status_error(rpc_id: Any, status: RpcStatus, message: str) -> JSONResponse:
    return _rpc_response(
        rpc_id,
        error=RpcError(code=int(status), message=message, data={"status": status.name}),
    )


@router.post(
    "/rpc",
    response_model=RpcResponse,
    summary="UserService JSON-RPC endpoint",
    description="JSON-RPC 2.0 access to CreateUser, GetUser, UpdateUser and DeleteUser.",
)
async def handle_rpc(
    request: Request,
    service: UserRpcService = Depends(get_user_rpc_service),
) -> JSONResponse:
    """Decode one JSON-RPC call, run it and encode the outcome."""
    try:
        payload = json.loads(await request.body())
    except ValueError:
        return _rpc_response(None, error=RpcError(code=PARSE_ERROR, message="Parse error"))

    try:
        call = RpcRequest.model_validate(payload)
    except ValidationError:
        rpc_id = _echo_id(payload.get("id") if isinstance(payload, dict) else None)
        return _rpc_response(
            rpc_id, error=RpcError(code=INVALID_REQUEST, message="Invalid Request")
        )

    try:
        result = await run_in_threadpool(service.call, call.method, call.params)
    except MethodNotFoundError as exc:
        return _rpc_response(
            call.id, error=RpcError(code=METHOD_NOT_FOUND, message=str(exc))
        )
    except RpcStatusError as exc:
        logger.warning("RPC %s rejected: %s", call.method, exc.message)
        return _status_error(call.id, exc.status, exc.message)
    except UserDomainError as exc:
        status = RPC_STATUS_BY_KIND[exc.kind]
        logger.warning("RPC %s failed: %s", call.method, status.name)
        return _status_error(call.id, status, exc.message)
    except Exception:
        logger.exception("Unexpected error in RPC %s", call.method)
        return _status_error(call.id, RpcStatus.INTERNAL, "internal server error")

    return _rpc_response(call.id, result=result)
