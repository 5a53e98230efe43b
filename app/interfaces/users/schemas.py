"""
Pydantic schemas for users API request/response validation.

Request schemas only enforce wire types. Business rules (required
fields, email format, age range) belong to the domain, so every user
field defaults to its zero value and reaches domain validation.
"""

from datetime import datetime
from typing import Any, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field


class UserFields(BaseModel):
    """Mutable user fields accepted by create and update.

    Attributes:
        firstname: Given name.
        lastname: Family name.
        email: Email address.
        age: Age in years (non-negative integer).
    """

    firstname: str = ""
    lastname: str = ""
    email: str = ""
    age: int = Field(default=0, ge=0, description="Age in years")


class UserResponse(BaseModel):
    """A stored user as returned by every transport."""

    id: UUID
    firstname: str
    lastname: str
    email: str
    age: int
    created: datetime


class DeleteUserResponse(BaseModel):
    """Response schema for the delete endpoint."""

    message: str = "User deleted successfully"


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response schema. Never exposes internals."""

    error: str
    detail: Optional[str] = None


# ------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ------------------------------------------------------------------

RpcId = Union[str, int, None]


class RpcRequest(BaseModel):
    """A single JSON-RPC 2.0 call."""

    jsonrpc: Literal["2.0"]
    method: str
    params: dict[str, Any] = Field(default_factory=dict)
    id: RpcId = None


class RpcError(BaseModel):
    """Error member of a JSON-RPC response.

    ``code`` is a canonical RPC status code for domain failures and a
    negative JSON-RPC code for protocol failures.
    """

    code: int
    message: str
    data: Optional[dict[str, Any]] = None


class RpcResponse(BaseModel):
    """A JSON-RPC 2.0 response: exactly one of result or error is set."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RpcId = None
    result: Optional[dict[str, Any]] = None
    error: Optional[RpcError] = None


class CreateUserParams(BaseModel):
    """Params of UserService.CreateUser."""

    user: Optional[UserFields] = None


class UserIdParams(BaseModel):
    """Params of UserService.GetUser and UserService.DeleteUser."""

    id: str = ""


class UpdateUserParams(BaseModel):
    """Params of UserService.UpdateUser."""

    id: str = ""
    user: Optional[UserFields] = None
