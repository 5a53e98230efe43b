"""
Domain-specific errors for the users bounded context.

Every failure a use case can report is one of four kinds. The kind
travels on the exception itself, so transports map ``exc.kind`` to
their own status codes without inspecting concrete classes.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Transport-neutral classification of a failure."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUserError(UserDomainError):
    """Raised when user input breaks a validation rule."""

    kind = ErrorKind.BAD_REQUEST
    default_message = "bad request"


class UserNotFoundError(UserDomainError):
    """Raised when the referenced user does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "user not found"

    def __init__(self, user_id: object = None) -> None:
        super().__init__()
        self.user_id = user_id


class EmailAlreadyExistsError(UserDomainError):
    """Raised when another user already owns the email address."""

    kind = ErrorKind.CONFLICT
    default_message = "email already exists"


class UserInternalError(UserDomainError):
    """Raised when storage (or anything else) fails unexpectedly.

    The message is always generic; the underlying cause is kept on
    ``__cause__`` for logging only.
    """

    kind = ErrorKind.INTERNAL
    default_message = "internal server error"
