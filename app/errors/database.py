from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.configs import file_logger
from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.errors.base import BaseAppError, create_exception_handler, error_envelope
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when database connection fails."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DatabaseInitializationError(DatabaseError):
    """Exception raised when database initialization fails."""

    def __init__(
        self,
        detail: str = "Failed to initialize database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique constraint rejects an insert."""

    def __init__(
        self,
        detail: str = "A record with this value already exists",
    ) -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    """
    Exception raised when a record is not found.

    Also used when the record exists but the caller may not act on it, so
    the two cases are indistinguishable from outside.
    """

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class UserNotFoundError(RecordNotFoundError):
    def __init__(self, detail: str = "User Not Found") -> None:
        super().__init__(detail)


class BlogNotFoundError(RecordNotFoundError):
    def __init__(self, detail: str = "Blog Not Found") -> None:
        super().__init__(detail)


class CommentNotFoundError(RecordNotFoundError):
    def __init__(self, detail: str = "Comment Not Found") -> None:
        super().__init__(detail)


database_exception_handler = create_exception_handler(logger)


async def sqlalchemy_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Answer unexpected store failures with a generic server error."""
    logger.error(
        f"Store failure for ip: {host(request)} for endpoint {request.url.path}",
        exc_info=exc,
    )
    return error_envelope(DEFAULT_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR)
