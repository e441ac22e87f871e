"""Client input errors and FastAPI request validation handling."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler, error_envelope
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Client input is malformed or self-referential; never retried."""

    def __init__(self, detail: str = "Incorrect Inputs") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class SelfFollowError(ValidationError):
    def __init__(self) -> None:
        super().__init__("You cannot follow yourself")


class PaginationError(ValidationError):
    """Requested page is outside the available range, or there is nothing to page."""


REQUEST_PARTS = ("body", "path", "query", "header", "cookie")


def field_message(error: dict) -> str:
    """
    Render one pydantic error as ``"Field : reason"``.

    Args:
        error: A single entry from ``RequestValidationError.errors()``.

    Returns:
        str: Human readable message naming the offending field.
    """
    location = [str(loc) for loc in error.get("loc", ())]
    # Only the leading entry names the request part; a field may share its name
    if location and location[0] in REQUEST_PARTS:
        location = location[1:]
    reason = error.get("msg", "Invalid value")
    if not location:
        return reason
    return f"{location[-1].replace('_', ' ').title()} : {reason}"


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with the shared envelope.

    Only the first offending field is reported, matching how clients
    display a single inline message.
    """
    errors = cast(RequestValidationError, exc).errors()
    message = field_message(errors[0]) if errors else "Incorrect Inputs"

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {message}",
    )
    return error_envelope(message, HTTP_400_BAD_REQUEST)


client_error_handler = create_exception_handler(logger)
