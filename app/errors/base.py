from collections.abc import Awaitable, Callable
from logging import Logger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_envelope(message: str, status_code: int) -> ORJSONResponse:
    """Build the failure envelope shared by every error response."""
    return ORJSONResponse(
        content={"success": False, "data": None, "message": message},
        status_code=status_code,
    )


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Server-side failures are logged with their traceback and answered with a
    generic message; client errors keep their own detail.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                f"{detail} for ip: {host(request)} for endpoint {request.url.path}",
                exc_info=exc,
            )
            return error_envelope(DEFAULT_ERROR_MESSAGE, status_code)

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")
        return error_envelope(detail, status_code)

    return handler


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    http_exc = cast(StarletteHTTPException, exc)
    response = error_envelope(str(http_exc.detail), http_exc.status_code)
    if http_exc.headers:
        response.headers.update(http_exc.headers)
    return response
