"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from app.configs import UNAUTHORIZED_MESSAGE, file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UnauthorizedError(BaseAppError):
    """Raised when the bearer credential is missing, expired or forged."""

    def __init__(self, detail: str = UNAUTHORIZED_MESSAGE) -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


auth_exception_handler = create_exception_handler(logger)
