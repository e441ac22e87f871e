# app/managers/rate_limiter.py

"""Rate limiter configuration using slowapi."""

from hashlib import sha256
from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from app.configs import LimiterConfig, file_logger
from app.errors.base import error_envelope
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Authenticated requests are keyed by a digest of their bearer token so
    that users behind one address do not share a budget; everything else
    falls back to the API key header, then the IP address.

    Args:
        request: FastAPI request object.

    Returns:
        Unique identifier string.
    """
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return f"bearer:{sha256(credentials.encode()).hexdigest()[:32]}"

    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle rate limit exceeded exceptions with the shared envelope.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        429 envelope carrying the ``Retry-After`` header slowapi computed.
    """
    http_exc = cast(RateLimitExceeded, exc)
    logger.warning(
        f"Rate limit {http_exc.detail} exceeded for ip: {host(request)} "
        f"at endpoint {request.url.path}",
    )
    slowapi_response = _rate_limit_exceeded_handler(request, http_exc)
    response = error_envelope(
        f"Rate limit exceeded: {http_exc.detail}",
        HTTP_429_TOO_MANY_REQUESTS,
    )
    retry_after = slowapi_response.headers.get("retry-after")
    if retry_after:
        response.headers["Retry-After"] = retry_after
    return response
