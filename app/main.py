# app/main.py

"""Inkwell Backend - follow graph, likes and comments for a multi-user blog."""

from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import file_logger, settings
from app.errors import (
    BaseAppError,
    DatabaseError,
    UnauthorizedError,
    ValidationError,
    auth_exception_handler,
    client_error_handler,
    create_exception_handler,
    database_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.routes import blog_router, comment_router, follow_router, like_router
from app.schemas.health import HealthCheckResponse
from app.utils.helpers import today_str

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Follow graph, likes and comments for the Inkwell blogging platform",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# Engagement routers go first so "/blog/{blog_id}" never shadows them
routes = [
    follow_router,
    like_router,
    comment_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (UnauthorizedError, auth_exception_handler),
    (ValidationError, client_error_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (SQLAlchemyError, sqlalchemy_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2026-01-05 14:03:00",
                        "environment": "development",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Liveness probe; needs no credentials and does not touch the database.

    Returns
    -------
    HealthCheckResponse
        Version, status and server time.
    """
    return HealthCheckResponse(
        version=app.version,
        status="ok",
        timestamp=today_str(),
        environment=settings.ENVIRONMENT,
    )
