# app/middleware/middleware.py
"""
Middleware components for the Inkwell backend.

This module contains middleware for security headers, request logging with
request-id correlation and CORS handling, plus the lifespan event handler
that configures logging and opens and closes the database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from re import compile as re_compile
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.configs import file_logger, settings
from app.db import close_db, init_db
from app.monitoring import bind_request_id, clear_context, configure_logging
from app.utils.helpers import get_summary, host

logger = file_logger(getLogger(__name__))

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re_compile(r"^[A-Za-z0-9._-]{1,64}$")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    configure_logging()
    logger.info(f"Starting {app.title}...")

    try:
        await init_db()
        logger.info("Services initialized successfully")
        logger.info("Services:")
        logger.info("  - Backend API: http://localhost:8000")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await close_db()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:5173",  # Vite development
        "http://127.0.0.1:5173",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


def request_id_for(request: Request) -> str:
    """Reuse a well-formed incoming request id, otherwise mint one."""
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return uuid4().hex


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing, correlated by request id."""
        clear_context()
        request_id = request_id_for(request)
        bind_request_id(request_id)

        start_time = perf_counter()
        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
