# tests/errors/test_error_handlers.py
"""Tests for app/errors module."""

from unittest.mock import MagicMock

import orjson
import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import (
    BaseAppError,
    BlogNotFoundError,
    DuplicateEntryError,
    PaginationError,
    SelfFollowError,
    UnauthorizedError,
    create_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
)
from app.errors.validation import field_message


def make_request(path: str = "/api/test", ip: str = "192.168.1.1") -> MagicMock:
    request = MagicMock()
    request.client.host = ip
    request.url.path = path
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Issue"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        assert str(BaseAppError(detail="Test error")) == "Test error"

    @pytest.mark.parametrize(
        ("error", "status_code", "detail"),
        [
            (SelfFollowError(), 400, "You cannot follow yourself"),
            (PaginationError("No Blogs Found"), 400, "No Blogs Found"),
            (UnauthorizedError(), 401, "Unauthorized User"),
            (BlogNotFoundError(), 404, "Blog Not Found"),
            (DuplicateEntryError(), 409, "A record with this value already exists"),
        ],
    )
    def test_subclass_defaults(self, error: BaseAppError, status_code: int, detail: str) -> None:
        assert error.status_code == status_code
        assert error.detail == detail


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_client_error_keeps_detail(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(make_request(), BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "success": False,
            "data": None,
            "message": "Test error",
        }
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    @pytest.mark.asyncio
    async def test_server_error_hides_detail(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(
            make_request("/api/error", "127.0.0.1"),
            BaseAppError(detail="connection refused on 10.0.0.5"),
        )

        assert response.status_code == 500
        assert orjson.loads(response.body)["message"] == "Internal Server Issue"
        logger.error.assert_called_once()
        logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_generic_exception(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(make_request(), ValueError("Something went wrong"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["success"] is False


class TestOtherHandlers:
    """Tests for the store and framework error handlers."""

    @pytest.mark.asyncio
    async def test_sqlalchemy_handler(self) -> None:
        response = await sqlalchemy_exception_handler(make_request(), RuntimeError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {
            "success": False,
            "data": None,
            "message": "Internal Server Issue",
        }

    @pytest.mark.asyncio
    async def test_http_exception_handler_keeps_headers(self) -> None:
        exc = StarletteHTTPException(405, "Method Not Allowed", headers={"Allow": "GET"})

        response = await http_exception_handler(make_request(), exc)

        assert response.status_code == 405
        assert response.headers["Allow"] == "GET"
        assert orjson.loads(response.body)["message"] == "Method Not Allowed"


class TestFieldMessage:
    """Tests for field_message."""

    def test_names_the_field(self) -> None:
        error = {"loc": ("path", "following_id"), "msg": "Input should be a valid integer"}
        assert field_message(error) == "Following Id : Input should be a valid integer"

    def test_nested_body_field(self) -> None:
        error = {"loc": ("body", "comment"), "msg": "Field required"}
        assert field_message(error) == "Comment : Field required"

    def test_field_named_like_a_request_part(self) -> None:
        error = {"loc": ("path", "query"), "msg": "String should have at most 100 characters"}
        assert field_message(error) == "Query : String should have at most 100 characters"

    def test_nested_field_keeps_inner_parts(self) -> None:
        error = {"loc": ("body", "body", "comment"), "msg": "Field required"}
        assert field_message(error) == "Comment : Field required"

    def test_without_location(self) -> None:
        assert field_message({"loc": ("body",), "msg": "Invalid JSON"}) == "Invalid JSON"
