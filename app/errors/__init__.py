from app.errors.auth import UnauthorizedError, auth_exception_handler
from app.errors.base import (
    BaseAppError,
    create_exception_handler,
    error_envelope,
    http_exception_handler,
)
from app.errors.database import (
    BlogNotFoundError,
    CommentNotFoundError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    UserNotFoundError,
    database_exception_handler,
    sqlalchemy_exception_handler,
)
from app.errors.validation import (
    PaginationError,
    SelfFollowError,
    ValidationError,
    client_error_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogNotFoundError",
    "CommentNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "PaginationError",
    "RecordNotFoundError",
    "SelfFollowError",
    "UnauthorizedError",
    "UserNotFoundError",
    "ValidationError",
    "auth_exception_handler",
    "client_error_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_envelope",
    "http_exception_handler",
    "sqlalchemy_exception_handler",
    "validation_exception_handler",
]
