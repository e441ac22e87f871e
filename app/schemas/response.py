"""Response envelope shared by every endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse[DataT](BaseModel):
    """
    ``{"success": ..., "data": ..., "message": ...}`` envelope.

    Failures carry ``data = None`` and are built by the exception handlers
    in ``app.errors``; routes only ever return successes.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True, description="Whether the request succeeded")
    data: DataT | None = Field(default=None, description="Response payload")
    message: str = Field(default="", description="Human readable outcome")


_ERROR_EXAMPLES: dict[int, tuple[str, str]] = {
    400: ("Bad request", "Incorrect Inputs"),
    401: ("Missing or invalid bearer token", "Unauthorized User"),
    404: ("Target not found or not accessible", "Blog Not Found"),
    429: ("Rate limit exceeded", "Rate limit exceeded: 30 per 1 minute"),
    500: ("Store failure", "Internal Server Issue"),
}


def error_responses(*status_codes: int) -> dict[int | str, dict]:
    """
    OpenAPI ``responses`` entries for the failure envelope.

    Args:
        status_codes: Status codes the endpoint can fail with; 401, 429 and
            500 are always included.

    Returns:
        dict: Mapping usable as ``APIRouter`` route ``responses``
    """
    codes = sorted({*status_codes, 401, 429, 500})
    return {
        code: {
            "description": _ERROR_EXAMPLES[code][0],
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "data": None,
                        "message": _ERROR_EXAMPLES[code][1],
                    },
                },
            },
        }
        for code in codes
    }
