"""Offset pagination bounds shared by every listing endpoint."""

from dataclasses import dataclass
from math import ceil

from app.errors.validation import PaginationError


@dataclass(frozen=True)
class PageWindow:
    """Bounds of one requested page and its navigation metadata."""

    current_page: int
    total_pages: int
    skip: int
    limit: int
    has_next_page: bool
    has_previous_page: bool


def paginate(
    page: int,
    total_count: int,
    *,
    page_size: int,
    empty_message: str,
    label: str = "Page",
) -> PageWindow:
    """
    Validate a 1-based page number against a row count.

    An empty listing is reported with ``empty_message`` whatever page was
    asked for; only then are the page bounds checked.

    Args:
        page: Requested page, starting at 1
        total_count: Number of rows the listing holds
        page_size: Rows per page
        empty_message: Message when there is nothing to list
        label: How the page is named in range errors, e.g. ``"Page Number"``

    Returns:
        PageWindow: Offset, limit and navigation flags for ``page``

    Raises:
        PaginationError: If the listing is empty or ``page`` is out of range
    """
    if total_count <= 0:
        raise PaginationError(empty_message)
    if page < 1:
        raise PaginationError(f"Starting {label} is 1")

    total_pages = ceil(total_count / page_size)
    if page > total_pages:
        raise PaginationError(f"Final {label} is {total_pages}")

    return PageWindow(
        current_page=page,
        total_pages=total_pages,
        skip=(page - 1) * page_size,
        limit=page_size,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )
