"""Utility helper functions."""

from app.utils.helpers import display_datetime, get_summary, host, time_taken, today_str

__all__ = [
    "display_datetime",
    "get_summary",
    "host",
    "time_taken",
    "today_str",
]
