# app/context/__init__.py
"""
Caller context threaded through every core operation.

The identity dependency builds one ``CallerContext`` per request and routes
hand it to services explicitly; nothing reads the caller from ambient state.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallerContext:
    """Verified identity of the user making the request."""

    user_id: int

    def owns(self, owner_id: int) -> bool:
        return self.user_id == owner_id


__all__ = ["CallerContext"]
