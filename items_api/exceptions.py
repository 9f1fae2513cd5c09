"""
Items API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Each exception class carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the right status code.
Who:   Raised by route handlers; caught by global handlers.

Exception Hierarchy:
    ItemsApiError (base)
    └── NotFoundError            → 404 Not Found
"""

from typing import Any, Dict, Optional


class ItemsApiError(Exception):
    """
    Base exception for all Items API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(ItemsApiError):
    """
    Raised when a requested resource does not exist.

    The client-facing message is always the fixed string "Not found";
    the resource name and id only go into the context for logging.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)
