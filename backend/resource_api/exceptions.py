"""
Resource API - Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the three failure kinds the API has.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the validation layer, services and the record store.

Exception Hierarchy:
    ResourceAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── StoreError        → 500 Internal Server Error

None of these is retried anywhere in the application.
"""

from typing import Any, Dict, List, Optional


class ResourceAPIError(Exception):
    """
    Base exception for all Resource API errors.

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


class ValidationError(ResourceAPIError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    Carries every violated field, not just the first one. Each entry is a
    dict with `location`, `field`, `message` and `type` keys (see
    resource_api.validation.FieldError).

    Example response:
        {
            "error": "validation_error",
            "message": "Request validation failed",
            "errors": [
                {"location": "body", "field": "name",
                 "message": "String should have at least 1 character",
                 "type": "string_too_short"}
            ],
            "request_id": "2f1c..."
        }
    """

    def __init__(
        self,
        message: str = "Request validation failed",
        errors: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or []


class NotFoundError(ResourceAPIError):
    """
    Raised when the requested record does not exist or has been soft-deleted.

    HTTP:    404 Not Found

    The response message is generic; the identifier only goes into the
    context for logging.
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
        super().__init__(message=f"{resource.capitalize()} not found", context=ctx)


class StoreError(ResourceAPIError):
    """
    Raised when a record store operation fails.

    When:    Connection lost, constraint violation, driver error, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The underlying
    cause (exception type, operation) lives in `context` and is logged
    server-side only.
    """

    def __init__(
        self,
        message: str = "The record store is currently unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
