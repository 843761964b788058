"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a client-safe `message` and an optional
       `context` dict. Global exception handlers (registered in main.py)
       catch these and return `{"error": {"message": ...}}` with the
       matching HTTP status code.
Who:   Raised by the controller and the store; caught by global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError           → 400 Bad Request
    ├── NotFoundError             → 404 Not Found
    ├── ConstraintViolationError  → 400 Bad Request (generic message)
    └── DatabaseError             → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

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


class ValidationError(NotefulError):
    """
    Raised when a request body fails the create or update field rules.

    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "Missing 'title' in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    The message names the resource label, e.g. "Article doesn't exist".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} doesn't exist"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConstraintViolationError(NotefulError):
    """
    Raised when the store rejects a write on an integrity constraint.

    When:    Reference to a nonexistent parent, value outside an enumerated
             column, duplicate unique value, NULL in a NOT NULL column.
    HTTP:    400 Bad Request

    The store's error text is kept in `context` for the logs; the client
    only sees the generic message.
    """

    def __init__(
        self,
        message: str = "Request body violates a data constraint",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NotefulError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, and the like.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Details are
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
