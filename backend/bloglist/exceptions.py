"""
Bloglist Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the blog resource and aggregator.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by services and stores; caught by global handlers.

Exception Hierarchy:
    BloglistError (base)
    ├── ValidationError          → 400 Bad Request (missing/invalid field)
    ├── MalformedIdError         → 400 Bad Request (id fails store format)
    ├── NotFoundError            → 404 Not Found
    ├── StoreUnavailableError    → 503 Service Unavailable
    └── EmptyInputError          → not HTTP-mapped (aggregator misuse)

    Validation and id-format errors are always raised before the store is
    asked to mutate anything.
"""

from typing import Any, Dict, Optional


class BloglistError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, only partly returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BloglistError):
    """
    Raised when a blog payload breaks a field rule.

    When:    title/url missing or blank, likes negative, null or above the
             integer column, text wider than its column, or a value the
             store itself rejects (DataError, IntegrityError).
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Blog validation failed: title is required",
            "details": {"field": "title"}
        }
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


class MalformedIdError(BloglistError):
    """
    Raised when an id is not a well-formed identifier for the store.

    Distinct from NotFoundError: "1" is malformed, while a valid UUID
    that names no blog is merely absent.
    HTTP:    400 Bad Request, message "malformatted id"
    """

    def __init__(
        self,
        raw_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if raw_id is not None:
            ctx["id"] = raw_id
        super().__init__(message="malformatted id", context=ctx)
        self.raw_id = raw_id


class NotFoundError(BloglistError):
    """
    Raised when a well-formed id names no record.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreUnavailableError(BloglistError):
    """
    Raised when the blog store cannot be reached or a query fails.

    HTTP:    503 Service Unavailable

    Security Note:
        The response message is always generic. Driver errors, SQL text and
        table names are logged server-side only.
    """

    def __init__(
        self,
        message: str = "The blog store is temporarily unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class EmptyInputError(BloglistError):
    """Raised by an aggregator that has no record to reduce."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"{operation} requires at least one blog",
            context={"operation": operation},
        )
        self.operation = operation
