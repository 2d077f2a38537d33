"""
Incubator Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and the uniform `{success, message, errors}` envelope.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the envelope with the correct HTTP status code.
Who:   Raised by services, dependencies and the database handle.

Exception Hierarchy:
    IncubatorError (base)
    ├── ValidationError          → 400 Bad Request (one message per violation)
    ├── ConflictError            → 400 Bad Request (duplicate unique value)
    ├── AuthError                → 401 Unauthorized
    ├── PermissionDeniedError    → 403 Forbidden
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class IncubatorError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(IncubatorError):
    """
    Raised when client input fails validation.

    `errors` holds every violated field as a human-readable line; the message
    is the summary shown above them. Business-rule rejections (wrong current
    password, blocked self-deactivation) carry a message and no list.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or []


class ConflictError(IncubatorError):
    """Raised when a write would duplicate a unique value (e.g. an email)."""

    status_code = 400

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthError(IncubatorError):
    """Missing, malformed, expired or unknown bearer credential."""

    status_code = 401

    def __init__(
        self,
        message: str = "Token is not valid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PermissionDeniedError(IncubatorError):
    """Valid credential whose role does not grant the requested operation."""

    status_code = 403

    def __init__(
        self,
        message: str = "Access denied. Admin role required.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(IncubatorError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that into this
    exception so the handler can answer 404 without HTTP concerns leaking into
    the service layer.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message or f"{resource} not found", context=ctx)


class DatabaseError(IncubatorError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic. Detailed error info
    (SQL, constraint names) is logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
