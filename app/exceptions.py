# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Route handlers raise; the handlers at the bottom of this module turn the
# exception into a JSON body of the form {"error": ..., "code": ...}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)


class SchoolSiteException(Exception):
    """
    Base exception for the SchoolSite API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SCHOOLSITE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class UnauthorizedError(SchoolSiteException):
    """Raised when a write route is called without a session."""

    def __init__(self):
        super().__init__(
            message="Unauthorized",
            code="UNAUTHORIZED",
            status_code=401,
        )


class InvalidCredentialsError(SchoolSiteException):
    """Raised when email/password sign-in is rejected."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Sign-in failed: {error}",
            code="INVALID_CREDENTIALS",
            status_code=401,
            suggestion="Check the email and password and try again",
        )


# =============================================================================
# Content Exceptions
# =============================================================================

class ContentNotFoundError(SchoolSiteException):
    """Raised when a row ID doesn't exist in a content table."""

    def __init__(self, label: str, row_id: str):
        super().__init__(
            message=f"{label} not found",
            code="NOT_FOUND",
            status_code=404,
            details={"id": row_id},
        )


class PageNotFoundError(SchoolSiteException):
    """Raised for unknown locale-prefixed paths."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Page not found: {path}",
            code="PAGE_NOT_FOUND",
            status_code=404,
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class MissingFileError(SchoolSiteException):
    """Raised when an upload request carries no file field."""

    def __init__(self):
        super().__init__(
            message="No file provided",
            code="NO_FILE",
            status_code=400,
            suggestion="Send the image as multipart form data in a field named 'file'",
        )


class InvalidFileTypeError(SchoolSiteException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, content_type: str | None, allowed: list[str]):
        super().__init__(
            message="Invalid file type. Allowed types: JPG, PNG, WebP, GIF",
            code="INVALID_FILE_TYPE",
            status_code=400,
            details={"content_type": content_type, "allowed_types": allowed},
        )


class FileTooLargeError(SchoolSiteException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb},
        )


# =============================================================================
# Upstream Exceptions
# =============================================================================

class UpstreamError(SchoolSiteException):
    """Raised when Supabase rejects a query, storage or auth call."""

    def __init__(self, error: str, code: str = "UPSTREAM_ERROR"):
        message = error if settings.EXPOSE_UPSTREAM_ERRORS else "Upstream service error"
        super().__init__(
            message=message,
            code=code,
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def schoolsite_exception_handler(
    request: Request,
    exc: SchoolSiteException
) -> JSONResponse:
    """Convert SchoolSiteException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def supabase_exception_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    """
    Convert errors from the data client to 500 responses.

    The raw upstream message is always logged; whether it reaches the
    client depends on EXPOSE_UPSTREAM_ERRORS.
    """
    logger.error(f"Upstream error on {request.method} {request.url.path}: {exc}")
    return await schoolsite_exception_handler(request, UpstreamError(exc.message, code=exc.code))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
