"""
Custom Exception Classes for Multilingua

This module defines the typed failures raised by the catalog core so the
web layer can map each one onto an HTTP status without inspecting messages.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error envelopes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    SUBJECT_NOT_FOUND = "RESOURCE_SUBJECT_NOT_FOUND"
    ARTICLE_NOT_FOUND = "RESOURCE_ARTICLE_NOT_FOUND"
    DUPLICATE_RESOURCE = "VALIDATION_DUPLICATE_RESOURCE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class MultilinguaError(Exception):
    """Base exception class for all catalog errors"""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(MultilinguaError):
    """Raised when input is rejected before anything is written"""

    error_code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class NotFoundError(MultilinguaError):
    """Base class for missing write targets and dangling references"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class SubjectNotFoundError(NotFoundError):
    """Raised when a subject is not found"""

    error_code = ErrorCode.SUBJECT_NOT_FOUND

    def __init__(self, subject_id: Any | None = None):
        super().__init__(resource_type="Subject", resource_id=subject_id)


class ArticleNotFoundError(NotFoundError):
    """Raised when an article is not found"""

    error_code = ErrorCode.ARTICLE_NOT_FOUND

    def __init__(self, article_id: Any | None = None):
        super().__init__(resource_type="Article", resource_id=article_id)


# ============================================================================
# Conflict Exceptions
# ============================================================================


class ConflictError(MultilinguaError):
    """Raised when attempting to create a duplicate resource"""

    error_code = ErrorCode.DUPLICATE_RESOURCE

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )
