"""Interface layer errors."""

from enum import StrEnum
from typing import Any

from folio.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class ErrorCode(StrEnum):
    """Error codes carried in the error envelope."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIError(Exception):
    """Error rendered as the API error envelope."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int,
        details: Any = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    @classmethod
    def from_http_status(cls, status_code: int, message: str) -> "APIError":
        """Translate a framework HTTP error (unknown route, wrong method, ...)."""
        if status_code == 404:
            return cls(ErrorCode.NOT_FOUND, message, 404)
        if status_code == 405:
            return cls(ErrorCode.METHOD_NOT_ALLOWED, message, 405)
        if status_code < 500:
            return cls(ErrorCode.VALIDATION_ERROR, message, status_code)
        return cls(ErrorCode.INTERNAL_ERROR, "An unexpected error occurred", status_code)

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "APIError":
        """Translate a domain error into its HTTP form."""
        if isinstance(error, NotFoundError):
            return cls(ErrorCode.NOT_FOUND, str(error), 404)
        if isinstance(error, ValidationError):
            details = {"field": error.field} if error.field else None
            return cls(ErrorCode.VALIDATION_ERROR, str(error), 400, details)
        if isinstance(error, BusinessRuleViolationError):
            return cls(ErrorCode.VALIDATION_ERROR, str(error), 400)
        return cls(ErrorCode.INTERNAL_ERROR, "An unexpected error occurred", 500)
