"""
CCR client errors.

Every failure raised by the client derives from CcrError so the API layer
can translate them to HTTP responses in one place.
"""

from typing import Any


class CcrError(Exception):
    """
    Base exception for CCR client errors.

    Attributes:
        error_code: Machine-readable error code (e.g., AUTH_ERROR)
        message: Human-readable error description
        details: Additional context about the error
    """

    error_code: str = "CCR_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(CcrError):
    """The identity endpoint rejected the credentials or was unreachable."""

    error_code = "AUTH_ERROR"

    def __init__(self, message: str = "Authentication failed", status_code: int | None = None):
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__(message, details)
        self.status_code = status_code


class RemoteCallError(CcrError):
    """The SOAP transport itself failed (network, fault, unknown operation)."""

    error_code = "REMOTE_CALL_ERROR"

    def __init__(self, operation: str, message: str):
        super().__init__(message, {"operation": operation})
        self.operation = operation


class DomainError(CcrError):
    """The service answered with a non-success CodRespuesta."""

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, response_code: str | None = None):
        super().__init__(message, {"response_code": response_code})
        self.response_code = response_code
