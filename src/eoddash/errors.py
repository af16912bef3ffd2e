"""Dashboard error types."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Error classification codes."""

    AUTH_FAILED = "auth_failed"
    FORBIDDEN = "forbidden"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    PROVIDER_ERROR = "provider_error"
    NO_DATA = "no_data"
    INVALID_INPUT = "invalid_input"


class DashboardError(Exception):
    """Fetch-layer exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description, shown as-is to the user.
        code: Structured error code for programmatic handling.
        retryable: Whether a later attempt could succeed.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PROVIDER_ERROR,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable
