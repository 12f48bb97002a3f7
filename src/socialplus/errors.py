"""
Exceptions raised by the socialplus SDK.

Two families:
- ValidationError / MapperError: raised locally, before or after any I/O,
  when a value does not match its declared mapper.
- ApiError / AuthenticationError: raised when the service answers with a
  non-2xx status.
"""

from typing import Any, Sequence


class SocialPlusError(Exception):
    """Base class for all socialplus errors."""


class ValidationError(SocialPlusError):
    """A value does not match its declared type, requiredness or enum set."""

    def __init__(
        self,
        path: str,
        reason: str,
        expected: str | None = None,
        allowed_values: Sequence[str] | None = None,
    ):
        self.path = path
        self.reason = reason
        self.expected = expected
        self.allowed_values = tuple(allowed_values) if allowed_values is not None else None

        message = f"{path or '<root>'}: {reason}"
        if expected:
            message += f" (expected {expected})"
        if self.allowed_values is not None:
            message += f"; allowed values: {', '.join(self.allowed_values)}"
        super().__init__(message)


class MapperError(SocialPlusError):
    """A mapper declaration is broken (e.g. references an unknown model)."""


class ApiError(SocialPlusError):
    """The service returned a non-success status code."""

    def __init__(
        self,
        status_code: int,
        operation: str,
        message: str = "",
        body: Any = None,
    ):
        self.status_code = status_code
        self.operation = operation
        self.message = message
        self.body = body
        detail = f": {message}" if message else ""
        super().__init__(f"{operation} failed with HTTP {status_code}{detail}")


class AuthenticationError(ApiError):
    """Raised on 401/403: the bearer token or app key was rejected."""
