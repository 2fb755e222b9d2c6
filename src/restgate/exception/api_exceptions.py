"""Failure types raised while processing REST requests.

Upstream code (tenant resolution, authentication, domain services) raises
these; the error translator turns them into HTTP responses. Anything that is
not a RestGateException subclass listed here is treated as unclassified.
"""

from typing import Optional

from restgate.constants import TENANT_NOT_AVAILABLE_MESSAGE
from restgate.exception.error_codes import ErrorCode


class RestGateException(Exception):
    """Base exception for all restgate failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# Tenant errors (503)
class TenantNotAvailableError(RestGateException):
    """Tenant context could not be resolved for the request."""

    def __init__(self, message: str = TENANT_NOT_AVAILABLE_MESSAGE):
        super().__init__(message)


# Authentication & Authorization Errors (401, 403)
class NotAuthorizedError(RestGateException):
    """Caller lacks permission for the requested operation."""

    def __init__(self, message: str = ErrorCode.NOT_AUTHORIZED.message):
        super().__init__(message)


class UnauthenticatedError(RestGateException):
    """Caller credentials are missing or invalid."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class JwtExpiredError(UnauthenticatedError):
    """Caller's JWT has expired."""

    def __init__(self, message: str = "JWT has expired"):
        super().__init__(message)


# Domain errors (400 unless overridden, 409)
class SystemException(RestGateException):
    """Domain error carrying a numeric error code.

    The HTTP status defaults to 400 unless an explicit override is given.
    """

    def __init__(
        self,
        code: int,
        message: str,
        http_status: Optional[int] = None,
    ):
        """Initialize system exception.

        Args:
            code: Numeric error code sent in X-Error-Code
            message: Human-readable error message sent in X-Error
            http_status: Optional HTTP status override

        Raises:
            ValueError: If http_status is not a valid HTTP status (100-599)
        """
        if http_status is not None and not 100 <= http_status <= 599:
            raise ValueError(f"Invalid HTTP status override: {http_status}")
        self.code = code
        self.http_status = http_status
        super().__init__(message)

    def has_http_status(self) -> bool:
        return self.http_status is not None

    @classmethod
    def from_error_code(
        cls, error_code: ErrorCode, http_status: Optional[int] = None
    ) -> "SystemException":
        """Build a system exception from a registry entry."""
        return cls(error_code.code, error_code.message, http_status=http_status)

    def __str__(self) -> str:
        return f"{self.code}:{self.message}"


class ResourceExistsError(SystemException):
    """Creation collided with an existing resource."""

    def __init__(self, error_code: ErrorCode):
        self.error_code = error_code
        super().__init__(error_code.code, error_code.message, http_status=409)

    @classmethod
    def from_error_code(
        cls, error_code: ErrorCode, http_status: Optional[int] = None
    ) -> "ResourceExistsError":
        return cls(error_code)


# Configuration Errors
class ConfigurationError(RestGateException):
    """Invalid restgate configuration."""
