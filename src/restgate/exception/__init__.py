"""Exception handling package.

This package provides the failure types raised during request processing and
the registry of domain error codes those failures carry.
"""

from restgate.exception.api_exceptions import (
    ConfigurationError,
    JwtExpiredError,
    NotAuthorizedError,
    ResourceExistsError,
    RestGateException,
    SystemException,
    TenantNotAvailableError,
    UnauthenticatedError,
)
from restgate.exception.error_codes import ErrorCode

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "JwtExpiredError",
    "NotAuthorizedError",
    "ResourceExistsError",
    "RestGateException",
    "SystemException",
    "TenantNotAvailableError",
    "UnauthenticatedError",
]
