"""Unit tests for the failure types in restgate.exception.api_exceptions.

Verifies that each failure carries the message, error code and HTTP status
override it was built with, and that the inheritance chain the translator
relies on for most-specific matching is intact.
"""

import pytest

from restgate.constants import TENANT_NOT_AVAILABLE_MESSAGE
from restgate.exception import (
    ErrorCode,
    JwtExpiredError,
    NotAuthorizedError,
    ResourceExistsError,
    RestGateException,
    SystemException,
    TenantNotAvailableError,
    UnauthenticatedError,
)

# ---------------------------------------------------------------------------
# RestGateException: base class contract
# ---------------------------------------------------------------------------


class TestRestGateException:
    """Tests for the RestGateException base class."""

    def test_stores_message(self) -> None:
        """RestGateException stores the provided message on the message attribute."""
        exception = RestGateException("something broke")

        assert exception.message == "something broke"

    def test_is_an_exception(self) -> None:
        """RestGateException can be raised and caught as Exception."""
        with pytest.raises(Exception):
            raise RestGateException("boom")


# ---------------------------------------------------------------------------
# Tenant and auth failures
# ---------------------------------------------------------------------------


class TestTenantNotAvailableError:
    """Tests for TenantNotAvailableError."""

    def test_default_message(self) -> None:
        """TenantNotAvailableError defaults to the fixed tenant message."""
        assert TenantNotAvailableError().message == TENANT_NOT_AVAILABLE_MESSAGE

    def test_custom_message(self) -> None:
        """TenantNotAvailableError keeps a caller-provided message."""
        assert TenantNotAvailableError("tenant acme offline").message == (
            "tenant acme offline"
        )


class TestAuthFailures:
    """Tests for NotAuthorizedError, UnauthenticatedError and JwtExpiredError."""

    def test_not_authorized_stores_message(self) -> None:
        """NotAuthorizedError stores the provided message."""
        assert NotAuthorizedError("no access").message == "no access"

    def test_unauthenticated_stores_message(self) -> None:
        """UnauthenticatedError stores the provided message."""
        assert UnauthenticatedError("who are you").message == "who are you"

    def test_jwt_expired_is_unauthenticated(self) -> None:
        """JwtExpiredError is a more specific UnauthenticatedError."""
        assert isinstance(JwtExpiredError(), UnauthenticatedError)

    def test_not_authorized_is_not_unauthenticated(self) -> None:
        """NotAuthorizedError and UnauthenticatedError are unrelated types."""
        assert not isinstance(NotAuthorizedError(), UnauthenticatedError)


# ---------------------------------------------------------------------------
# SystemException and ResourceExistsError
# ---------------------------------------------------------------------------


class TestSystemException:
    """Tests for SystemException."""

    def test_stores_code_and_message(self) -> None:
        """SystemException stores the numeric code and message."""
        exception = SystemException(1004, "Invalid device token")

        assert exception.code == 1004
        assert exception.message == "Invalid device token"

    def test_has_no_http_status_by_default(self) -> None:
        """SystemException has no HTTP status override unless one is given."""
        exception = SystemException(1004, "Invalid device token")

        assert exception.http_status is None
        assert exception.has_http_status() is False

    def test_stores_http_status_override(self) -> None:
        """SystemException keeps an explicit HTTP status override."""
        exception = SystemException(1100, "Request data is incomplete.", http_status=422)

        assert exception.has_http_status() is True
        assert exception.http_status == 422

    @pytest.mark.parametrize("http_status", [99, 600, 1000])
    def test_rejects_invalid_http_status_override(self, http_status: int) -> None:
        """SystemException rejects an override outside the HTTP status range."""
        with pytest.raises(ValueError, match="Invalid HTTP status override"):
            SystemException(1004, "Invalid device token", http_status=http_status)

    @pytest.mark.parametrize("http_status", [100, 599])
    def test_accepts_boundary_http_status_override(self, http_status: int) -> None:
        """SystemException accepts the first and last HTTP status codes."""
        assert SystemException(1, "x", http_status=http_status).http_status == http_status

    def test_str_combines_code_and_message(self) -> None:
        """str(SystemException) renders as '<code>:<message>'."""
        assert str(SystemException(1004, "Invalid device token")) == (
            "1004:Invalid device token"
        )

    def test_from_error_code(self) -> None:
        """SystemException.from_error_code copies code and message from the registry."""
        exception = SystemException.from_error_code(
            ErrorCode.INVALID_DEVICE_TOKEN, http_status=404
        )

        assert exception.code == 1004
        assert exception.message == "Invalid device token"
        assert exception.http_status == 404


class TestResourceExistsError:
    """Tests for ResourceExistsError."""

    def test_is_a_system_exception(self) -> None:
        """ResourceExistsError is a more specific SystemException."""
        assert isinstance(
            ResourceExistsError(ErrorCode.DUPLICATE_DEVICE_TOKEN), SystemException
        )

    def test_carries_error_code(self) -> None:
        """ResourceExistsError exposes the registry entry it was built from."""
        exception = ResourceExistsError(ErrorCode.DUPLICATE_DEVICE_TOKEN)

        assert exception.error_code is ErrorCode.DUPLICATE_DEVICE_TOKEN
        assert exception.code == 2100
        assert exception.message == "Device already exists"

    def test_from_error_code_ignores_status_override(self) -> None:
        """ResourceExistsError.from_error_code always builds a 409 conflict."""
        exception = ResourceExistsError.from_error_code(
            ErrorCode.DUPLICATE_USER, http_status=400
        )

        assert isinstance(exception, ResourceExistsError)
        assert exception.http_status == 409

    def test_can_be_chained(self) -> None:
        """ResourceExistsError supports exception chaining with 'from'."""
        original = KeyError("device-1")

        with pytest.raises(ResourceExistsError) as exc_info:
            try:
                raise original
            except KeyError as e:
                raise ResourceExistsError(ErrorCode.DUPLICATE_DEVICE_TOKEN) from e

        assert exc_info.value.__cause__ is original
