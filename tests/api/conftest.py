"""Shared fixtures for API tests.

Builds the restgate application with a router of failure endpoints, each of
which raises one failure type, so tests exercise the full ASGI path from a
raised exception to the HTTP response.

Key exports:
    - app / client: application with the text body format
    - json_client: TestClient for an application using the JSON body format
"""

import sys
from pathlib import Path

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from restgate.config.app_settings import AppSettings  # noqa: E402
from restgate.exception import (  # noqa: E402
    ErrorCode,
    JwtExpiredError,
    NotAuthorizedError,
    ResourceExistsError,
    SystemException,
    TenantNotAvailableError,
    UnauthenticatedError,
)
from restgate.main import create_app  # noqa: E402


def _make_failure_router() -> APIRouter:
    """Router whose endpoints each raise one failure type."""
    router = APIRouter(prefix="/failures")

    @router.get("/tenant")
    async def tenant() -> None:
        raise TenantNotAvailableError()

    @router.post("/devices")
    async def create_device() -> None:
        raise ResourceExistsError(ErrorCode.DUPLICATE_DEVICE_TOKEN)

    @router.get("/forbidden")
    async def forbidden() -> None:
        raise NotAuthorizedError("Not authorized to view devices")

    @router.get("/unauthenticated")
    async def unauthenticated() -> None:
        raise UnauthenticatedError("Authentication required")

    @router.get("/expired")
    async def expired() -> None:
        raise JwtExpiredError("JWT has expired")

    @router.get("/device-token")
    async def device_token() -> None:
        raise SystemException(1004, "Invalid device token")

    @router.get("/incomplete")
    async def incomplete() -> None:
        raise SystemException(1100, "Request data is incomplete.", http_status=422)

    @router.get("/localized")
    async def localized() -> None:
        raise SystemException(1004, "Ungültiges Gerät ✓")

    @router.get("/multiline")
    async def multiline() -> None:
        raise SystemException(1100, "Missing field\nX-Injected: yes")

    @router.get("/crash")
    def crash() -> None:
        raise RuntimeError("unexpected state")

    @router.get("/ok")
    async def ok() -> dict:
        return {"ok": True}

    return router


def _make_test_app(body_format: str) -> FastAPI:
    application = create_app(
        AppSettings(error_body_format=body_format, environment="test")
    )
    application.include_router(_make_failure_router())
    return application


@pytest.fixture
def app() -> FastAPI:
    """Application with the plain-text error body format."""
    return _make_test_app("text")


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """TestClient for the plain-text application."""
    return TestClient(app)


@pytest.fixture
def json_client() -> TestClient:
    """TestClient for an application using the JSON error body format."""
    return TestClient(_make_test_app("json"))
