"""Response schemas for error bodies.

This module provides the JSON envelope used when error responses are rendered
in the json body format.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")

    class Config:
        json_schema_extra = {
            "example": {
                "code": "1004",
                "message": "Invalid device token",
            }
        }


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Error timestamp (UTC)"
    )
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    path: Optional[str] = Field(None, description="API path that caused the error")
    method: Optional[str] = Field(None, description="HTTP method")

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": {
                    "code": "2100",
                    "message": "Device already exists",
                },
                "timestamp": "2026-02-18T00:00:00Z",
                "request_id": "req_abc123",
                "path": "/api/devices",
                "method": "POST",
            }
        }


def error_response(
    code: str,
    message: str,
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
) -> Dict[str, Any]:
    """Create standardized error response.

    Args:
        code: Error code (numeric domain code or HTTP reason phrase)
        message: Human-readable error message
        request_id: Request ID for tracing
        path: API path that caused the error
        method: HTTP method

    Returns:
        Dictionary with error response format
    """
    response = ErrorResponse(
        error=ErrorDetail(code=code, message=message),
        request_id=request_id,
        path=path,
        method=method,
    )
    return response.model_dump(mode="json", exclude_none=True)
