"""Response schemas for restgate."""

from restgate.controller.schemas.responses import (
    ErrorDetail,
    ErrorResponse,
    error_response,
)

__all__ = ["ErrorDetail", "ErrorResponse", "error_response"]
