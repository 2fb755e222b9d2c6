"""Shared constants for restgate."""

HEADER_ERROR = "X-Error"
HEADER_ERROR_CODE = "X-Error-Code"
HEADER_REQUEST_ID = "X-Request-ID"

TENANT_NOT_AVAILABLE_MESSAGE = "The requested tenant is not available."

ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"

BODY_FORMAT_TEXT = "text"
BODY_FORMAT_JSON = "json"
BODY_FORMATS = (BODY_FORMAT_TEXT, BODY_FORMAT_JSON)
