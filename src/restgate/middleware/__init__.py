"""Middleware components.

This package provides the error translator, the response channels it writes
to, and the ASGI middleware that wires both into an application.
"""

from restgate.middleware.error_handler_middleware import ErrorHandlerMiddleware
from restgate.middleware.error_translator import (
    DEFAULT_RULES,
    ErrorTranslator,
    ExceptionRule,
)
from restgate.middleware.response_channel import (
    AsgiResponseChannel,
    BufferedResponseChannel,
    ResponseChannel,
    ResponseDescriptor,
)

__all__ = [
    "AsgiResponseChannel",
    "BufferedResponseChannel",
    "DEFAULT_RULES",
    "ErrorHandlerMiddleware",
    "ErrorTranslator",
    "ExceptionRule",
    "ResponseChannel",
    "ResponseDescriptor",
]
