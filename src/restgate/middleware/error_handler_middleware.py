"""Error handling middleware for restgate.

This middleware catches exceptions raised by the application and writes the
translated error response. Framework HTTP exceptions and request validation
errors are handled by FastAPI's own exception middleware further in and never
reach this one.
"""

import logging
import uuid
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from restgate.constants import BODY_FORMAT_TEXT, HEADER_REQUEST_ID
from restgate.middleware.error_translator import ErrorTranslator
from restgate.middleware.response_channel import AsgiResponseChannel

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Pure ASGI middleware that translates uncaught exceptions.

    Attributes:
        translator: ErrorTranslator with the rule table to apply
        body_format: Error body format ("text" or "json")
    """

    def __init__(
        self,
        app: ASGIApp,
        translator: Optional[ErrorTranslator] = None,
        body_format: str = BODY_FORMAT_TEXT,
    ):
        self.app = app
        self.translator = translator or ErrorTranslator()
        self.body_format = body_format

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive=receive)
        request_id = request.headers.get(HEADER_REQUEST_ID) or str(uuid.uuid4())
        request.state.request_id = request_id

        response_started = False

        async def send_with_request_id(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                headers = MutableHeaders(scope=message)
                headers.append(HEADER_REQUEST_ID, request_id)
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        except Exception as exc:
            if response_started:
                logger.warning(
                    f"Exception raised after response started: {request.method} "
                    f"{request.url.path}",
                    extra={"request_id": request_id},
                )
                raise

            channel = AsgiResponseChannel(
                scope,
                receive,
                send_with_request_id,
                body_format=self.body_format,
                request_id=request_id,
            )
            await self.translator.emit(
                exc,
                channel,
                context={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                },
            )
