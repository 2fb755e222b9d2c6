"""Response channels that error responses are written to.

A channel receives the status, the headers and finally the body of an error
response. BufferedResponseChannel keeps the writes in memory;
AsgiResponseChannel sends them to the client on an ASGI connection.
"""

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Dict, Optional, Protocol
from urllib.parse import quote

from starlette.datastructures import MutableHeaders
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from restgate.constants import BODY_FORMAT_JSON, BODY_FORMAT_TEXT, HEADER_ERROR_CODE
from restgate.controller.schemas.responses import error_response

HEADER_SAFE_CHARS = "".join(chr(c) for c in range(0x20, 0x7F))


@dataclass(frozen=True)
class ResponseDescriptor:
    """Status, headers and body of a translated error response."""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""


class ResponseChannel(Protocol):
    """Write side of the response for the current request."""

    def set_status(self, status: int) -> None: ...

    def set_header(self, name: str, value: str) -> None: ...

    async def send_error(self, status: int, message: str) -> None: ...


class BufferedResponseChannel:
    """Channel that records writes instead of sending them."""

    def __init__(self) -> None:
        self.status: Optional[int] = None
        self.headers: Dict[str, str] = {}
        self.body: Optional[str] = None
        self.sent = False

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    async def send_error(self, status: int, message: str) -> None:
        self.status = status
        self.body = message
        self.sent = True

    def descriptor(self) -> ResponseDescriptor:
        """Return what was written as a ResponseDescriptor.

        Raises:
            RuntimeError: If no error response has been sent yet
        """
        if not self.sent or self.status is None:
            raise RuntimeError("No error response has been sent")
        return ResponseDescriptor(
            status=self.status, headers=dict(self.headers), body=self.body or ""
        )


def header_value(value: str) -> str:
    """Make a value safe for an HTTP header.

    CR and LF become spaces; characters outside printable ASCII are
    percent-encoded as UTF-8.
    """
    value = value.replace("\r", " ").replace("\n", " ")
    return quote(value, safe=HEADER_SAFE_CHARS)


def reason_phrase(status: int) -> str:
    """HTTP reason phrase for a status code, or the code itself if unknown."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return str(status)


class AsgiResponseChannel:
    """Channel that sends the error response on an ASGI connection.

    Status and headers are buffered until send_error, which renders the body
    in the configured format and sends the complete response.

    Attributes:
        body_format: "text" for a plain-text body, "json" for the JSON envelope
        request_id: Request ID included in JSON bodies
    """

    def __init__(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
        body_format: str = BODY_FORMAT_TEXT,
        request_id: Optional[str] = None,
    ):
        self.scope = scope
        self.receive = receive
        self.send = send
        self.body_format = body_format
        self.request_id = request_id
        self.status = 500
        self.headers = MutableHeaders()

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = header_value(value)

    async def send_error(self, status: int, message: str) -> None:
        self.status = status
        response = self.render(message)
        await response(self.scope, self.receive, self.send)

    def render(self, message: str) -> Response:
        """Build the Starlette response for the buffered status and headers."""
        headers = dict(self.headers.items())
        if self.body_format == BODY_FORMAT_JSON:
            content = error_response(
                code=self.headers.get(HEADER_ERROR_CODE) or reason_phrase(self.status),
                message=message,
                request_id=self.request_id,
                path=self.scope.get("path"),
                method=self.scope.get("method"),
            )
            return JSONResponse(
                status_code=self.status, content=content, headers=headers
            )
        return PlainTextResponse(message, status_code=self.status, headers=headers)
