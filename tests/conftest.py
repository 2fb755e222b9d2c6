"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so restgate can be imported without installation.
Provides the translator and response channel fixtures used across test suites.

Key exports:
    - translator: ErrorTranslator with the default rule table
    - buffered_channel: BufferedResponseChannel recording writes
    - FailingResponseChannel: channel whose send_error raises OSError
"""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from restgate.middleware.error_translator import ErrorTranslator  # noqa: E402
from restgate.middleware.response_channel import BufferedResponseChannel  # noqa: E402


class FailingResponseChannel(BufferedResponseChannel):
    """BufferedResponseChannel that fails when the body is sent.

    Records every call so tests can check the order of writes.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[Tuple[str, ...]] = []

    def set_status(self, status: int) -> None:
        self.calls.append(("set_status", str(status)))
        super().set_status(status)

    def set_header(self, name: str, value: str) -> None:
        self.calls.append(("set_header", name, value))
        super().set_header(name, value)

    async def send_error(self, status: int, message: str) -> None:
        self.calls.append(("send_error", str(status), message))
        raise OSError("connection reset by peer")


@pytest.fixture
def translator() -> ErrorTranslator:
    """ErrorTranslator with the default rule table."""
    return ErrorTranslator()


@pytest.fixture
def buffered_channel() -> BufferedResponseChannel:
    """Fresh in-memory response channel."""
    return BufferedResponseChannel()


@pytest.fixture
def failing_channel() -> FailingResponseChannel:
    """Response channel whose body write raises OSError."""
    return FailingResponseChannel()
