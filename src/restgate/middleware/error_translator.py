"""Translation of request failures into HTTP error responses.

The translator holds an ordered table of ExceptionRule entries. Rules are
evaluated top to bottom and exactly the first rule whose exception type
matches is applied. The table must end with the Exception catch-all, so every
failure produces a response.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Type

from restgate.constants import (
    HEADER_ERROR,
    HEADER_ERROR_CODE,
    TENANT_NOT_AVAILABLE_MESSAGE,
)
from restgate.exception.api_exceptions import (
    ConfigurationError,
    JwtExpiredError,
    NotAuthorizedError,
    ResourceExistsError,
    SystemException,
    TenantNotAvailableError,
    UnauthenticatedError,
)
from restgate.middleware.response_channel import (
    ResponseChannel,
    ResponseDescriptor,
)

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_ERROR_STATUS = 400

Handler = Callable[[Exception], ResponseDescriptor]


@dataclass(frozen=True)
class ExceptionRule:
    """Maps one exception type to a response handler.

    Attributes:
        exception_type: Exception class handled by this rule (subclasses included)
        handler: Builds the response for a matching exception
        log_message: If set, matching exceptions are logged at error level
    """

    exception_type: Type[Exception]
    handler: Handler
    log_message: Optional[str] = None

    def matches(self, exc: BaseException) -> bool:
        return isinstance(exc, self.exception_type)


def _message_of(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc)


def _error_headers(message: str, code: int) -> dict:
    return {HEADER_ERROR: message, HEADER_ERROR_CODE: str(code)}


def handle_tenant_not_available(exc: TenantNotAvailableError) -> ResponseDescriptor:
    return ResponseDescriptor(status=503, body=TENANT_NOT_AVAILABLE_MESSAGE)


def handle_resource_exists(exc: ResourceExistsError) -> ResponseDescriptor:
    error_code = exc.error_code
    return ResponseDescriptor(
        status=409,
        headers=_error_headers(error_code.get_message(), error_code.code),
        body=error_code.get_message(),
    )


def handle_not_authorized(exc: NotAuthorizedError) -> ResponseDescriptor:
    return ResponseDescriptor(status=403, body=_message_of(exc))


def handle_unauthenticated(exc: UnauthenticatedError) -> ResponseDescriptor:
    return ResponseDescriptor(status=401, body=_message_of(exc))


def handle_jwt_expired(exc: JwtExpiredError) -> ResponseDescriptor:
    return ResponseDescriptor(status=401, body=_message_of(exc))


def handle_system_exception(exc: SystemException) -> ResponseDescriptor:
    """Status from the override, else 400; body is "<code>:<message>"."""
    status = exc.http_status if exc.has_http_status() else DEFAULT_SYSTEM_ERROR_STATUS
    return ResponseDescriptor(
        status=status,
        headers=_error_headers(exc.message, exc.code),
        body=f"{exc.code}:{exc.message}",
    )


def handle_unclassified(exc: Exception) -> ResponseDescriptor:
    return ResponseDescriptor(status=500, body=str(exc))


DEFAULT_RULES: tuple = (
    ExceptionRule(
        TenantNotAvailableError,
        handle_tenant_not_available,
        log_message="Operation invoked on unavailable tenant.",
    ),
    ExceptionRule(
        ResourceExistsError,
        handle_resource_exists,
        log_message="Resource with same key already exists.",
    ),
    ExceptionRule(NotAuthorizedError, handle_not_authorized),
    ExceptionRule(JwtExpiredError, handle_jwt_expired),
    ExceptionRule(UnauthenticatedError, handle_unauthenticated),
    ExceptionRule(SystemException, handle_system_exception),
    ExceptionRule(
        Exception,
        handle_unclassified,
        log_message="Showing internal server error due to unhandled exception.",
    ),
)


def check_rule_order(rules: Sequence[ExceptionRule]) -> None:
    """Validate that a rule table is evaluable top to bottom.

    Raises:
        ConfigurationError: If the table is empty, does not end with the
            Exception catch-all, or contains a rule shadowed by an earlier one
    """
    if not rules or rules[-1].exception_type is not Exception:
        raise ConfigurationError("Rule table must end with the Exception catch-all")

    for index, rule in enumerate(rules):
        for earlier in rules[:index]:
            if issubclass(rule.exception_type, earlier.exception_type):
                raise ConfigurationError(
                    f"Rule for {rule.exception_type.__name__} is shadowed by "
                    f"earlier rule for {earlier.exception_type.__name__}"
                )


class ErrorTranslator:
    """Maps failures to error responses using an ordered rule table.

    The translator holds no per-request state and can be shared between
    concurrent requests.

    Attributes:
        rules: Ordered rule table, most specific exception types first
    """

    def __init__(self, rules: Sequence[ExceptionRule] = DEFAULT_RULES):
        check_rule_order(rules)
        self.rules = tuple(rules)

    def rule_for(self, exc: Exception) -> ExceptionRule:
        """Return the first rule matching the exception."""
        for rule in self.rules:
            if rule.matches(exc):
                return rule
        raise TypeError(f"No rule matches {type(exc).__name__}")

    def translate(
        self, exc: Exception, context: Optional[Mapping[str, Any]] = None
    ) -> ResponseDescriptor:
        """Build the error response for a failure.

        Args:
            exc: Failure raised while processing the request
            context: Request details (request_id, path, method) for log records

        Returns:
            ResponseDescriptor for the matching rule
        """
        rule = self.rule_for(exc)
        descriptor = rule.handler(exc)

        if rule.log_message:
            extra = dict(context or {})
            extra["exception_type"] = type(exc).__name__
            logger.error(
                rule.log_message,
                exc_info=(type(exc), exc, exc.__traceback__),
                extra=extra,
            )

        return descriptor

    async def emit(
        self,
        exc: Exception,
        channel: ResponseChannel,
        context: Optional[Mapping[str, Any]] = None,
    ) -> ResponseDescriptor:
        """Translate a failure and write the response to a channel.

        Writes status, then headers, then the body. A header that cannot be
        written is logged and skipped so the status and body are still sent.
        If sending fails, the secondary failure is logged and not raised.

        Args:
            exc: Failure raised while processing the request
            channel: Response channel of the current request
            context: Request details for log records

        Returns:
            ResponseDescriptor that was written (or attempted)
        """
        descriptor = self.translate(exc, context)
        try:
            channel.set_status(descriptor.status)
            for name, value in descriptor.headers.items():
                try:
                    channel.set_header(name, value)
                except Exception:
                    logger.error(
                        f"Unable to set {name} header on {descriptor.status} "
                        f"error response",
                        extra=dict(context or {}),
                        exc_info=True,
                    )
            await channel.send_error(descriptor.status, descriptor.body)
        except Exception:
            logger.error(
                f"Unable to send {descriptor.status} error response "
                f"for {type(exc).__name__}",
                extra=dict(context or {}),
                exc_info=True,
            )
        return descriptor
