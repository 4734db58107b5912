"""
AWS Lambda harness.

A ``LambdaApp`` holds exactly one registered handler together with the
kind of handler it is. Every invocation runs one cycle: classify the
payload, build the view the handler expects, call it, and turn what it
returns into the wire shape the trigger expects.

Usage with a generic HTTP handler (API Gateway v1/v2, Function URL or
WebSocket)::

    import httpx
    from triggerkit import LambdaApp

    app = LambdaApp()

    @app.http
    def handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"path": request.url.path})

    lambda_handler = app

Usage with a typed handler::

    @app.sqs
    def handle(event: SQSEvent) -> None:
        for record in event.records:
            process(record.body)
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel

from triggerkit.classified_event import ClassifiedEvent
from triggerkit.classifier import classify
from triggerkit.exceptions import ConfigurationError, UnsupportedOperationError
from triggerkit.logging.config import configure_logging, get_logger
from triggerkit.models.trigger import EVENTBRIDGE_KINDS, HTTP_KINDS, TriggerKind
from triggerkit.utils.concurrency import run_sync

logger = get_logger(__name__)

HandlerFn = TypeVar("HandlerFn", bound=Callable[..., Any])


class HandlerKind(str, Enum):
    """What a registered handler receives."""

    HTTP = "http"  # httpx.Request -> httpx.Response
    API_GATEWAY = "api_gateway"  # APIGatewayProxyRequest -> APIGatewayProxyResponse
    API_GATEWAY_V2 = "api_gateway_v2"  # APIGatewayV2HTTPRequest -> APIGatewayV2HTTPResponse
    FUNCTION_URL = "function_url"  # LambdaFunctionURLRequest -> LambdaFunctionURLResponse
    WEBSOCKET = "websocket"  # APIGatewayWebsocketProxyRequest -> APIGatewayProxyResponse
    SNS = "sns"
    SQS = "sqs"
    SIMPLE_EMAIL = "simple_email"
    EVENTBRIDGE = "eventbridge"
    RAW = "raw"  # ClassifiedEvent -> anything


# Trigger kinds each handler kind can serve
ACCEPTED_KINDS: dict[HandlerKind, frozenset[TriggerKind]] = {
    HandlerKind.HTTP: HTTP_KINDS,
    HandlerKind.API_GATEWAY: frozenset({TriggerKind.API_GATEWAY}),
    HandlerKind.API_GATEWAY_V2: frozenset({TriggerKind.API_GATEWAY_V2}),
    HandlerKind.FUNCTION_URL: frozenset({TriggerKind.LAMBDA_FUNCTION_URL}),
    HandlerKind.WEBSOCKET: frozenset({TriggerKind.API_GATEWAY_WEBSOCKET}),
    HandlerKind.SNS: frozenset({TriggerKind.SNS}),
    HandlerKind.SQS: frozenset({TriggerKind.SQS}),
    HandlerKind.SIMPLE_EMAIL: frozenset({TriggerKind.SIMPLE_EMAIL}),
    HandlerKind.EVENTBRIDGE: EVENTBRIDGE_KINDS,
    HandlerKind.RAW: frozenset(TriggerKind) - {TriggerKind.UNKNOWN},
}

# Typed view passed to each typed handler kind
TYPED_VIEWS: dict[HandlerKind, Callable[[ClassifiedEvent], Any]] = {
    HandlerKind.API_GATEWAY: ClassifiedEvent.api_gateway_proxy_request,
    HandlerKind.API_GATEWAY_V2: ClassifiedEvent.api_gateway_v2_request,
    HandlerKind.FUNCTION_URL: ClassifiedEvent.function_url_request,
    HandlerKind.WEBSOCKET: ClassifiedEvent.websocket_request,
    HandlerKind.SNS: ClassifiedEvent.sns_event,
    HandlerKind.SQS: ClassifiedEvent.sqs_event,
    HandlerKind.SIMPLE_EMAIL: ClassifiedEvent.simple_email_event,
    HandlerKind.EVENTBRIDGE: ClassifiedEvent.eventbridge_event,
}


@dataclass(frozen=True)
class RegisteredHandler:
    """The one handler of a LambdaApp and the kind it was registered as."""

    kind: HandlerKind
    fn: Callable[..., Any]


def _to_wire(result: Any) -> Any:
    """Dump response models to their wire dict; pass anything else through."""
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True, exclude_none=True)
    return result


class LambdaApp:
    """
    Lambda entry point dispatching every payload to a single handler.

    Args:
        logger_instance: Optional custom logger. Defaults to ``triggerkit.lambda_handler``.
    """

    def __init__(self, *, logger_instance: Optional[Any] = None) -> None:
        self._registered: Optional[RegisteredHandler] = None
        self._logger = logger_instance or logger

    @property
    def registered(self) -> Optional[RegisteredHandler]:
        return self._registered

    def register(self, kind: HandlerKind) -> Callable[[HandlerFn], HandlerFn]:
        """
        Register the handler (decorator form).

        Raises:
            ConfigurationError: If a handler is already registered
        """

        def decorator(fn: HandlerFn) -> HandlerFn:
            if self._registered is not None:
                raise ConfigurationError(
                    f"A {self._registered.kind.value} handler is already registered",
                    details={"registered": self._registered.kind.value, "rejected": kind.value},
                )
            self._registered = RegisteredHandler(kind=kind, fn=fn)
            return fn

        return decorator

    def http(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.HTTP)(fn)

    def api_gateway(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.API_GATEWAY)(fn)

    def api_gateway_v2(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.API_GATEWAY_V2)(fn)

    def function_url(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.FUNCTION_URL)(fn)

    def websocket(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.WEBSOCKET)(fn)

    def sns(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.SNS)(fn)

    def sqs(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.SQS)(fn)

    def simple_email(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.SIMPLE_EMAIL)(fn)

    def eventbridge(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.EVENTBRIDGE)(fn)

    def raw(self, fn: HandlerFn) -> HandlerFn:
        return self.register(HandlerKind.RAW)(fn)

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def __call__(self, event: Any, context: Any = None) -> Any:
        """
        AWS Lambda handler function.

        Args:
            event: JSON-decoded payload delivered by Lambda
            context: Lambda context object

        Returns:
            The trigger response dict for HTTP handlers, otherwise whatever
            the handler returned (response models are dumped to dicts)

        Raises:
            ConfigurationError: If no handler is registered
            ClassificationError: If the payload matches no known trigger shape
            UnsupportedOperationError: If the handler cannot serve the event's kind
        """
        registered = self._registered
        if registered is None:
            raise ConfigurationError("No handler registered before dispatch")

        request_id = getattr(context, "aws_request_id", None) or "unknown"

        classification = classify(event)
        if not classification.ok:
            self._logger.error(
                "Unrecognized Lambda event",
                extra={
                    "aws_request_id": request_id,
                    "context": {"reason": classification.reason, "field": classification.field},
                },
            )
            classification.raise_for_error()

        classified = ClassifiedEvent(event, classification.kind)
        if classified.kind not in ACCEPTED_KINDS[registered.kind]:
            raise UnsupportedOperationError(
                f"{registered.kind.value} handler cannot serve {classified.kind.value} events",
                kind=classified.kind.value,
            )

        self._logger.info(
            "Lambda invocation started",
            extra={
                "aws_request_id": request_id,
                "context": {
                    "trigger_kind": classified.kind.value,
                    "handler_kind": registered.kind.value,
                },
            },
        )

        if registered.kind is HandlerKind.HTTP:
            result = self._invoke_http(registered, classified, request_id)
        elif registered.kind is HandlerKind.RAW:
            result = _to_wire(run_sync(registered.fn(classified)))
        else:
            view = TYPED_VIEWS[registered.kind](classified)
            result = _to_wire(run_sync(registered.fn(view)))

        self._logger.info(
            "Lambda invocation completed",
            extra={
                "aws_request_id": request_id,
                "context": {"trigger_kind": classified.kind.value},
            },
        )
        return result

    def _invoke_http(
        self,
        registered: RegisteredHandler,
        classified: ClassifiedEvent,
        request_id: str,
    ) -> dict[str, Any]:
        request = classified.to_http_request()

        try:
            response = run_sync(registered.fn(request))
        except Exception as exc:
            self._logger.error(
                f"Error in HTTP handler: {exc}",
                exc_info=True,
                extra={
                    "aws_request_id": request_id,
                    "context": {"error_type": type(exc).__name__},
                },
            )
            response = httpx.Response(500, json={"error": "Internal Server Error"})

        if not isinstance(response, httpx.Response):
            raise TypeError(
                f"HTTP handler must return httpx.Response, got {type(response).__name__}"
            )

        return classified.to_response(response).to_dict()


def make_lambda_handler(
    fn: Callable[..., Any],
    kind: HandlerKind = HandlerKind.HTTP,
    *,
    configure_logs: bool = True,
) -> LambdaApp:
    """
    Build a Lambda entry point around a single handler.

    Args:
        fn: The handler function
        kind: What the handler receives
        configure_logs: Install the JSON log formatter on the root logger

    Returns:
        LambdaApp ready to be exported as the Lambda handler
    """
    if configure_logs:
        configure_logging()
    app = LambdaApp()
    app.register(kind)(fn)
    return app
