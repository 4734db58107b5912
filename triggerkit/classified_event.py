"""A raw trigger payload paired with its resolved kind."""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from triggerkit.classifier import classify
from triggerkit.exceptions import DecodeError, UnsupportedOperationError
from triggerkit.models.events import (
    APIGatewayProxyRequest,
    APIGatewayV2HTTPRequest,
    APIGatewayWebsocketProxyRequest,
    EventBridgeEvent,
    LambdaFunctionURLRequest,
    SimpleEmailEvent,
    SNSEvent,
    SQSEvent,
)
from triggerkit.models.trigger import EVENTBRIDGE_KINDS, TriggerKind
from triggerkit.translators.request import (
    raw_event_to_request,
    resolve_body,
    resolve_headers,
    resolve_method,
    resolve_url,
)
from triggerkit.translators.response import TriggerResponse, to_trigger_response

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClassifiedEvent:
    """
    A decoded Lambda payload and the trigger kind it was classified as.

    The payload is only read, never modified. Shape-specific accessors
    return None when called on an event of another kind.
    """

    def __init__(self, raw: Mapping[str, Any], kind: TriggerKind) -> None:
        """
        Initialize ClassifiedEvent.

        Args:
            raw: JSON-decoded payload
            kind: Kind the payload was classified as
        """
        self._raw = raw
        self._kind = kind

    @classmethod
    def from_raw(cls, raw: Any) -> "ClassifiedEvent":
        """
        Classify a decoded payload.

        Args:
            raw: JSON-decoded payload

        Returns:
            ClassifiedEvent for the payload

        Raises:
            ClassificationError: If the payload matches no known trigger shape
        """
        kind = classify(raw).raise_for_error()
        return cls(raw, kind)

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._raw

    @property
    def kind(self) -> TriggerKind:
        return self._kind

    def __repr__(self) -> str:
        return f"ClassifiedEvent(kind={self._kind.value})"

    # ------------------------------------------------------------------
    # Generic HTTP view
    # ------------------------------------------------------------------

    def method(self) -> str:
        """HTTP method, or an empty string for events without one."""
        return resolve_method(self._raw)

    def url(self) -> httpx.URL:
        """
        Synthetic request URL.

        Raises:
            ParseError: If the URL cannot be assembled
        """
        return resolve_url(self._raw)

    def headers(self) -> httpx.Headers:
        """Request headers merged from the single- and multi-value maps."""
        return resolve_headers(self._raw)

    def body(self) -> bytes:
        """
        Decoded request body, empty if the event has none.

        Raises:
            DecodeError: If a base64 body is malformed
        """
        return resolve_body(self._raw)

    def to_http_request(self) -> httpx.Request:
        """
        Project the event into a generic HTTP request.

        Raises:
            UnsupportedOperationError: If the event is not HTTP-shaped
            DecodeError: If a base64 body is malformed
            ParseError: If the URL cannot be assembled
        """
        self._require_http("to_http_request")
        return raw_event_to_request(self._raw)

    def to_response(self, response: httpx.Response) -> TriggerResponse:
        """
        Project a generic response into the shape this event's trigger expects.

        Returns:
            The trigger response model; call ``to_dict()`` for the wire dict

        Raises:
            UnsupportedOperationError: If the event is not HTTP-shaped
            ResponseReadError: If the response body cannot be read
        """
        return to_trigger_response(self._kind, response)

    def _require_http(self, operation: str) -> None:
        if not self._kind.is_http:
            raise UnsupportedOperationError(
                f"{operation} is not available for {self._kind.value} events",
                kind=self._kind.value,
            )

    # ------------------------------------------------------------------
    # Strongly-typed views
    # ------------------------------------------------------------------

    def _as_model(self, model: type[ModelT], *kinds: TriggerKind) -> Optional[ModelT]:
        if self._kind not in kinds:
            return None
        try:
            return model.model_validate(self._raw)
        except ValidationError as exc:
            raise DecodeError(
                f"Event does not match {model.__name__}: {exc}",
                details={"kind": self._kind.value, "error_count": exc.error_count()},
            ) from exc

    def api_gateway_proxy_request(self) -> Optional[APIGatewayProxyRequest]:
        return self._as_model(APIGatewayProxyRequest, TriggerKind.API_GATEWAY)

    def api_gateway_v2_request(self) -> Optional[APIGatewayV2HTTPRequest]:
        return self._as_model(APIGatewayV2HTTPRequest, TriggerKind.API_GATEWAY_V2)

    def function_url_request(self) -> Optional[LambdaFunctionURLRequest]:
        return self._as_model(LambdaFunctionURLRequest, TriggerKind.LAMBDA_FUNCTION_URL)

    def websocket_request(self) -> Optional[APIGatewayWebsocketProxyRequest]:
        return self._as_model(
            APIGatewayWebsocketProxyRequest, TriggerKind.API_GATEWAY_WEBSOCKET
        )

    def sns_event(self) -> Optional[SNSEvent]:
        return self._as_model(SNSEvent, TriggerKind.SNS)

    def sqs_event(self) -> Optional[SQSEvent]:
        return self._as_model(SQSEvent, TriggerKind.SQS)

    def simple_email_event(self) -> Optional[SimpleEmailEvent]:
        return self._as_model(SimpleEmailEvent, TriggerKind.SIMPLE_EMAIL)

    def eventbridge_event(self) -> Optional[EventBridgeEvent]:
        """EventBridge view, for both rule and scheduler events."""
        return self._as_model(EventBridgeEvent, *EVENTBRIDGE_KINDS)
