"""Trigger kinds recognised by the classifier."""

from enum import Enum


class TriggerKind(str, Enum):
    """
    Event source that invoked the function.

    Exactly one kind is assigned to every payload; UNKNOWN is only ever
    paired with a classification error.
    """

    UNKNOWN = "unknown"
    LAMBDA_FUNCTION_URL = "lambda_function_url"
    API_GATEWAY = "api_gateway"
    API_GATEWAY_V2 = "api_gateway_v2"
    API_GATEWAY_WEBSOCKET = "api_gateway_websocket"
    SNS = "sns"
    SQS = "sqs"
    SIMPLE_EMAIL = "simple_email"
    EVENTBRIDGE_RULES = "eventbridge_rules"
    EVENTBRIDGE_SCHEDULER = "eventbridge_scheduler"

    @property
    def is_http(self) -> bool:
        """Whether the kind carries an HTTP request and expects an HTTP response."""
        return self in HTTP_KINDS


HTTP_KINDS = frozenset(
    {
        TriggerKind.LAMBDA_FUNCTION_URL,
        TriggerKind.API_GATEWAY,
        TriggerKind.API_GATEWAY_V2,
        TriggerKind.API_GATEWAY_WEBSOCKET,
    }
)

EVENTBRIDGE_KINDS = frozenset(
    {TriggerKind.EVENTBRIDGE_RULES, TriggerKind.EVENTBRIDGE_SCHEDULER}
)
