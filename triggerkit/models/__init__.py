"""Data models for trigger events and responses."""

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
from triggerkit.models.responses import (
    APIGatewayProxyResponse,
    APIGatewayV2HTTPResponse,
    LambdaFunctionURLResponse,
)
from triggerkit.models.trigger import TriggerKind

__all__ = [
    "TriggerKind",
    "APIGatewayProxyRequest",
    "APIGatewayV2HTTPRequest",
    "APIGatewayWebsocketProxyRequest",
    "LambdaFunctionURLRequest",
    "SNSEvent",
    "SQSEvent",
    "SimpleEmailEvent",
    "EventBridgeEvent",
    "APIGatewayProxyResponse",
    "APIGatewayV2HTTPResponse",
    "LambdaFunctionURLResponse",
]
