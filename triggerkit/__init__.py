"""Normalize AWS Lambda trigger payloads into generic HTTP requests and back."""

from triggerkit.classified_event import ClassifiedEvent
from triggerkit.classifier import Classification, classify
from triggerkit.config import is_running_on_lambda
from triggerkit.exceptions import (
    ClassificationError,
    ConfigurationError,
    DecodeError,
    ParseError,
    ResponseReadError,
    TriggerKitError,
    UnsupportedOperationError,
)
from triggerkit.lambda_handler import HandlerKind, LambdaApp, make_lambda_handler
from triggerkit.models.trigger import TriggerKind

__all__ = [
    "ClassifiedEvent",
    "Classification",
    "classify",
    "is_running_on_lambda",
    "HandlerKind",
    "LambdaApp",
    "make_lambda_handler",
    "TriggerKind",
    "TriggerKitError",
    "ClassificationError",
    "DecodeError",
    "ParseError",
    "UnsupportedOperationError",
    "ConfigurationError",
    "ResponseReadError",
]
