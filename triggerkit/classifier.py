"""
Trigger classification by structural fingerprint.

Payloads carry no type tag, so the kind is inferred from which fields are
present. The rules below are evaluated in order and the first one that
decides wins. The order matters: WebSocket frames share ``requestContext``
with REST and HTTP API requests and are told apart only by ``status``,
which is therefore checked before ``routeKey`` and ``httpMethod``.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from triggerkit.exceptions import ClassificationError
from triggerkit.models.trigger import TriggerKind

# Key present in Records[0] -> kind
RECORD_FINGERPRINTS: tuple[tuple[str, TriggerKind], ...] = (
    ("Sns", TriggerKind.SNS),
    ("messageId", TriggerKind.SQS),
    ("ses", TriggerKind.SIMPLE_EMAIL),
)

# Key present in requestContext -> kind
REQUEST_CONTEXT_FINGERPRINTS: tuple[tuple[str, TriggerKind], ...] = (
    ("status", TriggerKind.API_GATEWAY_WEBSOCKET),
    ("routeKey", TriggerKind.API_GATEWAY_V2),
    ("httpMethod", TriggerKind.API_GATEWAY),
    ("http", TriggerKind.LAMBDA_FUNCTION_URL),
)

SOURCE_KINDS: dict[str, TriggerKind] = {
    "aws.events": TriggerKind.EVENTBRIDGE_RULES,
    "aws.scheduler": TriggerKind.EVENTBRIDGE_SCHEDULER,
}


@dataclass(frozen=True)
class Classification:
    """
    Outcome of classifying one payload.

    Attributes:
        kind: Resolved trigger kind (UNKNOWN when classification failed)
        reason: Failure description, None on success
        field: Name of the field that failed to match
        value: The offending value, kept for diagnostics
    """

    kind: TriggerKind
    reason: Optional[str] = None
    field: Optional[str] = None
    value: Any = None

    @classmethod
    def matched(cls, kind: TriggerKind) -> "Classification":
        return cls(kind=kind)

    @classmethod
    def failed(cls, reason: str, field: str, value: Any) -> "Classification":
        return cls(kind=TriggerKind.UNKNOWN, reason=reason, field=field, value=value)

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def error(self) -> Optional[ClassificationError]:
        """The failure as an exception, or None on success."""
        if self.reason is None:
            return None
        return ClassificationError(self.reason, field=self.field, value=self.value)

    def raise_for_error(self) -> TriggerKind:
        """
        Return the kind, raising if classification failed.

        Raises:
            ClassificationError: If no rule matched the payload
        """
        error = self.error
        if error is not None:
            raise error
        return self.kind


# A rule returns None when it does not apply, so the next rule is tried.
Rule = Callable[[Mapping[str, Any]], Optional[Classification]]


def _match_first_key(
    candidate: Mapping[str, Any],
    fingerprints: tuple[tuple[str, TriggerKind], ...],
) -> Optional[TriggerKind]:
    for key, kind in fingerprints:
        if key in candidate:
            return kind
    return None


def records_rule(raw: Mapping[str, Any]) -> Optional[Classification]:
    """Classify ``Records``-based payloads (SNS, SQS, SES)."""
    if "Records" not in raw:
        return None

    records = raw["Records"]
    if (
        isinstance(records, str)
        or not isinstance(records, Sequence)
        or len(records) == 0
        or not isinstance(records[0], Mapping)
    ):
        return Classification.failed(
            "records is not an array of objects", "Records", records
        )

    kind = _match_first_key(records[0], RECORD_FINGERPRINTS)
    if kind is None:
        return Classification.failed("unknown record format", "Records", records[0])
    return Classification.matched(kind)


def request_context_rule(raw: Mapping[str, Any]) -> Optional[Classification]:
    """Classify ``requestContext``-based payloads (gateway and Function URL)."""
    request_context = raw.get("requestContext")
    if not isinstance(request_context, Mapping):
        return None

    kind = _match_first_key(request_context, REQUEST_CONTEXT_FINGERPRINTS)
    if kind is None:
        return Classification.failed(
            "unknown requestContext format", "requestContext", request_context
        )
    return Classification.matched(kind)


def source_rule(raw: Mapping[str, Any]) -> Optional[Classification]:
    """Classify EventBridge payloads by their ``source``."""
    if "source" not in raw:
        return None

    source = raw["source"]
    kind = SOURCE_KINDS.get(source) if isinstance(source, str) else None
    if kind is None:
        return Classification.failed("unknown source", "source", source)
    return Classification.matched(kind)


CLASSIFICATION_RULES: tuple[Rule, ...] = (
    records_rule,
    request_context_rule,
    source_rule,
)


def classify(raw: Any) -> Classification:
    """
    Determine which trigger shape a decoded payload represents.

    Never raises; failures come back as an UNKNOWN classification whose
    reason names the offending field and value.

    Args:
        raw: JSON-decoded Lambda event

    Returns:
        Classification with the resolved kind or the failure reason
    """
    if not isinstance(raw, Mapping):
        return Classification.failed("event is not an object", "event", raw)

    for rule in CLASSIFICATION_RULES:
        result = rule(raw)
        if result is not None:
            return result

    return Classification.failed("unknown event format", "event", raw)
