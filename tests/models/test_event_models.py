"""Tests for trigger event and response models."""

from typing import Any

from triggerkit.models import (
    APIGatewayProxyRequest,
    APIGatewayV2HTTPResponse,
    EventBridgeEvent,
    SNSEvent,
    SQSEvent,
    TriggerKind,
)
from triggerkit.models.trigger import EVENTBRIDGE_KINDS, HTTP_KINDS


def test_http_kinds() -> None:
    """Test that exactly the four gateway and URL kinds are HTTP-shaped."""
    assert {kind for kind in TriggerKind if kind.is_http} == HTTP_KINDS
    assert not TriggerKind.SQS.is_http
    assert EVENTBRIDGE_KINDS.isdisjoint(HTTP_KINDS)


def test_api_gateway_request_uses_wire_keys(api_gateway_event: dict[str, Any]) -> None:
    """Test that camelCase wire keys populate snake_case fields."""
    event = APIGatewayProxyRequest.model_validate(api_gateway_event)

    assert event.http_method == "POST"
    assert event.multi_value_headers["Via"] == ["1.1 x", "1.2 y"]
    assert event.request_context.domain_name == "wt6mne2s9k.execute-api.us-east-2.amazonaws.com"
    assert event.is_base64_encoded is True


def test_unknown_keys_are_kept() -> None:
    """Test that fields added by AWS later survive a round trip."""
    event = EventBridgeEvent.model_validate({"source": "aws.events", "newField": 1})

    assert event.to_dict()["newField"] == 1


def test_eventbridge_hyphenated_alias(eventbridge_event: dict[str, Any]) -> None:
    event = EventBridgeEvent.model_validate(eventbridge_event)
    dumped = event.to_dict()

    assert dumped["detail-type"] == "Scheduled Event"
    assert dumped["account"] == "123456789012"


def test_sns_pascal_case_round_trip(sns_event: dict[str, Any]) -> None:
    dumped = SNSEvent.model_validate(sns_event).to_dict()
    sns = dumped["Records"][0]["Sns"]

    assert sns["Message"] == "Hello from SNS!"
    assert sns["SigningCertUrl"] == "https://sns.us-east-1.amazonaws.com/cert.pem"
    assert sns["TopicArn"] == "arn:aws:sns:us-east-1:123456789012:sns-lambda"


def test_sqs_event_source_arn_alias(sqs_event: dict[str, Any]) -> None:
    dumped = SQSEvent.model_validate(sqs_event).to_dict()

    assert dumped["Records"][0]["eventSourceARN"] == "arn:aws:sqs:us-east-2:123456789012:my-queue"
    assert dumped["Records"][0]["md5OfBody"] == "e4e68fb7bd0e697a0ae8f1bb342846b3"


def test_response_wire_shape() -> None:
    response = APIGatewayV2HTTPResponse(
        status_code=200,
        headers={"Content-Type": "application/json"},
        body="{}",
        cookies=["a=1"],
    )

    assert response.to_dict() == {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": "{}",
        "isBase64Encoded": False,
        "cookies": ["a=1"],
    }
