"""Shared trigger payload fixtures."""

import base64
from typing import Any

import pytest


@pytest.fixture
def api_gateway_event() -> dict[str, Any]:
    """REST API (v1) proxy event, mirroring headers into both maps like API Gateway does."""
    return {
        "resource": "/path/{proxy+}",
        "path": "/path/to/resource",
        "httpMethod": "POST",
        "headers": {
            "Content-Type": "application/json",
            "Via": "1.1 x",
        },
        "multiValueHeaders": {
            "Content-Type": ["application/json"],
            "Via": ["1.1 x", "1.2 y"],
        },
        "queryStringParameters": {"foo": "bar"},
        "multiValueQueryStringParameters": {"foo": ["bar"]},
        "pathParameters": {"proxy": "to/resource"},
        "stageVariables": None,
        "requestContext": {
            "accountId": "123456789012",
            "resourceId": "us4z18",
            "stage": "test",
            "requestId": "41b45ea3-70b5-11e6-b7bd-69b5aaebc7d9",
            "identity": {"sourceIp": "192.168.100.1"},
            "resourcePath": "/{proxy+}",
            "httpMethod": "POST",
            "apiId": "wt6mne2s9k",
            "domainName": "wt6mne2s9k.execute-api.us-east-2.amazonaws.com",
        },
        "body": base64.b64encode(b'{"test":"body"}').decode(),
        "isBase64Encoded": True,
    }


@pytest.fixture
def api_gateway_v2_event() -> dict[str, Any]:
    """HTTP API (v2 payload format) event."""
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/my/path",
        "rawQueryString": "parameter1=value1&parameter1=value2&parameter2=value",
        "cookies": ["cookie1", "cookie2"],
        "headers": {"header1": "value1", "header2": "value1,value2"},
        "queryStringParameters": {"parameter1": "value1,value2", "parameter2": "value"},
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "id.execute-api.us-east-1.amazonaws.com",
            "domainPrefix": "id",
            "http": {
                "method": "GET",
                "path": "/my/path",
                "protocol": "HTTP/1.1",
                "sourceIp": "192.0.2.1",
                "userAgent": "agent",
            },
            "requestId": "id",
            "routeKey": "$default",
            "stage": "$default",
            "time": "12/Mar/2020:19:03:58 +0000",
            "timeEpoch": 1583348638390,
        },
        "body": "Hello from Lambda",
        "pathParameters": {"parameter1": "value1"},
        "isBase64Encoded": False,
        "stageVariables": {"stageVariable1": "value1"},
    }


@pytest.fixture
def function_url_event() -> dict[str, Any]:
    """Lambda Function URL event."""
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/my/path",
        "rawQueryString": "",
        "headers": {"content-type": "text/plain", "x-amzn-trace-id": "Root=1-5e"},
        "queryStringParameters": {"b": "2", "a": "1"},
        "requestContext": {
            "accountId": "anonymous",
            "apiId": "abcdefg",
            "domainName": "abcdefg.lambda-url.us-east-1.on.aws",
            "domainPrefix": "abcdefg",
            "http": {
                "method": "PUT",
                "path": "/my/path",
                "protocol": "HTTP/1.1",
                "sourceIp": "123.123.123.123",
                "userAgent": "agent",
            },
            "requestId": "id",
            "time": "12/Mar/2020:19:03:58 +0000",
            "timeEpoch": 1583348638390,
        },
        "body": "hello",
        "isBase64Encoded": False,
    }


@pytest.fixture
def websocket_event() -> dict[str, Any]:
    """WebSocket API message event."""
    return {
        "headers": {"Host": "abcd.execute-api.us-east-1.amazonaws.com"},
        "multiValueHeaders": {"Host": ["abcd.execute-api.us-east-1.amazonaws.com"]},
        "requestContext": {
            "routeKey": "$default",
            "messageId": "GXLKJfX4FiACG1w=",
            "eventType": "MESSAGE",
            "extendedRequestId": "GXLKJHtwPHcFvJw=",
            "requestTime": "07/Mar/2024:09:19:50 +0000",
            "messageDirection": "IN",
            "stage": "prod",
            "connectedAt": 1709803180000,
            "requestTimeEpoch": 1709803190000,
            "requestId": "GXLKJHtwPHcFvJw=",
            "domainName": "abcd.execute-api.us-east-1.amazonaws.com",
            "connectionId": "GXLKAfX1FiACGEw=",
            "apiId": "abcd",
            "status": "200",
        },
        "body": '{"action":"ping"}',
        "isBase64Encoded": False,
    }


@pytest.fixture
def sns_event() -> dict[str, Any]:
    """SNS notification event."""
    return {
        "Records": [
            {
                "EventVersion": "1.0",
                "EventSubscriptionArn": "arn:aws:sns:us-east-1:123456789012:sns-lambda:21be56ed",
                "EventSource": "aws:sns",
                "Sns": {
                    "SignatureVersion": "1",
                    "Timestamp": "2019-01-02T12:45:07.000Z",
                    "Signature": "tcc6faL2yUC6dgZdmrwh1Y4cGa/ebXEkAi6RibDsvpi+tE/1+82j...65r==",
                    "SigningCertUrl": "https://sns.us-east-1.amazonaws.com/cert.pem",
                    "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
                    "Message": "Hello from SNS!",
                    "MessageAttributes": {"Test": {"Type": "String", "Value": "TestString"}},
                    "Type": "Notification",
                    "UnsubscribeUrl": "https://sns.us-east-1.amazonaws.com/?Action=Unsubscribe",
                    "TopicArn": "arn:aws:sns:us-east-1:123456789012:sns-lambda",
                    "Subject": "TestInvoke",
                },
            }
        ]
    }


@pytest.fixture
def sqs_event() -> dict[str, Any]:
    """SQS batch event."""
    return {
        "Records": [
            {
                "messageId": "059f36b4-87a3-44ab-83d2-661975830a7d",
                "receiptHandle": "AQEBwJnKyrHigUMZj6rYigCgxlaS3SLy0a...",
                "body": "Test message.",
                "attributes": {
                    "ApproximateReceiveCount": "1",
                    "SentTimestamp": "1545082649183",
                },
                "messageAttributes": {},
                "md5OfBody": "e4e68fb7bd0e697a0ae8f1bb342846b3",
                "eventSource": "aws:sqs",
                "eventSourceARN": "arn:aws:sqs:us-east-2:123456789012:my-queue",
                "awsRegion": "us-east-2",
            }
        ]
    }


@pytest.fixture
def ses_event() -> dict[str, Any]:
    """SES receipt rule event."""
    return {
        "Records": [
            {
                "eventVersion": "1.0",
                "eventSource": "aws:ses",
                "ses": {
                    "mail": {
                        "timestamp": "2019-08-05T21:30:02.028Z",
                        "source": "prvs=144d0cba7=sender@example.com",
                        "messageId": "EXAMPLE7c191be45",
                        "destination": ["recipient@example.com"],
                        "headersTruncated": False,
                        "headers": [{"name": "From", "value": "sender@example.com"}],
                        "commonHeaders": {"subject": "Hello"},
                    },
                    "receipt": {
                        "timestamp": "2019-08-05T21:30:02.028Z",
                        "processingTimeMillis": 1153,
                        "recipients": ["recipient@example.com"],
                        "spamVerdict": {"status": "PASS"},
                        "action": {"type": "Lambda", "invocationType": "Event"},
                    },
                },
            }
        ]
    }


@pytest.fixture
def eventbridge_event() -> dict[str, Any]:
    """EventBridge scheduled rule event."""
    return {
        "version": "0",
        "id": "53dc4d37-cffa-4f76-80c9-8b7d4a4d2eaa",
        "detail-type": "Scheduled Event",
        "source": "aws.events",
        "account": "123456789012",
        "time": "2015-10-08T16:53:06Z",
        "region": "us-east-1",
        "resources": ["arn:aws:events:us-east-1:123456789012:rule/my-scheduled-rule"],
        "detail": {},
    }
