"""Tests for projecting trigger payloads into httpx requests."""

import base64
from typing import Any

import httpx
import pytest

from triggerkit.exceptions import DecodeError, ParseError
from triggerkit.models.events import (
    APIGatewayProxyRequest,
    APIGatewayV2HTTPRequest,
    APIGatewayWebsocketProxyRequest,
    LambdaFunctionURLRequest,
)
from triggerkit.translators.request import (
    api_gateway_proxy_to_request,
    api_gateway_v2_to_request,
    function_url_to_request,
    raw_event_to_request,
    resolve_method,
    resolve_path,
    websocket_to_request,
)


def _snapshot(request: httpx.Request) -> tuple:
    return request.method, str(request.url), request.headers.multi_items(), request.content


@pytest.fixture
def scenario_a_event() -> dict[str, Any]:
    """REST payload with both query maps and a header mirrored into both maps."""
    return {
        "httpMethod": "POST",
        "path": "/path/to/resource",
        "body": "eyJ0ZXN0IjoiYm9keSJ9",
        "isBase64Encoded": True,
        "queryStringParameters": {"foo": "bar"},
        "multiValueQueryStringParameters": {"foo2": ["bar1", "bar2"]},
        "headers": {"Via": "1.1 x"},
        "multiValueHeaders": {"Via": ["1.1 x", "1.2 y"]},
        "requestContext": {"httpMethod": "POST"},
    }


class TestRawEventToRequest:
    """Tests for the untyped projection."""

    def test_scenario_a(self, scenario_a_event: dict[str, Any]) -> None:
        """Test method, path, query, body and header merge of a REST payload."""
        request = raw_event_to_request(scenario_a_event)

        assert request.method == "POST"
        assert request.url.path == "/path/to/resource"
        assert request.url.params["foo"] == "bar"
        assert request.content == b'{"test":"body"}'
        assert request.headers.get_list("via") == ["1.1 x", "1.2 y"]

    def test_scenario_a_drops_multi_value_query(self, scenario_a_event: dict[str, Any]) -> None:
        """Test the known limitation: multi-value query params are lost next to single-value ones."""
        request = raw_event_to_request(scenario_a_event)

        assert "foo2" not in request.url.params
        assert request.url.query == b"foo=bar"

    def test_placeholder_host_and_content_length(self, scenario_a_event: dict[str, Any]) -> None:
        request = raw_event_to_request(scenario_a_event)

        assert request.url.host == "localhost"
        assert request.headers["Content-Length"] == "15"

    def test_api_gateway_uses_domain_name(self, api_gateway_event: dict[str, Any]) -> None:
        request = raw_event_to_request(api_gateway_event)

        assert str(request.url) == (
            "http://wt6mne2s9k.execute-api.us-east-2.amazonaws.com/path/to/resource?foo=bar"
        )
        assert request.headers.get_list("content-type") == ["application/json"]

    def test_api_gateway_v2(self, api_gateway_v2_event: dict[str, Any]) -> None:
        """Test that the raw query string is used verbatim."""
        request = raw_event_to_request(api_gateway_v2_event)

        assert request.method == "GET"
        assert str(request.url) == (
            "http://id.execute-api.us-east-1.amazonaws.com/my/path"
            "?parameter1=value1&parameter1=value2&parameter2=value"
        )
        assert request.url.params.get_list("parameter1") == ["value1", "value2"]
        assert request.headers["header2"] == "value1,value2"
        assert request.content == b"Hello from Lambda"

    def test_function_url_falls_back_to_parameters(self, function_url_event: dict[str, Any]) -> None:
        """Test that an empty raw query string falls through to the parameter map."""
        request = raw_event_to_request(function_url_event)

        assert request.method == "PUT"
        assert request.url.host == "abcdefg.lambda-url.us-east-1.on.aws"
        assert request.url.query == b"a=1&b=2"
        assert request.content == b"hello"

    def test_minimal_event_degrades_to_empty_values(self) -> None:
        """Test that missing optional fields are not errors."""
        request = raw_event_to_request({"httpMethod": "GET", "requestContext": {"httpMethod": "GET"}})

        assert request.method == "GET"
        assert request.url.host == "localhost"
        assert request.url.path == "/"
        assert request.url.query == b""
        assert request.content == b""
        assert "content-length" not in request.headers
        assert list(request.headers.keys()) == ["host"]

    def test_malformed_optional_fields_are_ignored(self) -> None:
        request = raw_event_to_request(
            {
                "httpMethod": "GET",
                "path": 12,
                "headers": "nope",
                "multiValueHeaders": {"X": "single"},
                "queryStringParameters": ["a"],
                "body": {"not": "a string"},
                "requestContext": {"httpMethod": "GET", "domainName": None},
            }
        )

        assert request.url.path == "/"
        assert request.headers["x"] == "single"
        assert request.content == b""

    def test_malformed_base64_raises_decode_error(self, scenario_a_event: dict[str, Any]) -> None:
        scenario_a_event["body"] = "%%%"

        with pytest.raises(DecodeError):
            raw_event_to_request(scenario_a_event)

    def test_invalid_domain_raises_parse_error(self, scenario_a_event: dict[str, Any]) -> None:
        scenario_a_event["requestContext"]["domainName"] = "example.com:abc"

        with pytest.raises(ParseError):
            raw_event_to_request(scenario_a_event)

    def test_does_not_mutate_event(self, api_gateway_event: dict[str, Any]) -> None:
        snapshot = repr(api_gateway_event)
        raw_event_to_request(api_gateway_event)
        assert repr(api_gateway_event) == snapshot


class TestResolvers:
    """Tests for method and path lookups."""

    def test_http_context_method_preferred(self) -> None:
        raw = {"httpMethod": "POST", "requestContext": {"http": {"method": "DELETE"}}}
        assert resolve_method(raw) == "DELETE"

    def test_top_level_method_fallback(self) -> None:
        assert resolve_method({"httpMethod": "PATCH"}) == "PATCH"

    def test_http_context_path_preferred(self) -> None:
        raw = {"path": "/v1", "requestContext": {"http": {"path": "/v2"}}}
        assert resolve_path(raw) == "/v2"

    def test_missing_method(self) -> None:
        assert resolve_method({}) == ""


class TestTypedVariants:
    """Tests that typed projections agree with the untyped one."""

    def test_api_gateway_proxy(self, api_gateway_event: dict[str, Any]) -> None:
        event = APIGatewayProxyRequest.model_validate(api_gateway_event)

        assert _snapshot(api_gateway_proxy_to_request(event)) == _snapshot(
            raw_event_to_request(api_gateway_event)
        )

    def test_api_gateway_v2(self, api_gateway_v2_event: dict[str, Any]) -> None:
        event = APIGatewayV2HTTPRequest.model_validate(api_gateway_v2_event)

        assert _snapshot(api_gateway_v2_to_request(event)) == _snapshot(
            raw_event_to_request(api_gateway_v2_event)
        )

    def test_function_url(self, function_url_event: dict[str, Any]) -> None:
        event = LambdaFunctionURLRequest.model_validate(function_url_event)

        assert _snapshot(function_url_to_request(event)) == _snapshot(
            raw_event_to_request(function_url_event)
        )

    def test_websocket(self, websocket_event: dict[str, Any]) -> None:
        websocket_event["httpMethod"] = "POST"
        event = APIGatewayWebsocketProxyRequest.model_validate(websocket_event)
        request = websocket_to_request(event)

        assert _snapshot(request) == _snapshot(raw_event_to_request(websocket_event))
        assert request.headers.get_list("host") == ["abcd.execute-api.us-east-1.amazonaws.com"]
        assert request.content == b'{"action":"ping"}'

    def test_typed_base64_body(self) -> None:
        event = LambdaFunctionURLRequest.model_validate(
            {
                "requestContext": {"http": {"method": "POST", "path": "/upload"}},
                "body": base64.b64encode(b"\x00\xff").decode(),
                "isBase64Encoded": True,
            }
        )

        assert function_url_to_request(event).content == b"\x00\xff"
