"""
Request-direction translation: trigger payloads to ``httpx.Request``.

The untyped helpers inspect a raw decoded payload and degrade missing or
malformed optional fields to empty values. The typed variants accept an
already validated event model. Both feed the same codec so they agree on
headers, query strings and bodies.
"""

from collections.abc import Mapping
from typing import Any, Union

import httpx

from triggerkit.models.events import (
    APIGatewayProxyRequest,
    APIGatewayV2HTTPRequest,
    APIGatewayWebsocketProxyRequest,
    LambdaFunctionURLRequest,
)
from triggerkit.translators.codec import (
    as_mapping,
    build_query_string,
    build_url,
    decode_body,
    merge_headers,
)


def _http_context(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    return as_mapping(as_mapping(raw.get("requestContext")).get("http"))


def _first_string(*candidates: Any) -> str:
    for candidate in candidates:
        if isinstance(candidate, str) and candidate:
            return candidate
    return ""


def resolve_method(raw: Mapping[str, Any]) -> str:
    """
    HTTP method of a raw event.

    ``requestContext.http.method`` (v2 and Function URL) is preferred over
    the top-level ``httpMethod`` (v1 and WebSocket). Empty if neither is set.
    """
    return _first_string(_http_context(raw).get("method"), raw.get("httpMethod"))


def resolve_path(raw: Mapping[str, Any]) -> str:
    """Request path, ``requestContext.http.path`` first, then ``path``."""
    return _first_string(_http_context(raw).get("path"), raw.get("path"))


def resolve_url(raw: Mapping[str, Any]) -> httpx.URL:
    """
    Synthetic request URL of a raw event.

    Raises:
        ParseError: If the assembled URL is malformed
    """
    request_context = as_mapping(raw.get("requestContext"))
    query = build_query_string(
        raw.get("rawQueryString"),
        raw.get("queryStringParameters"),
        raw.get("multiValueQueryStringParameters"),
    )
    return build_url(request_context.get("domainName"), resolve_path(raw), query)


def resolve_headers(raw: Mapping[str, Any]) -> httpx.Headers:
    """Headers of a raw event merged from ``headers`` and ``multiValueHeaders``."""
    return merge_headers(raw.get("headers"), raw.get("multiValueHeaders"))


def resolve_body(raw: Mapping[str, Any]) -> bytes:
    """
    Decoded body of a raw event; empty when ``body`` is absent.

    Raises:
        DecodeError: If ``isBase64Encoded`` is set and the body is not valid base64
    """
    return decode_body(raw.get("body"), raw.get("isBase64Encoded", False))


def _build_request(
    method: str,
    url: httpx.URL,
    headers: httpx.Headers,
    body: bytes,
) -> httpx.Request:
    # httpx fills in Host and, for a non-empty body, Content-Length
    return httpx.Request(method, url, headers=headers, content=body)


def raw_event_to_request(raw: Mapping[str, Any]) -> httpx.Request:
    """
    Project a raw HTTP-shaped event into a generic request.

    Args:
        raw: JSON-decoded v1, v2, Function URL or WebSocket event

    Returns:
        A fresh httpx.Request

    Raises:
        DecodeError: If the base64 body is malformed
        ParseError: If the assembled URL is malformed
    """
    body = resolve_body(raw)
    url = resolve_url(raw)
    return _build_request(resolve_method(raw), url, resolve_headers(raw), body)


def api_gateway_proxy_to_request(
    event: Union[APIGatewayProxyRequest, APIGatewayWebsocketProxyRequest],
) -> httpx.Request:
    """
    Project a REST API (v1) proxy event into a generic request.

    Raises:
        DecodeError: If the base64 body is malformed
        ParseError: If the assembled URL is malformed
    """
    body = decode_body(event.body, event.is_base64_encoded)
    query = build_query_string(
        None,
        event.query_string_parameters,
        event.multi_value_query_string_parameters,
    )
    url = build_url(event.request_context.domain_name, event.path, query)
    headers = merge_headers(event.headers, event.multi_value_headers)
    return _build_request(event.http_method, url, headers, body)


def websocket_to_request(event: APIGatewayWebsocketProxyRequest) -> httpx.Request:
    """Project a WebSocket proxy event into a generic request."""
    return api_gateway_proxy_to_request(event)


def _http_api_to_request(
    event: Union[APIGatewayV2HTTPRequest, LambdaFunctionURLRequest],
) -> httpx.Request:
    body = decode_body(event.body, event.is_base64_encoded)
    http = event.request_context.http
    query = build_query_string(event.raw_query_string, event.query_string_parameters)
    url = build_url(event.request_context.domain_name, http.path, query)
    headers = merge_headers(event.headers)
    return _build_request(http.method, url, headers, body)


def api_gateway_v2_to_request(event: APIGatewayV2HTTPRequest) -> httpx.Request:
    """
    Project an HTTP API (v2) event into a generic request.

    Raises:
        DecodeError: If the base64 body is malformed
        ParseError: If the assembled URL is malformed
    """
    return _http_api_to_request(event)


def function_url_to_request(event: LambdaFunctionURLRequest) -> httpx.Request:
    """
    Project a Lambda Function URL event into a generic request.

    Raises:
        DecodeError: If the base64 body is malformed
        ParseError: If the assembled URL is malformed
    """
    return _http_api_to_request(event)
