"""
Response-direction translation: ``httpx.Response`` to trigger responses.

Each projector folds the response headers into the shape its platform
accepts, drains and closes the body, and decides between a text body and
a base64 body from the Content-Type.
"""

from collections.abc import Callable
from typing import Union

import httpx

from triggerkit.exceptions import ResponseReadError, UnsupportedOperationError
from triggerkit.models.responses import (
    APIGatewayProxyResponse,
    APIGatewayV2HTTPResponse,
    LambdaFunctionURLResponse,
)
from triggerkit.models.trigger import TriggerKind
from triggerkit.translators.codec import (
    FUNCTION_URL_TEXT_MEDIA_MARKERS,
    TEXT_MEDIA_MARKERS,
    encode_body,
    first_header,
    fold_headers,
)
from triggerkit.utils.concurrency import run_sync

TriggerResponse = Union[
    APIGatewayProxyResponse,
    APIGatewayV2HTTPResponse,
    LambdaFunctionURLResponse,
]


def read_body(response: httpx.Response) -> bytes:
    """
    Drain a response body and release it.

    The response is closed whether or not reading succeeds. An async-only
    body cannot be drained from this synchronous path, so reading it fails,
    but it is still released through ``aclose()``.
    """
    try:
        return response.read()
    finally:
        if isinstance(response.stream, httpx.SyncByteStream):
            response.close()
        elif isinstance(response.stream, httpx.AsyncByteStream):
            run_sync(response.aclose())


def _fill_body(
    result: TriggerResponse,
    response: httpx.Response,
    content_type: str | None,
    markers: tuple[str, ...],
) -> None:
    try:
        body = read_body(response)
    except (httpx.HTTPError, RuntimeError) as exc:
        # RuntimeError covers httpx.StreamError and async-only streams
        raise ResponseReadError(
            f"Failed to read response body: {exc}",
            response=result,
            details={"status_code": response.status_code},
        ) from exc

    result.body, result.is_base64_encoded = encode_body(body, content_type, markers)


def to_api_gateway_proxy_response(response: httpx.Response) -> APIGatewayProxyResponse:
    """
    Project a generic response into the REST API (v1) proxy shape.

    Every header lands in ``headers`` with its first value; a header with
    more than one value is also listed in full under ``multiValueHeaders``.

    Args:
        response: Response produced by the handler

    Returns:
        APIGatewayProxyResponse

    Raises:
        ResponseReadError: If the body cannot be read (carries the partial response)
    """
    groups = fold_headers(response.headers)
    headers: dict[str, str] = {}
    multi_value_headers: dict[str, list[str]] = {}

    for key, values in groups:
        headers[key] = values[0]
        if len(values) > 1:
            multi_value_headers[key] = list(values)

    result = APIGatewayProxyResponse(
        status_code=response.status_code,
        headers=headers or None,
        multi_value_headers=multi_value_headers or None,
    )
    _fill_body(result, response, first_header(groups, "content-type"), TEXT_MEDIA_MARKERS)
    return result


def to_api_gateway_v2_response(response: httpx.Response) -> APIGatewayV2HTTPResponse:
    """
    Project a generic response into the HTTP API (v2) shape.

    Headers fold as for v1, except that every ``Set-Cookie`` value moves to
    ``cookies`` and is left out of both header maps.

    Raises:
        ResponseReadError: If the body cannot be read (carries the partial response)
    """
    groups = fold_headers(response.headers)
    headers: dict[str, str] = {}
    multi_value_headers: dict[str, list[str]] = {}
    cookies: list[str] = []

    for key, values in groups:
        if key.lower() == "set-cookie":
            cookies.extend(values)
            continue
        headers[key] = values[0]
        if len(values) > 1:
            multi_value_headers[key] = list(values)

    result = APIGatewayV2HTTPResponse(
        status_code=response.status_code,
        headers=headers or None,
        multi_value_headers=multi_value_headers or None,
        cookies=cookies or None,
    )
    _fill_body(result, response, first_header(groups, "content-type"), TEXT_MEDIA_MARKERS)
    return result


def to_function_url_response(response: httpx.Response) -> LambdaFunctionURLResponse:
    """
    Project a generic response into the Lambda Function URL shape.

    Function URLs take one string per header, so repeated values (including
    ``Set-Cookie``) are joined with ``", "``. JavaScript and CSS bodies are
    sent as text in addition to the usual text types.

    Raises:
        ResponseReadError: If the body cannot be read (carries the partial response)
    """
    groups = fold_headers(response.headers)
    headers = {key: ", ".join(values) for key, values in groups}

    result = LambdaFunctionURLResponse(
        status_code=response.status_code,
        headers=headers or None,
    )
    _fill_body(
        result,
        response,
        first_header(groups, "content-type"),
        FUNCTION_URL_TEXT_MEDIA_MARKERS,
    )
    return result


RESPONSE_PROJECTORS: dict[TriggerKind, Callable[[httpx.Response], TriggerResponse]] = {
    TriggerKind.API_GATEWAY: to_api_gateway_proxy_response,
    TriggerKind.API_GATEWAY_WEBSOCKET: to_api_gateway_proxy_response,
    TriggerKind.API_GATEWAY_V2: to_api_gateway_v2_response,
    TriggerKind.LAMBDA_FUNCTION_URL: to_function_url_response,
}


def to_trigger_response(kind: TriggerKind, response: httpx.Response) -> TriggerResponse:
    """
    Project a generic response into the shape expected by a trigger kind.

    Raises:
        UnsupportedOperationError: If the kind does not answer with HTTP responses
        ResponseReadError: If the body cannot be read
    """
    projector = RESPONSE_PROJECTORS.get(kind)
    if projector is None:
        raise UnsupportedOperationError(
            f"{kind.value} events do not take an HTTP response",
            kind=kind.value,
        )
    return projector(response)
