"""Translation between trigger payloads and generic HTTP messages."""

from triggerkit.translators.request import (
    api_gateway_proxy_to_request,
    api_gateway_v2_to_request,
    function_url_to_request,
    raw_event_to_request,
    websocket_to_request,
)
from triggerkit.translators.response import (
    to_api_gateway_proxy_response,
    to_api_gateway_v2_response,
    to_function_url_response,
    to_trigger_response,
)

__all__ = [
    "raw_event_to_request",
    "api_gateway_proxy_to_request",
    "api_gateway_v2_to_request",
    "function_url_to_request",
    "websocket_to_request",
    "to_api_gateway_proxy_response",
    "to_api_gateway_v2_response",
    "to_function_url_response",
    "to_trigger_response",
]
