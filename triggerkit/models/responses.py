"""Trigger-specific HTTP response shapes."""

from typing import Dict, List, Optional

from pydantic import Field

from triggerkit.models.events import EventModel


class APIGatewayProxyResponse(EventModel):
    """
    Response for REST API (v1) and WebSocket proxy integrations.

    Attributes:
        status_code: HTTP status code
        headers: Single-value headers (first value of every header)
        multi_value_headers: Headers that carried more than one value
        body: Response body, base64 text when is_base64_encoded is set
        is_base64_encoded: Whether body holds base64 of binary content
    """

    status_code: int = Field(..., description="HTTP status code")
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    body: str = ""
    is_base64_encoded: bool = False


class APIGatewayV2HTTPResponse(EventModel):
    """
    Response for HTTP API (v2) integrations.

    ``Set-Cookie`` headers are carried in ``cookies`` and never in the
    header maps.
    """

    status_code: int = Field(..., description="HTTP status code")
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    body: str = ""
    is_base64_encoded: bool = False
    cookies: Optional[List[str]] = None


class LambdaFunctionURLResponse(EventModel):
    """
    Response for Lambda Function URLs.

    Function URLs have no multi-value header map, so repeated headers are
    joined into one comma-separated value.
    """

    status_code: int = Field(..., description="HTTP status code")
    headers: Optional[Dict[str, str]] = None
    body: str = ""
    is_base64_encoded: bool = False
