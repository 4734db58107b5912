"""
Strongly-typed trigger event models.

Field names are snake_case in Python and keep the exact wire keys as
aliases, so ``Model.model_validate(raw)`` accepts the payload Lambda
delivers and ``model_dump(by_alias=True)`` reproduces it. Unknown keys
are kept (``extra="allow"``) because AWS adds fields over time.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal


class EventModel(BaseModel):
    """Base for camelCase-keyed event payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Dump the model with its wire keys, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PascalEventModel(EventModel):
    """Base for PascalCase-keyed payloads (SNS)."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )


# ---------------------------------------------------------------------------
# API Gateway REST (v1) and WebSocket
# ---------------------------------------------------------------------------


class APIGatewayProxyRequestContext(EventModel):
    """Request context of a REST API (v1) proxy event."""

    account_id: Optional[str] = None
    resource_id: Optional[str] = None
    stage: Optional[str] = None
    request_id: Optional[str] = None
    request_time: Optional[str] = None
    request_time_epoch: Optional[int] = None
    identity: Dict[str, Any] = Field(default_factory=dict)
    authorizer: Optional[Dict[str, Any]] = None
    path: Optional[str] = None
    resource_path: Optional[str] = None
    http_method: Optional[str] = None
    domain_name: Optional[str] = None
    api_id: Optional[str] = None
    protocol: Optional[str] = None


class APIGatewayProxyRequest(EventModel):
    """API Gateway REST API (v1) Lambda proxy integration event."""

    resource: Optional[str] = None
    path: str = ""
    http_method: str = ""
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    multi_value_query_string_parameters: Optional[Dict[str, List[str]]] = None
    path_parameters: Optional[Dict[str, str]] = None
    stage_variables: Optional[Dict[str, str]] = None
    request_context: APIGatewayProxyRequestContext = Field(
        default_factory=APIGatewayProxyRequestContext
    )
    body: Optional[str] = None
    is_base64_encoded: bool = False


class APIGatewayWebsocketRequestContext(EventModel):
    """Request context of a WebSocket API event."""

    account_id: Optional[str] = None
    resource_id: Optional[str] = None
    stage: Optional[str] = None
    request_id: Optional[str] = None
    identity: Dict[str, Any] = Field(default_factory=dict)
    resource_path: Optional[str] = None
    authorizer: Optional[Any] = None
    http_method: Optional[str] = None
    api_id: Optional[str] = None
    connected_at: Optional[int] = None
    connection_id: Optional[str] = None
    domain_name: Optional[str] = None
    error: Optional[str] = None
    event_type: Optional[str] = None
    extended_request_id: Optional[str] = None
    integration_latency: Optional[str] = None
    message_direction: Optional[str] = None
    message_id: Optional[Any] = None
    request_time: Optional[str] = None
    request_time_epoch: Optional[int] = None
    route_key: Optional[str] = None
    status: Optional[str] = None


class APIGatewayWebsocketProxyRequest(EventModel):
    """API Gateway WebSocket API proxy event."""

    resource: Optional[str] = None
    path: str = ""
    http_method: str = ""
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    multi_value_query_string_parameters: Optional[Dict[str, List[str]]] = None
    path_parameters: Optional[Dict[str, str]] = None
    stage_variables: Optional[Dict[str, str]] = None
    request_context: APIGatewayWebsocketRequestContext = Field(
        default_factory=APIGatewayWebsocketRequestContext
    )
    body: Optional[str] = None
    is_base64_encoded: bool = False


# ---------------------------------------------------------------------------
# API Gateway HTTP API (v2) and Lambda Function URLs
# ---------------------------------------------------------------------------


class HTTPDescription(EventModel):
    """``requestContext.http`` block of v2 and Function URL events."""

    method: str = ""
    path: str = ""
    protocol: Optional[str] = None
    source_ip: Optional[str] = None
    user_agent: Optional[str] = None


class APIGatewayV2HTTPRequestContext(EventModel):
    """Request context of an HTTP API (v2) event."""

    route_key: Optional[str] = None
    account_id: Optional[str] = None
    stage: Optional[str] = None
    request_id: Optional[str] = None
    authorizer: Optional[Dict[str, Any]] = None
    api_id: Optional[str] = None
    domain_name: Optional[str] = None
    domain_prefix: Optional[str] = None
    time: Optional[str] = None
    time_epoch: Optional[int] = None
    http: HTTPDescription = Field(default_factory=HTTPDescription)


class APIGatewayV2HTTPRequest(EventModel):
    """API Gateway HTTP API (v2 payload format) event."""

    version: Optional[str] = None
    route_key: Optional[str] = None
    raw_path: Optional[str] = None
    raw_query_string: Optional[str] = None
    cookies: Optional[List[str]] = None
    headers: Optional[Dict[str, str]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    path_parameters: Optional[Dict[str, str]] = None
    stage_variables: Optional[Dict[str, str]] = None
    request_context: APIGatewayV2HTTPRequestContext = Field(
        default_factory=APIGatewayV2HTTPRequestContext
    )
    body: Optional[str] = None
    is_base64_encoded: bool = False


class LambdaFunctionURLRequestContext(EventModel):
    """Request context of a Lambda Function URL event."""

    account_id: Optional[str] = None
    request_id: Optional[str] = None
    authorizer: Optional[Dict[str, Any]] = None
    api_id: Optional[str] = None
    domain_name: Optional[str] = None
    domain_prefix: Optional[str] = None
    time: Optional[str] = None
    time_epoch: Optional[int] = None
    http: HTTPDescription = Field(default_factory=HTTPDescription)


class LambdaFunctionURLRequest(EventModel):
    """Lambda Function URL invocation event."""

    version: Optional[str] = None
    raw_path: Optional[str] = None
    raw_query_string: Optional[str] = None
    cookies: Optional[List[str]] = None
    headers: Optional[Dict[str, str]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    request_context: LambdaFunctionURLRequestContext = Field(
        default_factory=LambdaFunctionURLRequestContext
    )
    body: Optional[str] = None
    is_base64_encoded: bool = False


# ---------------------------------------------------------------------------
# Record-based events
# ---------------------------------------------------------------------------


class SNSEntity(PascalEventModel):
    """The ``Sns`` block of an SNS record."""

    signature: Optional[str] = None
    message_id: Optional[str] = None
    type: Optional[str] = None
    topic_arn: Optional[str] = None
    message_attributes: Dict[str, Any] = Field(default_factory=dict)
    signature_version: Optional[str] = None
    timestamp: Optional[str] = None
    signing_cert_url: Optional[str] = None
    message: str = ""
    unsubscribe_url: Optional[str] = None
    subject: Optional[str] = None


class SNSEventRecord(PascalEventModel):
    """One SNS delivery."""

    event_version: Optional[str] = None
    event_subscription_arn: Optional[str] = None
    event_source: Optional[str] = None
    sns: SNSEntity


class SNSEvent(EventModel):
    """SNS notification event."""

    records: List[SNSEventRecord] = Field(alias="Records")


class SQSMessage(EventModel):
    """One SQS message delivered by an event source mapping."""

    message_id: str
    receipt_handle: Optional[str] = None
    body: str = ""
    md5_of_body: Optional[str] = None
    md5_of_message_attributes: Optional[str] = None
    attributes: Dict[str, str] = Field(default_factory=dict)
    message_attributes: Dict[str, Any] = Field(default_factory=dict)
    event_source_arn: Optional[str] = Field(None, alias="eventSourceARN")
    event_source: Optional[str] = None
    aws_region: Optional[str] = None


class SQSEvent(EventModel):
    """SQS batch event."""

    records: List[SQSMessage] = Field(alias="Records")


class SimpleEmailMail(EventModel):
    """``ses.mail`` block."""

    timestamp: Optional[str] = None
    source: Optional[str] = None
    message_id: Optional[str] = None
    destination: List[str] = Field(default_factory=list)
    headers_truncated: Optional[bool] = None
    headers: List[Dict[str, str]] = Field(default_factory=list)
    common_headers: Dict[str, Any] = Field(default_factory=dict)


class SimpleEmailReceipt(EventModel):
    """``ses.receipt`` block."""

    timestamp: Optional[str] = None
    processing_time_millis: Optional[int] = None
    recipients: List[str] = Field(default_factory=list)
    spam_verdict: Optional[Dict[str, str]] = None
    virus_verdict: Optional[Dict[str, str]] = None
    spf_verdict: Optional[Dict[str, str]] = None
    dkim_verdict: Optional[Dict[str, str]] = None
    dmarc_verdict: Optional[Dict[str, str]] = None
    action: Optional[Dict[str, Any]] = None


class SimpleEmailService(EventModel):
    """``ses`` block of an SES record."""

    mail: SimpleEmailMail = Field(default_factory=SimpleEmailMail)
    receipt: SimpleEmailReceipt = Field(default_factory=SimpleEmailReceipt)


class SimpleEmailRecord(EventModel):
    """One SES receipt record."""

    event_version: Optional[str] = None
    event_source: Optional[str] = None
    ses: SimpleEmailService


class SimpleEmailEvent(EventModel):
    """SES receipt rule event."""

    records: List[SimpleEmailRecord] = Field(alias="Records")


# ---------------------------------------------------------------------------
# EventBridge
# ---------------------------------------------------------------------------


class EventBridgeEvent(EventModel):
    """EventBridge rule or scheduler event."""

    version: Optional[str] = None
    id: Optional[str] = None
    detail_type: Optional[str] = Field(None, alias="detail-type")
    source: str
    account_id: Optional[str] = Field(None, alias="account")
    time: Optional[str] = None
    region: Optional[str] = None
    resources: List[str] = Field(default_factory=list)
    detail: Any = None
