"""Shared aioboto3 client configuration for the AWS wrappers."""

from typing import Any

import aioboto3

from triggerkit.config import Settings, settings
from triggerkit.logging.config import get_logger

logger = get_logger(__name__)

_CREDENTIAL_FIELDS = ("aws_access_key_id", "aws_secret_access_key", "aws_session_token")


def get_client_config(
    endpoint_url: str | None = None,
    current: Settings | None = None,
) -> dict[str, Any]:
    """
    Build aioboto3 client parameters based on environment.

    Inside Lambda only the region is set and the execution role supplies
    credentials. For LocalStack the endpoint override and explicit
    credentials are passed through.

    Args:
        endpoint_url: Service endpoint override (LocalStack)
        current: Settings to read (defaults to the global settings)

    Returns:
        Dictionary of client keyword arguments
    """
    current = current or settings
    config: dict[str, Any] = {"region_name": current.aws_region}

    if endpoint_url:
        config["endpoint_url"] = endpoint_url
        logger.info(f"AWS client config: Using endpoint_url={endpoint_url}")

    # Session token is required alongside the key pair for temporary credentials
    for field in _CREDENTIAL_FIELDS:
        value = getattr(current, field)
        if value:
            config[field] = value

    if "aws_access_key_id" not in config:
        logger.debug("AWS client config: Using default credential chain")

    return config


class BaseRepository:
    """
    Base for the async AWS wrappers.

    Every call opens a short-lived client from the shared aioboto3 session,
    so an instance can be created at import time and reused across warm
    Lambda invocations.
    """

    service_name: str = ""

    def __init__(self, endpoint_url: str | None = None) -> None:
        """
        Initialize repository.

        Args:
            endpoint_url: Service endpoint override (LocalStack)
        """
        self.endpoint_url = endpoint_url
        self.session = aioboto3.Session()

    def client(self) -> Any:
        """Async context manager yielding a client for ``service_name``."""
        return self.session.client(self.service_name, **get_client_config(self.endpoint_url))
