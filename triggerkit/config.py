"""Configuration management using Pydantic Settings."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LAMBDA_PLATFORM_NAMES = frozenset({"lambda", "aws_lambda", "aws lambda", "aws-lambda"})


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Only load .env file in development (not Lambda/production)
        env_file=".env" if os.getenv("AWS_EXECUTION_ENV") is None else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS Configuration
    aws_region: str = "us-east-2"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None  # Required for temporary credentials

    @field_validator(
        "aws_access_key_id", "aws_secret_access_key", "aws_session_token", mode="before"
    )
    @classmethod
    def convert_empty_string_to_none(cls, v):
        """Convert empty strings to None so boto3 can use the IAM role in Lambda."""
        if v is None:
            return None
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    # Content store (S3)
    s3_endpoint_url: str | None = None
    s3_bucket: str | None = None

    # Message queue (SQS)
    sqs_endpoint_url: str | None = None
    sqs_queue_url: str | None = None

    # Application Configuration
    log_level: str = "INFO"

    # Platform indicator consulted by is_running_on_lambda()
    serverless_platform: str = ""

    # Set by the Lambda runtime, stamped on every log record
    aws_lambda_function_name: str | None = None
    aws_lambda_function_version: str | None = None


def is_running_on_lambda(current: Settings | None = None) -> bool:
    """
    Report whether the serverless platform indicator names AWS Lambda.

    Args:
        current: Settings to inspect (reads the environment if None)

    Returns:
        True if SERVERLESS_PLATFORM is lambda, aws_lambda, "aws lambda" or aws-lambda
    """
    current = current or Settings()
    return current.serverless_platform.strip().lower() in LAMBDA_PLATFORM_NAMES


# Global settings instance
settings = Settings()
