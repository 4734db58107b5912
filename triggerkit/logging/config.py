"""
JSON logging for Lambda invocations.

One JSON object per line on stdout, which CloudWatch Logs ingests as one
event each. Records emitted while handling an invocation carry the Lambda
request id, and every record carries the function name and version the
runtime exposes.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from triggerkit.config import settings


class JSONFormatter(logging.Formatter):
    """
    Formatter that renders log records as JSON.

    Each log record is formatted as a JSON object with the following fields:
    - timestamp: ISO 8601 timestamp in UTC
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - function_name / function_version: Lambda function (when known)
    - aws_request_id: Request ID of the invocation (if present in extra)
    - Additional fields from the `context` dict passed in `extra`

    Args:
        function_name: Lambda function name (defaults to AWS_LAMBDA_FUNCTION_NAME)
        function_version: Lambda function version (defaults to AWS_LAMBDA_FUNCTION_VERSION)
    """

    def __init__(
        self,
        function_name: str | None = None,
        function_version: str | None = None,
    ) -> None:
        super().__init__()
        self.function_name = function_name or settings.aws_lambda_function_name
        self.function_version = function_version or settings.aws_lambda_function_version

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.function_name:
            log_data["function_name"] = self.function_name
        if self.function_version:
            log_data["function_version"] = self.function_version

        request_id = getattr(record, "aws_request_id", None)
        if request_id:
            log_data["aws_request_id"] = request_id

        if hasattr(record, "context"):
            log_data.update(record.context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # File location only at DEBUG level
        if record.levelno == logging.DEBUG:
            log_data["file"] = record.pathname
            log_data["line"] = record.lineno
            log_data["function"] = record.funcName

        return json.dumps(log_data, default=str)


def configure_logging(level: str | None = None) -> None:
    """
    Install the JSON formatter on the root logger.

    Safe to call on every cold start; existing root handlers are replaced
    so warm invocations never log twice.

    Args:
        level: Log level name (defaults to the LOG_LEVEL setting)
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging configured",
        extra={"context": {"log_level": level_name}},
    )


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (typically ``__name__``)."""
    return logging.getLogger(name)
