"""Custom exception classes for triggerkit."""

from typing import Any


class TriggerKitError(Exception):
    """Base exception for triggerkit."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ClassificationError(TriggerKitError):
    """Raised when a payload does not match any known trigger shape."""

    def __init__(
        self,
        message: str = "unknown event format",
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ClassificationError.

        Args:
            message: Error message, the offending value is appended to it when
                a field is given
            field: Name of the field that failed to match
            value: The field's actual value (or the whole payload)
            details: Additional error details
        """
        error_details = details or {}
        if field:
            # The value is named even when it is None
            error_details["field"] = field
            error_details["value"] = repr(value)
            message = f"{message}: {value!r}"
        super().__init__(
            message=message,
            error_code="CLASSIFICATION_FAILED",
            details=error_details,
        )
        self.field = field


class DecodeError(TriggerKitError):
    """Raised when a body or typed event cannot be decoded."""

    def __init__(
        self,
        message: str = "Failed to decode event",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="DECODE_FAILED",
            details=details,
        )


class ParseError(TriggerKitError):
    """Raised when the synthesized request URL is malformed."""

    def __init__(
        self,
        message: str = "Failed to parse request URL",
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        error_details = details or {}
        if url is not None:
            error_details["url"] = url
        super().__init__(
            message=message,
            error_code="PARSE_FAILED",
            details=error_details,
        )


class UnsupportedOperationError(TriggerKitError):
    """Raised when an operation does not apply to the event's trigger kind."""

    def __init__(
        self,
        message: str = "Operation not supported for this trigger kind",
        kind: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize UnsupportedOperationError.

        Args:
            message: Error message
            kind: Trigger kind the operation was attempted on
            details: Additional error details
        """
        error_details = details or {}
        if kind:
            error_details["kind"] = kind
        super().__init__(
            message=message,
            error_code="UNSUPPORTED_OPERATION",
            details=error_details,
        )


class ConfigurationError(TriggerKitError):
    """Raised when a handler or wrapper is used before it is configured."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )


class ResponseReadError(TriggerKitError):
    """
    Raised when a generic response body cannot be read.

    The trigger response built so far (status code and headers, empty body)
    is kept on ``response`` so callers can still return or log it.
    """

    def __init__(
        self,
        message: str = "Failed to read response body",
        response: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="RESPONSE_READ_FAILED",
            details=details,
        )
        self.response = response
