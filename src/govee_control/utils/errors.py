"""Error handling utilities for govee-control.

Provides the error types raised while dispatching events and the
classification used by the CLI and Lambda adapters to report them.
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling."""

    INVALID_COLOR_FORMAT = "invalid_color_format"
    MISSING_PARAMETER = "missing_parameter"
    UNKNOWN_EVENT = "unknown_event"
    TRANSPORT_ERROR = "transport_error"
    PROTOCOL_ERROR = "protocol_error"
    CONFIGURATION_ERROR = "configuration_error"
    INVALID_INPUT = "invalid_input"
    INTERNAL_ERROR = "internal_error"


@dataclass
class ErrorResponse:
    """Structured error response for the caller-facing adapters."""

    category: ErrorCategory
    message: str
    request_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to response dict."""
        result: dict[str, Any] = {
            "error": self.message,
            "error_category": self.category.value,
        }
        if self.request_id:
            result["request_id"] = self.request_id
        if self.details:
            result["details"] = self.details
        return result


class GoveeControlError(Exception):
    """Base class for all errors raised by govee-control."""

    category: ErrorCategory = ErrorCategory.INTERNAL_ERROR


class InvalidColorFormat(GoveeControlError, ValueError):
    """Raised when a hex color string is malformed."""

    category = ErrorCategory.INVALID_COLOR_FORMAT

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid hex color: {value}")


class MissingParameter(GoveeControlError, ValueError):
    """Raised when an event is missing a required parameter."""

    category = ErrorCategory.MISSING_PARAMETER

    def __init__(self, event: str, parameter: str):
        self.event = event
        self.parameter = parameter
        super().__init__(f"Missing '{parameter}' parameter for {event} event.")


class UnknownEvent(GoveeControlError, ValueError):
    """Raised when an event name is not recognized."""

    category = ErrorCategory.UNKNOWN_EVENT

    def __init__(self, event: str):
        self.event = event
        super().__init__(f"Unknown event: {event}")


class TransportError(GoveeControlError):
    """Raised on network or HTTP failure talking to the Govee API."""

    category = ErrorCategory.TRANSPORT_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ProtocolError(GoveeControlError):
    """Raised when a Govee API response has an unexpected shape."""

    category = ErrorCategory.PROTOCOL_ERROR


class ConfigurationError(GoveeControlError):
    """Raised when required configuration is missing or invalid."""

    category = ErrorCategory.CONFIGURATION_ERROR


def generate_request_id() -> str:
    """Generate a unique request ID for the Govee API."""
    return str(uuid.uuid4())


def classify_exception(e: Exception, request_id: str | None = None) -> ErrorResponse:
    """Classify an exception into a structured error.

    Args:
        e: The exception to classify
        request_id: Optional request ID for context

    Returns:
        ErrorResponse with the matching category
    """
    details: dict[str, Any] = {}

    if isinstance(e, GoveeControlError):
        category = e.category
        message = str(e)
        if isinstance(e, TransportError) and e.status_code is not None:
            details["status_code"] = e.status_code
    elif isinstance(e, ValueError):
        category = ErrorCategory.INVALID_INPUT
        message = str(e)
    elif isinstance(e, ConnectionError):
        category = ErrorCategory.TRANSPORT_ERROR
        message = f"Connection error: {e}"
    else:
        category = ErrorCategory.INTERNAL_ERROR
        message = f"Unexpected error: {e}"

    return ErrorResponse(
        category=category,
        message=message,
        request_id=request_id,
        details=details,
    )
