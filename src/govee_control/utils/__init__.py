"""Utility modules for govee-control."""

from govee_control.utils.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorResponse,
    GoveeControlError,
    InvalidColorFormat,
    MissingParameter,
    ProtocolError,
    TransportError,
    UnknownEvent,
    classify_exception,
    generate_request_id,
)

__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "ErrorResponse",
    "GoveeControlError",
    "InvalidColorFormat",
    "MissingParameter",
    "ProtocolError",
    "TransportError",
    "UnknownEvent",
    "classify_exception",
    "generate_request_id",
]
