"""Structured exception classes for negotiation middleware.

A failed negotiation is not an exception: it is answered with a
406 response. The classes here cover faults in how the middleware is
configured or composed.
"""

import json
from typing import Any, Dict, Optional


class NegotiationMiddlewareError(Exception):
    """Base exception for all negotiation middleware errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(NegotiationMiddlewareError):
    """Raised when negotiation settings cannot be loaded.

    :param message: Description of the configuration problem
    :param errors: Optional list of field-level validation errors
    """

    def __init__(self, message: str, errors: Optional[list] = None):
        details = {}
        if errors:
            details["errors"] = errors
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class PipelineError(NegotiationMiddlewareError):
    """Raised when a middleware pipeline is composed incorrectly."""

    def __init__(self, message: str, middleware: Any = None):
        details = {}
        if middleware is not None:
            details["middleware"] = repr(middleware)
        super().__init__(message=message, code="PIPELINE_ERROR", details=details)


__all__ = [
    "NegotiationMiddlewareError",
    "ConfigurationError",
    "PipelineError",
]
