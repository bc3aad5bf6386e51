"""Custom exceptions for the IntelliSec backend.

All exceptions carry a ``code``, ``message`` and ``details`` so they can be
mapped to JSON error responses by :mod:`intellisec.errors`.
"""

from intellisec.exceptions.base import (
    IntelliSecError,
    ValidationError,
    MalformedRequestError,
    PayloadTooLargeError,
    ResourceNotFoundError,
    RouteNotFoundError,
    MethodNotAllowedError,
    ConfigurationError,
    AnalysisError,
)

__all__ = [
    "IntelliSecError",
    "ValidationError",
    "MalformedRequestError",
    "PayloadTooLargeError",
    "ResourceNotFoundError",
    "RouteNotFoundError",
    "MethodNotAllowedError",
    "ConfigurationError",
    "AnalysisError",
]
