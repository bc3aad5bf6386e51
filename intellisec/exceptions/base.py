"""Exception classes for the IntelliSec backend.

Every error raised by the service carries a machine-readable ``code``, a
human-readable ``message`` and optional structured ``details`` so the web
layer can render a consistent JSON error body without inspecting messages.
"""

from typing import Any, Dict, Optional


class IntelliSecError(Exception):
    """Base for all IntelliSec errors."""

    def __init__(
        self,
        code: str = "INTELLISEC_ERROR",
        message: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message or code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ValidationError(IntelliSecError):
    """Raised when caller-supplied data fails validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class MalformedRequestError(ValidationError):
    """Raised when a request body cannot be parsed or has the wrong shape."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        IntelliSecError.__init__(self, code="MALFORMED_REQUEST", message=message, details=details)


class PayloadTooLargeError(IntelliSecError):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, limit: int, received: int):
        super().__init__(
            code="PAYLOAD_TOO_LARGE",
            message=f"Request body exceeds {limit} bytes",
            details={"limit": limit, "received": received},
        )


class ResourceNotFoundError(IntelliSecError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="RESOURCE_NOT_FOUND", message=message, details=details)


class RouteNotFoundError(ResourceNotFoundError):
    """Raised when no route matches the request path."""

    def __init__(self, method: str, path: str):
        IntelliSecError.__init__(
            self,
            code="NOT_FOUND",
            message=f"No route for {method} {path}",
            details={"method": method, "path": path},
        )


class MethodNotAllowedError(IntelliSecError):
    """Raised when the path exists but not for the requested method."""

    def __init__(self, method: str, path: str):
        super().__init__(
            code="METHOD_NOT_ALLOWED",
            message=f"Method {method} not allowed for {path}",
            details={"method": method, "path": path},
        )


class ConfigurationError(IntelliSecError):
    """Raised when startup configuration is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class AnalysisError(IntelliSecError):
    """Raised by a text analyzer when it cannot produce a result."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="ANALYSIS_ERROR", message=message, details=details)
