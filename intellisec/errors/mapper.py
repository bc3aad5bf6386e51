"""Error response mapping for the web interface.

Converts structured IntelliSecError exceptions into standardized JSON error
responses with machine-readable error codes and recovery strategies.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from pydantic import ValidationError as PydanticValidationError

from intellisec.exceptions import (
    IntelliSecError,
    ValidationError,
    PayloadTooLargeError,
    ResourceNotFoundError,
    MethodNotAllowedError,
)


@dataclass
class ErrorResponse:
    """Structured error response for API consumers."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    recovery_strategy: Optional[str] = None


# Recovery strategy templates for common error types
RECOVERY_STRATEGIES: Dict[str, str] = {
    "VALIDATION_ERROR": "Review the error message and adjust the request parameters accordingly.",
    "MALFORMED_REQUEST": "Send a JSON object body, e.g. {\"text\": \"...\"}, or no body at all.",
    "PAYLOAD_TOO_LARGE": "Reduce the size of the request body and try again.",
    "RESOURCE_NOT_FOUND": "Verify the resource exists.",
    "NOT_FOUND": "Check the request path. Available endpoints: /health, /api/info, /api/llm/scan.",
    "METHOD_NOT_ALLOWED": "Use the HTTP method documented for this endpoint.",
    "ANALYSIS_ERROR": "The text analyzer failed to process the input.",
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def get_recovery_strategy(error_code: str) -> str:
    """Get recovery strategy for an error code.

    Args:
        error_code: The error code

    Returns:
        Recovery strategy string
    """
    return RECOVERY_STRATEGIES.get(
        error_code, "Review the error message, adjust the request, and try again."
    )


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse.

    Args:
        error: The exception to convert

    Returns:
        ErrorResponse with structured error information
    """
    if isinstance(error, IntelliSecError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details if error.details else None,
            recovery_strategy=get_recovery_strategy(error.code),
        )

    if isinstance(error, PydanticValidationError):
        errors = error.errors(include_url=False, include_context=False, include_input=False)
        return ErrorResponse(
            error_code="MALFORMED_REQUEST",
            message=f"Validation failed: {len(errors)} error(s)",
            details={
                "errors": [
                    {"loc": [str(part) for part in e["loc"]], "msg": e["msg"], "type": e["type"]}
                    for e in errors
                ]
            },
            recovery_strategy=get_recovery_strategy("MALFORMED_REQUEST"),
        )

    # Anything else is an internal fault; the message is not echoed to callers
    return ErrorResponse(
        error_code="INTERNAL_ERROR",
        message=INTERNAL_ERROR_MESSAGE,
        details=None,
        recovery_strategy="An unexpected error occurred. Please report this issue if it persists.",
    )


def map_error_for_web(error: Exception) -> Dict[str, Any]:
    """Map exception to web API response format.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for a Starlette JSONResponse
    """
    response = map_exception_to_response(error)

    return {
        "error": response.message,
        "code": response.error_code,
        "details": response.details,
        "recovery": response.recovery_strategy,
    }


def get_http_status_for_error(error: Exception) -> int:
    """Determine appropriate HTTP status code for an error.

    Args:
        error: The exception

    Returns:
        HTTP status code
    """
    if isinstance(error, ResourceNotFoundError):
        return 404
    elif isinstance(error, MethodNotAllowedError):
        return 405
    elif isinstance(error, PayloadTooLargeError):
        return 413
    elif isinstance(error, (ValidationError, PydanticValidationError)):
        return 400
    else:
        return 500
