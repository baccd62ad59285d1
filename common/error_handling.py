"""ABOUTME: Shared error handling utilities for the weather MCP tools.

Provides standardized error codes, result creation functions, and HTTP status
code helpers so every failure branch surfaces as a single text block instead of
a transport-level fault.
"""

from typing import Optional, Dict, Any
from mcp.types import TextContent, CallToolResult


# =============================================================================
# Error Code Constants
# =============================================================================

# Input validation errors
ERROR_VALIDATION_FAILED: str = "validation_failed"

# Upstream errors
ERROR_UPSTREAM_UNAVAILABLE: str = "upstream_unavailable"
ERROR_NETWORK_ERROR: str = "network_error"
ERROR_BAD_STATUS: str = "bad_status"
ERROR_BAD_CONTENT_TYPE: str = "bad_content_type"
ERROR_PARSE_FAILED: str = "parse_failed"

# Data shape errors (upstream answered, but a required field is absent)
ERROR_NO_FORECAST_URL: str = "no_forecast_url"

# General errors
ERROR_UNEXPECTED: str = "unexpected_error"


# =============================================================================
# HTTP Status Code Helpers
# =============================================================================

class HTTPStatusCodes:
    """Helper methods for HTTP status code checks.

    Provides semantic methods to check HTTP status codes instead of
    hardcoding numeric values throughout the codebase.
    """

    @staticmethod
    def is_not_found(status_code: int) -> bool:
        """Check if status code indicates resource not found.

        The NWS /points endpoint answers 404 for coordinates outside its grid.
        """
        return status_code == 404

    @staticmethod
    def is_client_error(status_code: int) -> bool:
        """Check if status code indicates client error (4xx)."""
        return 400 <= status_code < 500

    @staticmethod
    def is_server_error(status_code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= status_code < 600


# =============================================================================
# Result Creation Functions
# =============================================================================

def create_error_result(
    error_message: str,
    error_code: str,
    error_type: str = "error",
    additional_metadata: Optional[Dict[str, Any]] = None
) -> CallToolResult:
    """Create standardized error CallToolResult.

    The text part is the user-facing sentence exactly as given; the error code
    and type travel in metadata for clients that want to branch on them.

    Args:
        error_message: Human-readable error message for users and LLMs
        error_code: Machine-readable error code (use ERROR_* constants)
        error_type: Error category/type (e.g., "upstream_error", "data_shape_error")
        additional_metadata: Additional context for debugging (optional)

    Returns:
        CallToolResult with standardized error format

    Example:
        result = create_error_result(
            error_message="Failed to retrieve weather alerts data for CA.",
            error_code=ERROR_UPSTREAM_UNAVAILABLE,
            error_type="upstream_error",
            additional_metadata={"state": "CA"}
        )
    """
    metadata = {
        "error_type": error_type,
        "error_code": error_code,
    }

    if additional_metadata:
        metadata.update(additional_metadata)

    return CallToolResult(
        content=[TextContent(type="text", text=error_message)],
        isError=True,
        metadata=metadata
    )


def create_validation_error(
    field_name: str,
    error_message: str,
    field_value: Any = None
) -> CallToolResult:
    """Create a validation error for invalid input fields.

    FastMCP rejects schema violations before a tool runs; this covers callers
    that invoke the tool coroutines directly.

    Args:
        field_name: Name of the field that failed validation
        error_message: Human-readable description of the validation failure
        field_value: The invalid value that was provided (optional, for debugging)

    Returns:
        CallToolResult with validation error
    """
    metadata = {"field_name": field_name}
    if field_value is not None:
        metadata["field_value"] = field_value

    return create_error_result(
        error_message=f"Invalid {field_name}: {error_message}",
        error_code=ERROR_VALIDATION_FAILED,
        error_type="validation_error",
        additional_metadata=metadata
    )


def create_upstream_error(
    error_message: str,
    url: str,
    cause: Optional[str] = None,
    status_code: Optional[int] = None,
    **context: Any
) -> CallToolResult:
    """Create an error for an unavailable upstream response.

    Args:
        error_message: Sentence shown to the caller
        url: The upstream URL that could not be used
        cause: Failure cause code (network_error, bad_status, ...) (optional)
        status_code: HTTP status code if the upstream answered (optional)
        **context: Extra metadata (state, location, coordinates)

    Returns:
        CallToolResult with upstream error
    """
    metadata: Dict[str, Any] = {"url": url}
    if cause is not None:
        metadata["cause"] = cause
    if status_code is not None:
        metadata["status_code"] = status_code
    metadata.update(context)

    return create_error_result(
        error_message=error_message,
        error_code=ERROR_UPSTREAM_UNAVAILABLE,
        error_type="upstream_error",
        additional_metadata=metadata
    )


def create_data_shape_error(
    error_message: str,
    missing_field: str,
    **context: Any
) -> CallToolResult:
    """Create an error for a successful response missing a required field.

    Args:
        error_message: Sentence shown to the caller
        missing_field: Name of the absent upstream field
        **context: Extra metadata

    Returns:
        CallToolResult with data shape error
    """
    metadata: Dict[str, Any] = {"missing_field": missing_field}
    metadata.update(context)

    return create_error_result(
        error_message=error_message,
        error_code=ERROR_NO_FORECAST_URL,
        error_type="data_shape_error",
        additional_metadata=metadata
    )


def create_info_result(
    message: str,
    additional_metadata: Optional[Dict[str, Any]] = None
) -> CallToolResult:
    """Create a neutral informational result (e.g. zero alerts found).

    Empty results are not errors, so isError stays False.
    """
    metadata: Dict[str, Any] = {"empty": True}
    if additional_metadata:
        metadata.update(additional_metadata)

    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        metadata=metadata
    )
