"""ABOUTME: Common MCP server utilities and shared infrastructure."""

from .mcp_base import MCPServerBase
from .error_handling import (
    # Error code constants
    ERROR_VALIDATION_FAILED,
    ERROR_UPSTREAM_UNAVAILABLE,
    ERROR_NETWORK_ERROR,
    ERROR_BAD_STATUS,
    ERROR_BAD_CONTENT_TYPE,
    ERROR_PARSE_FAILED,
    ERROR_NO_FORECAST_URL,
    ERROR_UNEXPECTED,
    # HTTP status code helpers
    HTTPStatusCodes,
    # Result creation functions
    create_error_result,
    create_validation_error,
    create_upstream_error,
    create_data_shape_error,
    create_info_result,
)

__all__ = [
    "MCPServerBase",
    # Error code constants
    "ERROR_VALIDATION_FAILED",
    "ERROR_UPSTREAM_UNAVAILABLE",
    "ERROR_NETWORK_ERROR",
    "ERROR_BAD_STATUS",
    "ERROR_BAD_CONTENT_TYPE",
    "ERROR_PARSE_FAILED",
    "ERROR_NO_FORECAST_URL",
    "ERROR_UNEXPECTED",
    # HTTP status code helpers
    "HTTPStatusCodes",
    # Result creation functions
    "create_error_result",
    "create_validation_error",
    "create_upstream_error",
    "create_data_shape_error",
    "create_info_result",
]
