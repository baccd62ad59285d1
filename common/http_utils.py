"""ABOUTME: HTTP client utilities for MCP tools - async HTTP operations with standard error handling."""

from typing import Optional, Dict, Any
import httpx

from .error_handling import HTTPStatusCodes


async def safe_http_get(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    follow_redirects: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.Response:
    """Perform async HTTP GET with standard error handling.

    Raises httpx.HTTPStatusError for any non-2xx response and
    httpx.RequestError when the request itself fails. When timeout is None
    the httpx client default applies.
    """
    client_kwargs: Dict[str, Any] = {"follow_redirects": follow_redirects}
    if timeout is not None:
        client_kwargs["timeout"] = timeout
    if transport is not None:
        client_kwargs["transport"] = transport

    async with httpx.AsyncClient(**client_kwargs) as client:
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        return response


def describe_http_error(status_code: int) -> str:
    """Map HTTP status code to a short cause description for logs."""
    if HTTPStatusCodes.is_not_found(status_code):
        return "not found"
    elif HTTPStatusCodes.is_server_error(status_code):
        return "upstream server error"
    elif HTTPStatusCodes.is_client_error(status_code):
        return "rejected by upstream"
    else:
        return "unexpected status"


__all__ = [
    "safe_http_get",
    "describe_http_error",
    "HTTPStatusCodes",
]
