"""ABOUTME: Async client for the National Weather Service API (api.weather.gov).

Every fetch returns an UpstreamResult instead of raising: either the parsed
response model or a failure tagged with its cause. The client does not log
failures; the tool handler that owns the diagnostic channel does that once.

No retry, backoff or explicit timeout is applied. The httpx client default
timeout is the only bound on a request.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..error_handling import (
    ERROR_NETWORK_ERROR,
    ERROR_BAD_STATUS,
    ERROR_BAD_CONTENT_TYPE,
    ERROR_PARSE_FAILED,
)
from ..http_utils import safe_http_get, describe_http_error
from ..validation import format_coordinate
from .models import AlertsResponse, ForecastResponse, PointsResponse

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

NWS_API_BASE = os.getenv("NWS_API_BASE", "https://api.weather.gov")
USER_AGENT = os.getenv("NWS_USER_AGENT", "weather-app/1.0")
GEO_JSON_MEDIA_TYPE = "application/geo+json"

T = TypeVar("T", bound=BaseModel)


class FetchFailure(str, Enum):
    """Why an upstream fetch produced no usable data."""
    NETWORK_ERROR = ERROR_NETWORK_ERROR
    BAD_STATUS = ERROR_BAD_STATUS
    BAD_CONTENT_TYPE = ERROR_BAD_CONTENT_TYPE
    PARSE_ERROR = ERROR_PARSE_FAILED


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Outcome of one upstream GET.

    Exactly one of value/failure is set. status_code is kept whenever the
    upstream answered, so callers can tell "no grid here" (404) apart from
    other failures.

    Attributes:
        url: Requested URL
        value: Parsed response model on success
        failure: Failure cause on error
        detail: Human-readable failure detail for logs
        status_code: HTTP status code if a response was received
    """
    url: str
    value: Optional[T] = None
    failure: Optional[FetchFailure] = None
    detail: str = ""
    status_code: Optional[int] = None

    @classmethod
    def success(cls, url: str, value: T, status_code: Optional[int] = None) -> "UpstreamResult[T]":
        return cls(url=url, value=value, status_code=status_code)

    @classmethod
    def unavailable(
        cls,
        url: str,
        failure: FetchFailure,
        detail: str,
        status_code: Optional[int] = None
    ) -> "UpstreamResult[T]":
        return cls(url=url, failure=failure, detail=detail, status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.failure is None and self.value is not None

    def describe(self) -> str:
        """One-line summary for the diagnostic log."""
        if self.ok:
            return f"OK ({self.status_code}) for URL: {self.url}"
        return f"{self.failure.value}: {self.detail} for URL: {self.url}"


class NWSClient:
    """Fetches and parses NWS API documents.

    Holds only read-only configuration, so a single instance is safe to share
    across concurrent tool invocations.
    """

    def __init__(
        self,
        base_url: str = NWS_API_BASE,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the client.

        Args:
            base_url: API root (default: NWS_API_BASE env var or api.weather.gov)
            user_agent: Identifying User-Agent required by the NWS API
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.transport = transport

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Accept": GEO_JSON_MEDIA_TYPE,
        }

    def points_url(self, latitude: float, longitude: float) -> str:
        return f"{self.base_url}/points/{format_coordinate(latitude)},{format_coordinate(longitude)}"

    def alerts_url(self, region_code: str) -> str:
        return f"{self.base_url}/alerts/active?area={region_code}"

    async def fetch(self, url: str, model: Type[T]) -> UpstreamResult[T]:
        """GET a URL and parse the body into model.

        Args:
            url: Absolute URL to fetch
            model: Pydantic model the JSON body must match

        Returns:
            UpstreamResult holding the parsed model or the failure cause
        """
        logger.debug(f"GET {url}")
        try:
            response = await safe_http_get(url, headers=self.headers, transport=self.transport)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            return UpstreamResult.unavailable(
                url,
                FetchFailure.BAD_STATUS,
                f"NWS API Error: {status} {e.response.reason_phrase} ({describe_http_error(status)})",
                status_code=status,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return UpstreamResult.unavailable(
                url,
                FetchFailure.NETWORK_ERROR,
                f"Error making NWS request: {type(e).__name__}: {e}",
            )

        content_type = response.headers.get("content-type", "")
        if GEO_JSON_MEDIA_TYPE not in content_type:
            return UpstreamResult.unavailable(
                url,
                FetchFailure.BAD_CONTENT_TYPE,
                f"Unexpected content type: {content_type or 'none'}",
                status_code=response.status_code,
            )

        try:
            value = model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            return UpstreamResult.unavailable(
                url,
                FetchFailure.PARSE_ERROR,
                f"Could not parse {model.__name__}: {e}",
                status_code=response.status_code,
            )

        return UpstreamResult.success(url, value, status_code=response.status_code)

    async def fetch_alerts(self, region_code: str) -> UpstreamResult[AlertsResponse]:
        return await self.fetch(self.alerts_url(region_code), AlertsResponse)

    async def fetch_points(self, latitude: float, longitude: float) -> UpstreamResult[PointsResponse]:
        return await self.fetch(self.points_url(latitude, longitude), PointsResponse)

    async def fetch_forecast(self, forecast_url: str) -> UpstreamResult[ForecastResponse]:
        return await self.fetch(forecast_url, ForecastResponse)
