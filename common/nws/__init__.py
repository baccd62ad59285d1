"""ABOUTME: National Weather Service API infrastructure - models, client, and formatters."""

from .client import NWSClient, UpstreamResult, FetchFailure
from .models import (
    AlertFeature,
    AlertsResponse,
    ForecastPeriod,
    ForecastResponse,
    PointsResponse,
)

__all__ = [
    "NWSClient",
    "UpstreamResult",
    "FetchFailure",
    "AlertFeature",
    "AlertsResponse",
    "ForecastPeriod",
    "ForecastResponse",
    "PointsResponse",
]
