"""ABOUTME: Pytest configuration and shared fixtures for the weather MCP server tests.

Provides sample NWS payloads and a fake NWS API served through
httpx.MockTransport, so no test touches the network.
"""

import json
from typing import Any, Dict, List, Optional, Union
from urllib.parse import unquote

import httpx
import pytest

import weather
from common.nws import NWSClient
from common.nws.client import GEO_JSON_MEDIA_TYPE

BASE_URL = "https://api.weather.gov"
NYC_POINTS_PATH = "/points/40.7100,-74.0000"
LONDON_POINTS_PATH = "/points/51.5100,-0.1300"
NYC_FORECAST_URL = f"{BASE_URL}/gridpoints/OKX/33,35/forecast"
NYC_FORECAST_PATH = "/gridpoints/OKX/33,35/forecast"
ALERTS_PATH = "/alerts/active"


def geo_json_response(
    payload: Any = None,
    status_code: int = 200,
    content_type: str = GEO_JSON_MEDIA_TYPE,
    body: Optional[bytes] = None
) -> httpx.Response:
    """Build a response the way api.weather.gov sends it."""
    content = body if body is not None else json.dumps(payload).encode()
    return httpx.Response(status_code, headers={"content-type": content_type}, content=content)


class FakeNWS:
    """Route table standing in for api.weather.gov.

    Routes are keyed by URL path. A route is either a response or an exception
    instance raised as if the network failed. Every request is recorded.
    """

    def __init__(self):
        self.routes: Dict[str, Union[httpx.Response, Exception]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, payload: Any = None, **kwargs) -> None:
        self.routes[path] = geo_json_response(payload, **kwargs)

    def fail(self, path: str, error: Exception) -> None:
        self.routes[path] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(unquote(request.url.path))
        if route is None:
            return geo_json_response({"title": "Not Found", "status": 404}, status_code=404)
        if isinstance(route, Exception):
            raise route
        # Responses are single-use once read; hand out a fresh copy each time
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> NWSClient:
        return NWSClient(base_url=BASE_URL, transport=self.transport())


@pytest.fixture
def fake_nws(monkeypatch):
    """Fake NWS API wired into the weather server's shared client.

    Returns:
        FakeNWS with an empty route table
    """
    fake = FakeNWS()
    monkeypatch.setattr(weather, "nws_client", fake.client())
    return fake


@pytest.fixture
def alert_features():
    """Fixture providing two alert features in upstream order."""
    return [
        {
            "properties": {
                "event": "Red Flag Warning",
                "areaDesc": "Santa Clarita Valley",
                "severity": "Severe",
                "status": "Actual",
                "headline": "Red Flag Warning issued October 17 by NWS Los Angeles",
            }
        },
        {
            "properties": {
                "event": "Wind Advisory",
                "areaDesc": "San Diego County Mountains",
                "severity": "Moderate",
                "status": "Actual",
                "headline": "Wind Advisory issued October 17 by NWS San Diego",
            }
        },
    ]


@pytest.fixture
def nyc_points_payload():
    """Fixture providing /points data for New York City."""
    return {
        "properties": {
            "forecast": NYC_FORECAST_URL,
            "relativeLocation": {
                "properties": {"city": "New York", "state": "NY"}
            },
        }
    }


@pytest.fixture
def forecast_periods():
    """Fixture providing three forecast periods in upstream order."""
    return [
        {
            "number": 1,
            "name": "Tonight",
            "startTime": "2026-10-17T18:00:00-04:00",
            "endTime": "2026-10-18T06:00:00-04:00",
            "isDaytime": False,
            "temperature": 52,
            "temperatureUnit": "F",
            "temperatureTrend": None,
            "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": None},
            "windSpeed": "5 mph",
            "windDirection": "NW",
            "shortForecast": "Mostly Clear",
            "detailedForecast": "Mostly clear, with a low around 52.",
        },
        {
            "number": 2,
            "name": "Saturday",
            "startTime": "2026-10-18T06:00:00-04:00",
            "endTime": "2026-10-18T18:00:00-04:00",
            "isDaytime": True,
            "temperature": 64,
            "temperatureUnit": "F",
            "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": 20},
            "windSpeed": "5 to 10 mph",
            "windDirection": "W",
            "shortForecast": "Sunny",
        },
        {
            "number": 3,
            "name": "Saturday Night",
            "startTime": "2026-10-18T18:00:00-04:00",
            "endTime": "2026-10-19T06:00:00-04:00",
            "isDaytime": False,
            "temperature": 49,
            "temperatureUnit": "F",
            "windSpeed": "5 mph",
            "windDirection": "SW",
            "shortForecast": "Partly Cloudy",
        },
    ]


@pytest.fixture
def forecast_payload(forecast_periods):
    """Fixture providing a forecast document wrapping forecast_periods."""
    return {
        "properties": {
            "updated": "2026-10-17T19:02:11+00:00",
            "units": "us",
            "elevation": {"unitCode": "wmoUnit:m", "value": 10.06},
            "periods": forecast_periods,
        }
    }
