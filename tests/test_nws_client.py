"""ABOUTME: Tests for the NWS API client.

Tests URL construction, request headers, response parsing, and that every
failure mode collapses into an UpstreamResult instead of an exception.
"""

import httpx
import pytest

from common.nws import FetchFailure, NWSClient, UpstreamResult
from common.nws.client import GEO_JSON_MEDIA_TYPE
from common.nws.models import AlertsResponse, ForecastResponse, PointsResponse
from conftest import (
    ALERTS_PATH,
    BASE_URL,
    NYC_FORECAST_PATH,
    NYC_FORECAST_URL,
    NYC_POINTS_PATH,
    FakeNWS,
)


@pytest.fixture
def fake():
    return FakeNWS()


class TestURLs:
    """Tests for endpoint URL construction."""

    def test_points_url_uses_four_decimals(self):
        client = NWSClient(base_url=BASE_URL)
        assert client.points_url(40.71, -74.0) == f"{BASE_URL}/points/40.7100,-74.0000"

    def test_alerts_url(self):
        client = NWSClient(base_url=BASE_URL)
        assert client.alerts_url("CA") == f"{BASE_URL}/alerts/active?area=CA"

    def test_trailing_slash_stripped(self):
        client = NWSClient(base_url=BASE_URL + "/")
        assert client.alerts_url("NY") == f"{BASE_URL}/alerts/active?area=NY"


class TestFetchSuccess:
    """Tests for successful fetches."""

    @pytest.mark.asyncio
    async def test_parses_alerts(self, fake, alert_features):
        fake.add(ALERTS_PATH, {"features": alert_features})

        result = await fake.client().fetch_alerts("CA")

        assert result.ok
        assert isinstance(result.value, AlertsResponse)
        assert [f.properties.event for f in result.value.features] == ["Red Flag Warning", "Wind Advisory"]
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_sends_identifying_headers(self, fake):
        fake.add(ALERTS_PATH, {"features": []})

        await NWSClient(base_url=BASE_URL, user_agent="test-agent/2.0", transport=fake.transport()).fetch_alerts("CA")

        request = fake.requests[0]
        assert request.headers["user-agent"] == "test-agent/2.0"
        assert request.headers["accept"] == GEO_JSON_MEDIA_TYPE
        assert request.url.params["area"] == "CA"

    @pytest.mark.asyncio
    async def test_content_type_with_parameters_accepted(self, fake):
        fake.add(ALERTS_PATH, {"features": []}, content_type="application/geo+json; charset=utf-8")

        result = await fake.client().fetch_alerts("CA")

        assert result.ok

    @pytest.mark.asyncio
    async def test_parses_points(self, fake, nyc_points_payload):
        fake.add(NYC_POINTS_PATH, nyc_points_payload)

        result = await fake.client().fetch_points(40.71, -74.0)

        assert isinstance(result.value, PointsResponse)
        assert result.value.forecast_url == NYC_FORECAST_URL
        assert result.value.location_name == "New York, NY"

    @pytest.mark.asyncio
    async def test_parses_forecast(self, fake, forecast_payload):
        fake.add(NYC_FORECAST_PATH, forecast_payload)

        result = await fake.client().fetch_forecast(NYC_FORECAST_URL)

        assert isinstance(result.value, ForecastResponse)
        periods = result.value.properties.periods
        assert [p.number for p in periods] == [1, 2, 3]
        assert periods[0].probabilityOfPrecipitation.value is None
        assert periods[1].probabilityOfPrecipitation.value == 20

    @pytest.mark.asyncio
    async def test_missing_features_defaults_to_empty(self, fake):
        fake.add(ALERTS_PATH, {"type": "FeatureCollection"})

        result = await fake.client().fetch_alerts("CA")

        assert result.ok

    @pytest.mark.asyncio
    async def test_null_alert_entries_parse(self, fake):
        fake.add(ALERTS_PATH, {"features": [None, {"properties": None}, {"properties": {"event": "Flood Watch"}}]})

        result = await fake.client().fetch_alerts("CA")

        assert result.ok
        assert [f.properties for f in result.value.features][0] is None
        assert result.value.features[1].properties.event == "Flood Watch"

    @pytest.mark.asyncio
    async def test_null_relative_location_properties_parse(self, fake):
        fake.add(NYC_POINTS_PATH, {"properties": {"forecast": NYC_FORECAST_URL, "relativeLocation": {"properties": None}}})

        result = await fake.client().fetch_points(40.71, -74.00)

        assert result.ok
        assert result.value.forecast_url == NYC_FORECAST_URL
        assert result.value.location_name is None
        assert result.value.features == []


class TestFetchFailures:
    """Tests that each failure cause is reported, never raised."""

    @pytest.mark.asyncio
    async def test_bad_status(self, fake):
        fake.add(ALERTS_PATH, {"title": "Service Unavailable"}, status_code=503)

        result = await fake.client().fetch_alerts("CA")

        assert not result.ok
        assert result.failure == FetchFailure.BAD_STATUS
        assert result.status_code == 503
        assert "503" in result.detail

    @pytest.mark.asyncio
    async def test_not_found_keeps_status_code(self, fake):
        result = await fake.client().fetch_points(51.51, -0.13)

        assert result.failure == FetchFailure.BAD_STATUS
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_wrong_content_type(self, fake):
        fake.add(ALERTS_PATH, {"features": []}, content_type="application/json")

        result = await fake.client().fetch_alerts("CA")

        assert result.failure == FetchFailure.BAD_CONTENT_TYPE
        assert "application/json" in result.detail

    @pytest.mark.asyncio
    async def test_invalid_json(self, fake):
        fake.add(ALERTS_PATH, body=b"<html>maintenance</html>")

        result = await fake.client().fetch_alerts("CA")

        assert result.failure == FetchFailure.PARSE_ERROR

    @pytest.mark.asyncio
    async def test_forecast_without_periods_is_parse_error(self, fake):
        fake.add(NYC_FORECAST_PATH, {"properties": {"units": "us"}})

        result = await fake.client().fetch_forecast(NYC_FORECAST_URL)

        assert result.failure == FetchFailure.PARSE_ERROR
        assert "ForecastResponse" in result.detail

    @pytest.mark.asyncio
    async def test_network_error(self, fake):
        fake.fail(ALERTS_PATH, httpx.ConnectError("connection refused"))

        result = await fake.client().fetch_alerts("CA")

        assert result.failure == FetchFailure.NETWORK_ERROR
        assert result.status_code is None
        assert "ConnectError" in result.detail

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self, fake):
        fake.fail(ALERTS_PATH, httpx.ReadTimeout("timed out"))

        result = await fake.client().fetch_alerts("CA")

        assert result.failure == FetchFailure.NETWORK_ERROR


class TestUpstreamResult:
    """Tests for the result variant helpers."""

    def test_success(self):
        result = UpstreamResult.success("https://x", AlertsResponse(), status_code=200)
        assert result.ok
        assert result.describe().startswith("OK (200)")

    def test_unavailable(self):
        result = UpstreamResult.unavailable("https://x", FetchFailure.BAD_STATUS, "NWS API Error: 500", 500)
        assert not result.ok
        assert result.value is None
        assert result.describe() == "bad_status: NWS API Error: 500 for URL: https://x"
