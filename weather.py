"""ABOUTME: Weather MCP Server - National Weather Service alerts and forecasts.

Exposes two tools backed by the NWS API (api.weather.gov, no API key required):
- get-alerts: active weather alerts for a two-letter US state code
- get-forecast: forecast periods for a latitude/longitude inside NWS coverage

Every invocation answers with exactly one text block. Upstream failures, missing
data and empty results are all returned as text, never raised to the transport.
"""

import os

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult

from common.mcp_base import MCPServerBase
from common.validation import (
    MIN_LATITUDE,
    MAX_LATITUDE,
    MIN_LONGITUDE,
    MAX_LONGITUDE,
    AlertsRequest,
    ForecastRequest,
    StateCode,
    Latitude,
    Longitude,
    validate_region_code,
    validate_coordinate_range,
)
from common.error_handling import (
    ERROR_NO_FORECAST_URL,
    ERROR_UNEXPECTED,
    HTTPStatusCodes,
    create_error_result,
    create_validation_error,
    create_upstream_error,
    create_data_shape_error,
    create_info_result,
)
from common.nws import NWSClient, UpstreamResult
from common.nws.formatters import (
    format_alerts_report,
    format_forecast_report,
    format_location_label,
)

# Initialize MCP server with base class
server = MCPServerBase("weather")
mcp = server.get_mcp()
logger = server.get_logger()

# Shared upstream client (read-only configuration only)
nws_client = NWSClient()

# ============================================================================
# CONSTANTS
# ============================================================================

TOOL_GET_ALERTS = "get-alerts"
TOOL_GET_FORECAST = "get-forecast"

COVERAGE_HINT = "This may be because the location is outside the US coverage area."


def _log_upstream_failure(tool_name: str, result: UpstreamResult, **context) -> None:
    server.log_tool_error(tool_name, result.failure.value, result.describe(), **context)


# ============================================================================
# HANDLERS
# ============================================================================


async def alerts_for_region(request: AlertsRequest) -> CallToolResult:
    """Answer get-alerts for an already validated region code.

    Args:
        request: Validated request; state is already uppercase

    Returns:
        CallToolResult with one text block (alerts, "none found", or failure)
    """
    state_code = request.state
    result = await nws_client.fetch_alerts(state_code)

    if not result.ok:
        _log_upstream_failure(TOOL_GET_ALERTS, result, state=state_code)
        return create_upstream_error(
            f"Failed to retrieve weather alerts data for {state_code}.",
            url=result.url,
            cause=result.failure.value,
            status_code=result.status_code,
            state=state_code,
        )

    features = [f for f in result.value.features if f.properties is not None]
    if not features:
        logger.info(f"No active alerts found for {state_code}")
        return create_info_result(
            f"No active weather alerts found for {state_code}.",
            {"state": state_code, "count": 0},
        )

    server.log_tool_complete(TOOL_GET_ALERTS, state=state_code, alerts=len(features))
    return server.create_success_result(
        format_alerts_report(state_code, features),
        {"state": state_code, "count": len(features)},
    )


async def forecast_for_point(request: ForecastRequest) -> CallToolResult:
    """Answer get-forecast for already validated coordinates.

    Resolves the grid point first, then fetches the forecast document the
    point response links to. The two lookups fail in distinguishable ways:
    the /points call can be unavailable, or succeed without a forecast URL
    (no NWS coverage); the forecast call can be unavailable or empty.

    Args:
        request: Validated latitude/longitude

    Returns:
        CallToolResult with one text block (forecast or failure sentence)
    """
    lat_formatted = request.latitude_formatted
    lon_formatted = request.longitude_formatted
    coordinates = f"{lat_formatted}, {lon_formatted}"

    points_result = await nws_client.fetch_points(request.latitude, request.longitude)

    if not points_result.ok:
        _log_upstream_failure(TOOL_GET_FORECAST, points_result, coordinates=coordinates)
        message = (
            f"Failed to retrieve grid point data for coordinates: {coordinates}."
            " Could not fetch data from the NWS /points endpoint."
        )
        # coverage hint only on 404, which NWS answers for points it has no grid for
        if points_result.status_code is not None and HTTPStatusCodes.is_not_found(points_result.status_code):
            message += f" {COVERAGE_HINT}"
        return create_upstream_error(
            message,
            url=points_result.url,
            cause=points_result.failure.value,
            status_code=points_result.status_code,
            latitude=request.latitude,
            longitude=request.longitude,
        )

    points = points_result.value
    forecast_url = points.forecast_url
    if not forecast_url:
        server.log_tool_error(
            TOOL_GET_FORECAST,
            ERROR_NO_FORECAST_URL,
            f"No forecast URL in grid point data for URL: {points_result.url}",
            coordinates=coordinates,
        )
        return create_data_shape_error(
            f"Failed to retrieve grid point data for coordinates: {coordinates}."
            f" The NWS API did not return a forecast URL for this location. {COVERAGE_HINT}",
            missing_field="properties.forecast",
            latitude=request.latitude,
            longitude=request.longitude,
        )

    location_name = format_location_label(points, request.latitude, request.longitude)

    logger.debug(f"Fetching forecast data from {forecast_url}")
    forecast_result = await nws_client.fetch_forecast(forecast_url)

    if not forecast_result.ok:
        _log_upstream_failure(TOOL_GET_FORECAST, forecast_result, location=location_name)
        return create_upstream_error(
            f"Failed to retrieve forecast data for {location_name}.",
            url=forecast_result.url,
            cause=forecast_result.failure.value,
            status_code=forecast_result.status_code,
            location=location_name,
        )

    periods = forecast_result.value.properties.periods
    if not periods:
        logger.info(f"No forecast periods available for {location_name}")
        return create_info_result(
            f"No forecast periods available for {location_name}.",
            {"location": location_name, "count": 0},
        )

    server.log_tool_complete(TOOL_GET_FORECAST, location=location_name, periods=len(periods))
    return server.create_success_result(
        format_forecast_report(location_name, periods),
        {"location": location_name, "count": len(periods), "forecast_url": forecast_url},
    )


# ============================================================================
# MCP TOOL DEFINITIONS
# ============================================================================


@mcp.tool(name=TOOL_GET_ALERTS, description="Get weather alerts for a US state")
async def get_alerts(state: StateCode, ctx: Context = None) -> CallToolResult:
    """Get active weather alerts for a US state.

    Args:
        state: Two-letter US state code (e.g. CA, NY), any case

    Returns:
        CallToolResult with formatted alerts or an explanatory sentence

    Examples:
        get_alerts("CA")
        get_alerts("ny")
    """
    server.log_tool_start(TOOL_GET_ALERTS, state=state)

    # Schema already enforced by FastMCP, but add runtime check for direct callers
    is_valid, error_msg = validate_region_code(state)
    if not is_valid:
        logger.warning(f"State validation failed: {error_msg}")
        return create_validation_error(field_name="state", error_message=error_msg, field_value=state)

    try:
        if ctx:
            await ctx.info(f"Fetching weather alerts for {state.upper()}")
        return await alerts_for_region(AlertsRequest(state=state))
    except Exception as e:
        logger.error(f"Unexpected error in get_alerts: {e}", exc_info=True)
        return create_error_result(
            f"Unexpected error retrieving weather alerts for {state.upper()}: {e}",
            ERROR_UNEXPECTED,
            error_type="unexpected_error",
            additional_metadata={"state": state},
        )


@mcp.tool(
    name=TOOL_GET_FORECAST,
    description="Get the weather forecast for a specific US location using latitude and longitude",
)
async def get_forecast(latitude: Latitude, longitude: Longitude, ctx: Context = None) -> CallToolResult:
    """Get the weather forecast for a location inside NWS coverage.

    Args:
        latitude: Latitude of the location (degrees, -90 to 90)
        longitude: Longitude of the location (degrees, -180 to 180)

    Returns:
        CallToolResult with formatted forecast periods or an explanatory sentence

    Examples:
        get_forecast(40.71, -74.00)   # New York
        get_forecast(51.51, -0.13)    # London, outside coverage
    """
    server.log_tool_start(TOOL_GET_FORECAST, latitude=latitude, longitude=longitude)

    # Schema already enforced by FastMCP, but add runtime check for direct callers
    for field_name, value, min_val, max_val in (
        ("latitude", latitude, MIN_LATITUDE, MAX_LATITUDE),
        ("longitude", longitude, MIN_LONGITUDE, MAX_LONGITUDE),
    ):
        is_valid, error_msg = validate_coordinate_range(value, min_val, max_val, field_name)
        if not is_valid:
            logger.warning(f"Coordinate validation failed: {error_msg}")
            return create_validation_error(field_name=field_name, error_message=error_msg, field_value=value)

    try:
        if ctx:
            await ctx.info(f"Fetching forecast for {latitude}, {longitude}")
        return await forecast_for_point(ForecastRequest(latitude=latitude, longitude=longitude))
    except Exception as e:
        logger.error(f"Unexpected error in get_forecast: {e}", exc_info=True)
        return create_error_result(
            f"Unexpected error retrieving forecast for {latitude}, {longitude}: {e}",
            ERROR_UNEXPECTED,
            error_type="unexpected_error",
            additional_metadata={"latitude": latitude, "longitude": longitude},
        )


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    logger.info("Starting Weather MCP server...")
    server.run(transport=os.getenv("MCP_TRANSPORT", "stdio"))
