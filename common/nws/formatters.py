"""ABOUTME: Text formatting for NWS alerts and forecast periods.

Pure functions from parsed NWS models to fixed-layout text. Each field falls
back to its own default, so a formatter never fails on partial data.
"""

from typing import List, Optional, Sequence, Union

from ..validation import format_coordinate
from .models import AlertFeature, ForecastPeriod, PointsResponse

# Block separator appended to every alert and period
SEPARATOR = "---"

# Alert field defaults
UNKNOWN_EVENT = "Unknown Event"
UNKNOWN_AREA = "Unknown Area"
UNKNOWN_SEVERITY = "Unknown Severity"
UNKNOWN_STATUS = "Unknown Status"
NO_HEADLINE = "No headline provided."

# Forecast period defaults
UNKNOWN_PERIOD = "Unknown Period"
NOT_AVAILABLE = "N/A"
DEFAULT_TEMPERATURE_UNIT = "F"
DEGREE_SIGN = "°"
NO_FORECAST = "No forecast available"


def format_alert(feature: AlertFeature) -> str:
    """Format one alert feature as a text block."""
    props = feature.properties
    return "\n".join([
        f"Event: {props.event or UNKNOWN_EVENT}",
        f"Area: {props.areaDesc or UNKNOWN_AREA}",
        f"Severity: {props.severity or UNKNOWN_SEVERITY}",
        f"Status: {props.status or UNKNOWN_STATUS}",
        f"Headline: {props.headline or NO_HEADLINE}",
        SEPARATOR,
    ])


def _format_temperature(value: Optional[Union[int, float]]) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_period(period: ForecastPeriod) -> str:
    """Format one forecast period as a text block.

    Example output:
        Tonight:
          Temperature: 45°F
          Wind: 5 to 10 mph NW
          Forecast: Mostly Clear
        ---
    """
    temperature = _format_temperature(period.temperature)
    unit = period.temperatureUnit or DEFAULT_TEMPERATURE_UNIT
    # no trailing space when the direction is missing
    wind = f"{period.windSpeed or NOT_AVAILABLE} {period.windDirection or ''}".rstrip()

    return "\n".join([
        f"{period.name or UNKNOWN_PERIOD}:",
        f"  Temperature: {temperature}{DEGREE_SIGN}{unit}",
        f"  Wind: {wind}",
        f"  Forecast: {period.shortForecast or NO_FORECAST}",
        SEPARATOR,
    ])


def format_location_label(points: PointsResponse, latitude: float, longitude: float) -> str:
    """Name a resolved grid point for use in every message of a request."""
    name = points.location_name
    if name:
        return name
    return f"coordinates {format_coordinate(latitude)}, {format_coordinate(longitude)}"


def format_alerts_report(region_code: str, features: Sequence[AlertFeature]) -> str:
    """Header plus every alert block, in upstream order."""
    blocks: List[str] = [format_alert(feature) for feature in features]
    return f"Active weather alerts for {region_code}:\n\n" + "\n".join(blocks)


def format_forecast_report(location_label: str, periods: Sequence[ForecastPeriod]) -> str:
    """Header plus every period block, in upstream order."""
    blocks: List[str] = [format_period(period) for period in periods]
    return f"Weather forecast for {location_label}:\n\n" + "\n".join(blocks)
