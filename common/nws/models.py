"""ABOUTME: Pydantic models for the National Weather Service API responses.

Each model mirrors the subset of the NWS geo-JSON documents the weather tools
read. Unknown fields are ignored; every model is immutable once parsed.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NWSModel(BaseModel):
    """Base for NWS response models."""

    model_config = ConfigDict(extra="ignore", frozen=True)


# ============================================================================
# ALERTS (/alerts/active?area=XX)
# ============================================================================

class AlertProperties(NWSModel):
    event: Optional[str] = None
    areaDesc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None


class AlertFeature(NWSModel):
    # null on malformed entries; the handler skips those
    properties: Optional[AlertProperties] = None


class AlertsResponse(NWSModel):
    features: List[AlertFeature] = Field(default_factory=list)

    @field_validator("features", mode="before")
    @classmethod
    def null_features_as_empty(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [f for f in v if f is not None]
        return v


# ============================================================================
# POINTS (/points/{lat},{lon})
# ============================================================================

class RelativeLocationProperties(NWSModel):
    city: Optional[str] = None
    state: Optional[str] = None


class RelativeLocation(NWSModel):
    properties: Optional[RelativeLocationProperties] = None


class PointProperties(NWSModel):
    forecast: Optional[str] = None
    relativeLocation: Optional[RelativeLocation] = None


class PointsResponse(NWSModel):
    """Grid point metadata for a coordinate."""

    properties: PointProperties = Field(default_factory=PointProperties)

    @property
    def forecast_url(self) -> Optional[str]:
        """URL of the forecast document, or None outside coverage."""
        return self.properties.forecast or None

    @property
    def location_name(self) -> Optional[str]:
        """Display name as City, State when both parts are present, else None."""
        relative = self.properties.relativeLocation
        if relative is None or relative.properties is None:
            return None
        city = relative.properties.city
        state = relative.properties.state
        if city and state:
            return f"{city}, {state}"
        return None


# ============================================================================
# FORECAST ({forecastUrl})
# ============================================================================

class QuantitativeValue(NWSModel):
    """Unit code plus a nullable numeric value (e.g. wmoUnit:percent)."""

    unitCode: Optional[str] = None
    value: Optional[float] = None


class ForecastPeriod(NWSModel):
    """One named time segment of a forecast (e.g. "Tonight")."""

    number: int
    name: Optional[str] = None
    startTime: str
    endTime: str
    isDaytime: bool
    # int first so whole-degree readings keep their integer form
    temperature: Optional[Union[int, float]] = None
    temperatureUnit: Optional[str] = None
    temperatureTrend: Optional[str] = None
    probabilityOfPrecipitation: Optional[QuantitativeValue] = None
    dewpoint: Optional[QuantitativeValue] = None
    relativeHumidity: Optional[QuantitativeValue] = None
    windSpeed: Optional[str] = None
    windDirection: Optional[str] = None
    icon: Optional[str] = None
    shortForecast: Optional[str] = None
    detailedForecast: Optional[str] = None


class ForecastProperties(NWSModel):
    updated: Optional[str] = None
    units: Optional[str] = None
    forecastGenerator: Optional[str] = None
    generatedAt: Optional[str] = None
    updateTime: Optional[str] = None
    validTimes: Optional[str] = None
    elevation: Optional[QuantitativeValue] = None
    periods: List[ForecastPeriod]


class ForecastResponse(NWSModel):
    properties: ForecastProperties
