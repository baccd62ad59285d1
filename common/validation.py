"""ABOUTME: Shared validation utility module for the weather MCP tools.

Provides the validated input types for tool arguments: two-letter region codes
and latitude/longitude pairs. Supports both Pydantic models (used as the tool
argument schema, enforced before a handler runs) and standalone validation
functions returning (is_valid, error_message).

Design:
- Constants for the validation limits
- Annotated types carrying Field constraints into tool signatures
- Pydantic request models as fallible constructors
- Standalone validator functions (return tuple[bool, Optional[str]])
"""

from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Validation Constants
# =============================================================================

# Region code validation
REGION_CODE_LENGTH: int = 2

# Coordinate validation (degrees)
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0

# Coordinates are embedded in upstream URLs at this precision
COORDINATE_DECIMALS: int = 4


# =============================================================================
# Annotated Argument Types (for tool signatures)
# =============================================================================

StateCode = Annotated[
    str,
    Field(
        min_length=REGION_CODE_LENGTH,
        max_length=REGION_CODE_LENGTH,
        description="Two-letter US state code (e.g. CA, NY)",
    ),
]

Latitude = Annotated[
    float,
    Field(
        ge=MIN_LATITUDE,
        le=MAX_LATITUDE,
        description="Latitude of the location (degrees)",
    ),
]

Longitude = Annotated[
    float,
    Field(
        ge=MIN_LONGITUDE,
        le=MAX_LONGITUDE,
        description="Longitude of the location (degrees)",
    ),
]


# =============================================================================
# Pydantic Request Models
# =============================================================================

class AlertsRequest(BaseModel):
    """Validated input for the get-alerts tool."""

    model_config = ConfigDict(frozen=True)

    state: StateCode

    @field_validator("state")
    @classmethod
    def normalize_state(cls, v: str) -> str:
        """Uppercase the region code once it passed the length check."""
        return normalize_region_code(v)


class ForecastRequest(BaseModel):
    """Validated input for the get-forecast tool."""

    model_config = ConfigDict(frozen=True)

    latitude: Latitude
    longitude: Longitude

    @property
    def latitude_formatted(self) -> str:
        return format_coordinate(self.latitude)

    @property
    def longitude_formatted(self) -> str:
        return format_coordinate(self.longitude)


# =============================================================================
# Standalone Validator Functions (for non-Pydantic validation)
# =============================================================================

def validate_region_code(value: str) -> Tuple[bool, Optional[str]]:
    """Validate a region code and return (is_valid, error_message).

    Only the length is checked; the charset is left to the upstream provider.

    Args:
        value: Region code to validate (e.g. "ca", "NY")

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid

    Example:
        is_valid, error = validate_region_code("CA")
        if not is_valid:
            print(f"Invalid state: {error}")
    """
    if not isinstance(value, str):
        return False, f"state must be a string, got {type(value).__name__}"

    if len(value) != REGION_CODE_LENGTH:
        return False, f"State code must be exactly {REGION_CODE_LENGTH} letters, got {len(value)}"

    return True, None


def validate_coordinate_range(
    value: float,
    min_val: float,
    max_val: float,
    field_name: str = "value"
) -> Tuple[bool, Optional[str]]:
    """Validate that a coordinate is a number within an inclusive range.

    Args:
        value: Coordinate in degrees
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        field_name: Name of field for error messages (default: "value")

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        is_valid, error = validate_coordinate_range(lat, -90, 90, "latitude")
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, f"{field_name} must be a number, got {type(value).__name__}"

    if value < min_val or value > max_val:
        return False, f"{field_name} must be between {min_val} and {max_val}, got {value}"

    return True, None


def normalize_region_code(value: str) -> str:
    """Uppercase a region code for use in upstream queries."""
    return value.upper()


def format_coordinate(value: float) -> str:
    """Render a coordinate with exactly four decimal digits.

    Example:
        >>> format_coordinate(40.71)
        '40.7100'
    """
    return f"{value:.{COORDINATE_DECIMALS}f}"
