"""Default parameters for spatial queries."""

import logging
import os

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .utils import DEFAULT_TIMEZONE, get_timezone

logger = logging.getLogger(__name__)

# Environment variables read by SpatialSettings.from_env()
ENV_VARS = {
    "nearby_radius": "DESKBIRD_NEARBY_RADIUS",
    "row_tolerance": "DESKBIRD_ROW_TOLERANCE",
    "available_count": "DESKBIRD_AVAILABLE_COUNT",
    "timezone": "DESKBIRD_TIMEZONE",
}


class SpatialSettings(BaseModel):
    """Defaults used when a query does not pass its own parameters."""

    nearby_radius: float = Field(default=50.0, ge=0, description="Radius in floor-plan pixels")
    row_tolerance: float = Field(default=5.0, ge=0, description="Max Y difference for a row")
    available_count: int = Field(default=5, ge=0, description="Available desks to suggest")
    timezone: str = DEFAULT_TIMEZONE

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, **overrides) -> "SpatialSettings":
        """Create settings from environment variables.

        Explicit keyword arguments take precedence over the environment.

        Args:
            **overrides: Field values that override environment variables

        Returns:
            SpatialSettings instance

        Raises:
            ValidationError: If a value is invalid
        """
        values = {}
        for field, env_var in ENV_VARS.items():
            value = os.environ.get(env_var)
            if value:
                values[field] = value
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            settings = cls(**values)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid spatial settings: {e}") from e

        get_timezone(settings.timezone)
        logger.debug(f"Loaded spatial settings: {settings}")
        return settings
