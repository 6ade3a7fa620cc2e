"""Pydantic models for deskbird-spatial.

This module exports all models from the submodules.
You can import from specific modules:
    from deskbird_spatial.models.floor import Desk, FloorPlan
    from deskbird_spatial.models.availability import Occupant, ZoneAvailability

Or from the main models module:
    from deskbird_spatial.models import Desk, Occupant, ProximityResult
"""

# Common models
from .common import Point, TimeWindow

# Floor-plan models
from .floor import Area, Desk, FloorPlan

# Availability models
from .availability import (
    AvailabilityDetails,
    OccupancyEntry,
    Occupant,
    ZoneAvailability,
    ZoneItem,
)

# Query result models
from .spatial import NearbyColleague, ProximityResult, SpatialSummary

__all__ = [
    # Common models
    "Point",
    "TimeWindow",
    # Floor-plan models
    "Area",
    "Desk",
    "FloorPlan",
    # Availability models
    "AvailabilityDetails",
    "OccupancyEntry",
    "Occupant",
    "ZoneAvailability",
    "ZoneItem",
    # Query result models
    "NearbyColleague",
    "ProximityResult",
    "SpatialSummary",
]
