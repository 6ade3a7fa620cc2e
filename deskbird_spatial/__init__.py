"""deskbird-spatial - Desk identity, occupancy and proximity queries over Deskbird floor plans."""

__version__ = "0.1.0"

# Indices and queries
from .availability import AvailabilityIndex, build_availability_index

# Exceptions
from .exceptions import (
    DeskbirdSpatialError,
    DeskNotFound,
    DuplicateIdentifier,
    IndexBuildError,
    MalformedAvailability,
    MalformedFloorConfig,
    ParseError,
    ValidationError,
)
from .identity import IdentityMap, build_identity_map

# Models
from .models import (
    Area,
    AvailabilityDetails,
    Desk,
    FloorPlan,
    NearbyColleague,
    OccupancyEntry,
    Occupant,
    Point,
    ProximityResult,
    SpatialSummary,
    TimeWindow,
    ZoneAvailability,
    ZoneItem,
)

# Parsers
from .parsers import parse_desks, parse_floor_config, parse_zone_availability
from .settings import SpatialSettings
from .snapshot import OfficeSnapshot
from .spatial import SpatialQueryEngine

# Utilities
from .utils import (
    DEFAULT_TIMEZONE,
    day_time_range,
    extract_desk_number,
    from_timestamp,
    overlaps,
    parse_date,
    sort_desks,
    to_timestamp,
    validate_time_slot,
)

__all__ = [
    # Version
    "__version__",
    # Indices and queries
    "OfficeSnapshot",
    "IdentityMap",
    "build_identity_map",
    "AvailabilityIndex",
    "build_availability_index",
    "SpatialQueryEngine",
    "SpatialSettings",
    # Parsers
    "parse_floor_config",
    "parse_desks",
    "parse_zone_availability",
    # Models
    "Point",
    "TimeWindow",
    "Area",
    "Desk",
    "FloorPlan",
    "Occupant",
    "ZoneItem",
    "AvailabilityDetails",
    "ZoneAvailability",
    "OccupancyEntry",
    "ProximityResult",
    "NearbyColleague",
    "SpatialSummary",
    # Exceptions
    "DeskbirdSpatialError",
    "ParseError",
    "MalformedFloorConfig",
    "MalformedAvailability",
    "IndexBuildError",
    "DuplicateIdentifier",
    "DeskNotFound",
    "ValidationError",
    # Utilities
    "DEFAULT_TIMEZONE",
    "extract_desk_number",
    "sort_desks",
    "overlaps",
    "validate_time_slot",
    "parse_date",
    "to_timestamp",
    "from_timestamp",
    "day_time_range",
]
