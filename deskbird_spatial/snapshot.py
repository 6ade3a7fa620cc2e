"""Unified view over one floor-plan snapshot and its availability."""

import logging
from datetime import date

from .availability import AvailabilityIndex
from .identity import IdentityMap
from .models import Desk, FloorPlan, SpatialSummary, TimeWindow, ZoneAvailability
from .parsers import parse_floor_config
from .settings import SpatialSettings
from .spatial import SpatialQueryEngine
from .utils import day_time_range

logger = logging.getLogger(__name__)


class OfficeSnapshot:
    """Floor plan, identity map, occupancy and query engine for one fetch.

    Each snapshot is independent. Build a new one from fresh payloads rather
    than updating an existing one, so queries already holding a snapshot keep
    a consistent view.
    """

    def __init__(
        self,
        floor_plan: FloorPlan,
        identity: IdentityMap,
        occupancy: AvailabilityIndex | None = None,
        settings: SpatialSettings | None = None,
    ):
        self.floor_plan = floor_plan
        self.identity = identity
        self.occupancy = occupancy if occupancy is not None else AvailabilityIndex({})
        self.settings = settings or SpatialSettings.from_env()
        self._engine: SpatialQueryEngine | None = None

    @classmethod
    def from_payloads(
        cls,
        floor_config_json: str | bytes | dict,
        availability_json: str | bytes | dict | ZoneAvailability | None = None,
        settings: SpatialSettings | None = None,
    ) -> "OfficeSnapshot":
        """Parse and index both payloads.

        Args:
            floor_config_json: Floor configuration payload
            availability_json: Zone availability payload (default: no occupancy data)
            settings: Query defaults (default: read from environment)

        Returns:
            OfficeSnapshot instance

        Raises:
            MalformedFloorConfig: If the floor configuration cannot be parsed
            MalformedAvailability: If the availability payload cannot be parsed
            DuplicateIdentifier: If either payload breaks identifier uniqueness
        """
        floor_plan = parse_floor_config(floor_config_json)
        identity = IdentityMap.build(floor_plan.desks)

        occupancy = None
        if availability_json is not None:
            occupancy = AvailabilityIndex.build(availability_json, identity.desks)

        return cls(floor_plan, identity, occupancy, settings)

    @property
    def engine(self) -> SpatialQueryEngine:
        """Get query engine (lazy initialization).

        Returns:
            SpatialQueryEngine instance
        """
        if self._engine is None:
            self._engine = SpatialQueryEngine(self.identity, self.occupancy, self.settings)
        return self._engine

    @property
    def warnings(self) -> list[str]:
        """Non-fatal diagnostics from parsing and indexing."""
        return [*self.floor_plan.warnings, *self.occupancy.warnings]

    def list_desks(self) -> list[dict]:
        """Desk listing in canonical presentation order."""
        return [desk.to_dict() for desk in self.identity.desks]

    def find_desk(self, desk_number: int) -> Desk | None:
        """Find a desk by the number in its title."""
        return self.identity.by_desk_number(desk_number)

    def summary_for_desk_number(self, desk_number: int) -> SpatialSummary:
        """Spatial summary for a desk given by its human-facing number.

        An unknown desk number yields an empty summary.
        """
        desk = self.find_desk(desk_number)
        if desk is None:
            logger.info(f"Desk {desk_number} not found in floor config")
            return SpatialSummary()
        return self.engine.spatial_summary(desk.id)

    def day_window(self, day: date | str) -> TimeWindow:
        """Whole-day booking window (07:00-23:00) in the office timezone."""
        start, end = day_time_range(day, self.settings.timezone)
        return TimeWindow(start=start, end=end)
