"""Geometric and occupancy-aware queries over the desks of one floor."""

import logging

from .availability import AvailabilityIndex
from .exceptions import DeskNotFound, ValidationError
from .identity import IdentityMap
from .models import Desk, NearbyColleague, ProximityResult, SpatialSummary, TimeWindow
from .settings import SpatialSettings
from .utils import validate_time_slot

logger = logging.getLogger(__name__)


def _check_non_negative(name: str, value) -> None:
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


class SpatialQueryEngine:
    """Answers proximity questions about desks on a floor.

    All distances are Euclidean in the pixel space of the floor image.
    Queries are read-only over the given snapshots, so one engine can be
    shared between threads.
    """

    def __init__(
        self,
        identity: IdentityMap,
        occupancy: AvailabilityIndex | None = None,
        settings: SpatialSettings | None = None,
    ):
        """Initialize the engine.

        Args:
            identity: Identity map of the floor-plan snapshot
            occupancy: Availability index for the same desks (default: no occupancy data)
            settings: Query defaults (default: SpatialSettings())
        """
        self.identity = identity
        self.occupancy = occupancy if occupancy is not None else AvailabilityIndex({})
        self.settings = settings or SpatialSettings()

    def _desk(self, desk_id: int) -> Desk:
        desk = self.identity.by_internal_id(desk_id)
        if desk is None:
            raise DeskNotFound(desk_id)
        return desk

    def _ranked_neighbors(self, target: Desk) -> list[tuple[float, Desk]]:
        """Every other desk with its distance, nearest first, ties by id."""
        neighbors = [
            (target.position.distance_to(desk.position), desk)
            for desk in self.identity.desks
            if desk.id != target.id
        ]
        neighbors.sort(key=lambda pair: (pair[0], pair[1].id))
        return neighbors

    def distance_between(self, desk_id_a: int, desk_id_b: int) -> float:
        """Distance between two desks.

        Raises:
            DeskNotFound: If either desk id is unknown
        """
        desk_a = self._desk(desk_id_a)
        desk_b = self._desk(desk_id_b)
        return desk_a.position.distance_to(desk_b.position)

    def within_radius(
        self, target_id: int, max_distance: float | None = None
    ) -> list[ProximityResult]:
        """Find desks within a distance of the target desk.

        Args:
            target_id: Internal id of the target desk
            max_distance: Inclusive radius (default: settings.nearby_radius)

        Returns:
            ProximityResults sorted by distance, excluding the target

        Raises:
            DeskNotFound: If the target desk is unknown
            ValidationError: If max_distance is negative
        """
        if max_distance is None:
            max_distance = self.settings.nearby_radius
        _check_non_negative("max_distance", max_distance)

        target = self._desk(target_id)
        return [
            ProximityResult(desk=desk, distance=distance)
            for distance, desk in self._ranked_neighbors(target)
            if distance <= max_distance
        ]

    def same_row(self, target_id: int, y_tolerance: float | None = None) -> list[Desk]:
        """Find desks whose Y coordinate is within a tolerance of the target's.

        Row membership is symmetric but not transitive: A and C can both share
        a row with B without sharing one with each other.

        Args:
            target_id: Internal id of the target desk
            y_tolerance: Max absolute Y difference (default: settings.row_tolerance)

        Returns:
            Desks ordered left to right, excluding the target

        Raises:
            DeskNotFound: If the target desk is unknown
            ValidationError: If y_tolerance is negative
        """
        if y_tolerance is None:
            y_tolerance = self.settings.row_tolerance
        _check_non_negative("y_tolerance", y_tolerance)

        target = self._desk(target_id)
        row = [
            desk
            for desk in self.identity.desks
            if desk.id != target.id and abs(desk.position.y - target.position.y) <= y_tolerance
        ]
        row.sort(key=lambda desk: (desk.position.x, desk.id))
        return row

    def nearest_available(self, target_id: int, count: int | None = None) -> list[ProximityResult]:
        """Find the closest desks flagged available, at any distance.

        Returns fewer than ``count`` results when fewer desks are available.

        Raises:
            DeskNotFound: If the target desk is unknown
            ValidationError: If count is negative
        """
        if count is None:
            count = self.settings.available_count
        _check_non_negative("count", count)

        target = self._desk(target_id)
        results = [
            ProximityResult(desk=desk, distance=distance, is_available=True)
            for distance, desk in self._ranked_neighbors(target)
            if self.occupancy.is_available(desk.id)
        ]
        return results[:count]

    def nearest_free_during(
        self,
        target_id: int,
        window: TimeWindow | tuple[int, int],
        count: int | None = None,
    ) -> list[ProximityResult]:
        """Find the closest desks with no booking overlapping a candidate window.

        Unlike :meth:`nearest_available`, this ignores the upstream availability
        flag and checks the window against each desk's bookings.

        Raises:
            DeskNotFound: If the target desk is unknown
            ValidationError: If count is negative or the window is empty
        """
        if count is None:
            count = self.settings.available_count
        _check_non_negative("count", count)
        window = validate_time_slot(window)

        target = self._desk(target_id)
        results = [
            ProximityResult(desk=desk, distance=distance, is_available=True)
            for distance, desk in self._ranked_neighbors(target)
            if self.occupancy.is_free_during(desk.id, window)
        ]
        return results[:count]

    def nearby_colleagues(
        self, target_id: int, max_distance: float | None = None
    ) -> list[NearbyColleague]:
        """Find occupied desks within a distance of the target desk.

        Args:
            target_id: Internal id of the target desk
            max_distance: Inclusive radius (default: settings.nearby_radius)

        Returns:
            NearbyColleague entries sorted by distance

        Raises:
            DeskNotFound: If the target desk is unknown
            ValidationError: If max_distance is negative
        """
        if max_distance is None:
            max_distance = self.settings.nearby_radius
        _check_non_negative("max_distance", max_distance)

        target = self._desk(target_id)
        colleagues = []
        for distance, desk in self._ranked_neighbors(target):
            if distance > max_distance:
                break
            occupants = self.occupancy.occupants_of(desk.id)
            if occupants:
                colleagues.append(
                    NearbyColleague(desk=desk, distance=distance, occupants=occupants)
                )
        return colleagues

    def spatial_summary(self, target_id: int) -> SpatialSummary:
        """Everything spatially relevant around one desk, using default settings.

        An unknown target yields an empty summary instead of raising.
        """
        target = self.identity.by_internal_id(target_id)
        if target is None:
            logger.info(f"No spatial summary for unknown desk {target_id}")
            return SpatialSummary()

        return SpatialSummary(
            target_desk=target,
            nearby_desks=self.within_radius(target_id),
            available_nearby=self.nearest_available(target_id),
            nearby_colleagues=self.nearby_colleagues(target_id),
            same_row_desks=self.same_row(target_id),
        )
