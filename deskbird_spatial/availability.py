"""Occupancy lookup built from a zone availability payload."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .exceptions import DuplicateIdentifier
from .models import Desk, OccupancyEntry, Occupant, TimeWindow, ZoneAvailability
from .parsers import parse_zone_availability
from .utils import overlaps, validate_time_slot

logger = logging.getLogger(__name__)


class AvailabilityIndex(Mapping):
    """Read-only mapping from internal desk id to OccupancyEntry.

    Zone items are matched to desks through their ``order`` field, which the
    upstream API fills with the internal floor desk id for this payload type.
    Zone items that fail validation or match no loaded desk are dropped and
    reported in ``warnings``. Desks without a zone item are treated as
    unavailable.
    """

    def __init__(self, entries: dict[int, OccupancyEntry], warnings: list[str] | None = None):
        self._entries = MappingProxyType(entries)
        self._warnings = tuple(warnings or ())

    @classmethod
    def build(
        cls,
        availability_json: str | bytes | dict | ZoneAvailability,
        desks: Iterable[Desk],
    ) -> "AvailabilityIndex":
        """Correlate a zone availability payload with the loaded desks.

        Args:
            availability_json: Zone availability payload (JSON text, dict, or parsed model)
            desks: Desks of the current floor-plan snapshot

        Returns:
            AvailabilityIndex keyed by internal desk id

        Raises:
            MalformedAvailability: If the payload cannot be parsed
            DuplicateIdentifier: If two zone items carry the same ``order``
        """
        zone = parse_zone_availability(availability_json)
        desk_ids = {desk.id for desk in desks}

        entries: dict[int, OccupancyEntry] = {}
        warnings = list(zone.warnings)

        for item in zone.availability.zone_items:
            if item.order is None:
                message = f"Dropped zone item {item.id} ({item.name!r}): no order value"
                warnings.append(message)
                logger.warning(message)
                continue

            # order aliases Desk.id in zone availability responses
            if item.order not in desk_ids:
                message = (
                    f"Dropped zone item {item.id} ({item.name!r}): "
                    f"order {item.order} matches no desk on this floor"
                )
                warnings.append(message)
                logger.warning(message)
                continue

            if item.order in entries:
                raise DuplicateIdentifier(
                    "order",
                    item.order,
                    f"Zone items {entries[item.order].zone_item_id} and {item.id} "
                    f"both reference desk id {item.order}",
                )

            entries[item.order] = OccupancyEntry(
                desk_id=item.order,
                zone_item_id=item.id,
                is_available=item.is_available,
                occupants=item.users,
                status=item.status,
            )

        logger.info(
            f"Indexed availability for {len(entries)} desks in zone {zone.id!r} "
            f"({len(warnings)} zone items dropped)"
        )
        return cls(entries, warnings)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Diagnostics for zone items that were dropped."""
        return self._warnings

    def __getitem__(self, desk_id: int) -> OccupancyEntry:
        return self._entries[desk_id]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_available(self, desk_id: int) -> bool:
        """Check the upstream availability flag for a desk (False when unknown)."""
        entry = self._entries.get(desk_id)
        return entry.is_available if entry is not None else False

    def occupants_of(self, desk_id: int) -> list[Occupant]:
        """Get people booked into a desk (empty when unknown)."""
        entry = self._entries.get(desk_id)
        return list(entry.occupants) if entry is not None else []

    def is_free_during(self, desk_id: int, window: TimeWindow | tuple[int, int]) -> bool:
        """Check a candidate window against the desk's existing bookings.

        Desks with no zone item are not bookable and never free. Bookings
        without start or end time are treated as blocking the whole window.

        Args:
            desk_id: Internal desk id
            window: Candidate booking window

        Returns:
            True if no existing booking overlaps the window

        Raises:
            ValidationError: If the window is empty or inverted
        """
        window = validate_time_slot(window)
        entry = self._entries.get(desk_id)
        if entry is None:
            return False

        for occupant in entry.occupants:
            if occupant.start_time is None or occupant.end_time is None:
                return False
            if overlaps(occupant, window):
                return False
        return True

    def available_desk_ids(self) -> list[int]:
        """Internal ids of all desks flagged available, ascending."""
        return sorted(desk_id for desk_id, entry in self._entries.items() if entry.is_available)


def build_availability_index(
    availability_json: str | bytes | dict | ZoneAvailability,
    desks: Iterable[Desk],
) -> AvailabilityIndex:
    """Build an AvailabilityIndex from a payload and the loaded desks."""
    return AvailabilityIndex.build(availability_json, desks)
