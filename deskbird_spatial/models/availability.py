"""Pydantic models for zone availability payloads and occupancy."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
    "coerce_numbers_to_str": True,
}


class Occupant(BaseModel):
    """A person booked into a desk for some time window."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    user_id: str = ""
    booking_id: str = ""
    start_time: int | None = Field(default=None, description="Booking start (epoch ms)")
    end_time: int | None = Field(default=None, description="Booking end (epoch ms)")
    id: str | None = None
    uuid: str | None = None
    color: str | None = None
    is_full_day: bool = False
    avatar_url: str | None = None

    model_config = _CAMEL_CONFIG

    @property
    def full_name(self) -> str:
        """Get full name."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email or self.user_id


class ZoneItem(BaseModel):
    """Per-desk slot in a zone availability payload.

    ``order`` carries the internal floor desk id for this payload type, even
    though the name suggests a sort position.
    """

    id: int
    name: str = ""
    description: str | None = None
    users: tuple[Occupant, ...] = ()
    order: int | None = None
    status: str = ""
    is_available: bool = False
    access_info: dict | None = None
    resource_type: str = ""

    model_config = _CAMEL_CONFIG


class AvailabilityDetails(BaseModel):
    """The ``availability`` block of a zone availability payload."""

    used: int = 0
    total: int = 0
    available: int = 0
    users: tuple[Occupant, ...] = ()
    zone_items: tuple[ZoneItem, ...]

    model_config = _CAMEL_CONFIG


class ZoneAvailability(BaseModel):
    """Availability snapshot of a zone for one query time window."""

    id: str | None = None
    name: str = ""
    type: str = ""
    capacity: int | None = None
    total: int | None = None
    total_available: int | None = None
    availability: AvailabilityDetails
    skipped_items: int = Field(default=0, description="Zone items dropped as invalid")
    warnings: tuple[str, ...] = ()

    model_config = _CAMEL_CONFIG


class OccupancyEntry(BaseModel):
    """Occupancy of one desk, keyed by internal desk id."""

    desk_id: int
    zone_item_id: int | None = None
    is_available: bool
    occupants: tuple[Occupant, ...] = ()
    status: str = ""

    model_config = _CAMEL_CONFIG

    @property
    def is_occupied(self) -> bool:
        """Check if anyone is booked into this desk."""
        return bool(self.occupants)
