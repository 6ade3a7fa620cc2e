"""Pydantic models for floor-plan snapshots."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .common import Point

# Keys exposed to the presentation layer for a desk listing
DESK_SUMMARY_FIELDS = {"id", "title", "desk_number", "zone_id", "area_name", "status"}


class Desk(BaseModel):
    """A single physical seat on a floor.

    Three identifier spaces meet here: ``id`` is the internal floor id,
    ``desk_number`` is the human-facing number parsed from ``title``, and
    ``zone_id`` is what the booking system uses for reservations.
    """

    id: int = Field(description="Internal desk id, unique within one floor")
    title: str = Field(default="", description="Display title (e.g., 'Desk 57')")
    desk_number: int | None = Field(default=None, description="Number parsed from the title")
    zone_id: int | None = Field(default=None, description="Booking-system zone item id")
    area_name: str = Field(default="", description="Name of the owning area")
    position: Point = Field(description="Position in floor-image pixels")
    status: str = Field(default="unknown", description="Free-text resource state")
    active: bool | None = None

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @property
    def label(self) -> str:
        """Human-readable reference used in messages."""
        if self.desk_number is not None:
            return f"Desk #{self.desk_number}"
        return f"Internal ID: {self.id}"

    def to_dict(self) -> dict:
        """Serialize to the camelCase desk listing shape."""
        return self.model_dump(by_alias=True, include=DESK_SUMMARY_FIELDS)


class Area(BaseModel):
    """Named, colored polygonal region that groups desks."""

    id: str
    title: str = ""
    color: str | None = None
    active: bool | None = None
    type: str | None = None
    points: tuple[Point, ...] = ()
    desks: tuple[Desk, ...] = ()

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


class FloorPlan(BaseModel):
    """Immutable result of parsing one floor configuration payload."""

    areas: tuple[Area, ...] = ()
    desk_radius: float | None = None
    scale: float | None = None
    skipped_desks: int = Field(default=0, description="Desk entries dropped as incomplete")
    warnings: tuple[str, ...] = ()

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @property
    def desks(self) -> list[Desk]:
        """All desks across all areas, in area iteration order."""
        return [desk for area in self.areas for desk in area.desks]

    @property
    def desk_count(self) -> int:
        """Number of desks kept from the payload."""
        return sum(len(area.desks) for area in self.areas)
