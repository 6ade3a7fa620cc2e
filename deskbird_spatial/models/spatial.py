"""Pydantic models for spatial query results."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .availability import Occupant
from .floor import Desk


class ProximityResult(BaseModel):
    """A neighboring desk and its distance from the query target."""

    desk: Desk
    distance: float = Field(ge=0, description="Distance in floor-plan pixels")
    is_available: bool | None = None
    occupants: tuple[Occupant, ...] | None = None

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    def to_dict(self) -> dict:
        """Flatten into ``{...desk, distance}`` plus availability fields when set."""
        result = self.desk.to_dict()
        result["distance"] = self.distance
        if self.is_available is not None:
            result["isAvailable"] = self.is_available
        if self.occupants is not None:
            result["occupants"] = [o.model_dump(by_alias=True) for o in self.occupants]
        return result


class NearbyColleague(BaseModel):
    """An occupied desk near the query target, with who is sitting there."""

    desk: Desk
    distance: float = Field(ge=0)
    occupants: tuple[Occupant, ...]

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    def to_dict(self) -> dict:
        return {
            "desk": self.desk.to_dict(),
            "distance": self.distance,
            "occupants": [o.model_dump(by_alias=True) for o in self.occupants],
        }


class SpatialSummary(BaseModel):
    """Snapshot of everything spatially relevant around one desk."""

    target_desk: Desk | None = None
    nearby_desks: tuple[ProximityResult, ...] = ()
    available_nearby: tuple[ProximityResult, ...] = ()
    nearby_colleagues: tuple[NearbyColleague, ...] = ()
    same_row_desks: tuple[Desk, ...] = ()

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @property
    def is_empty(self) -> bool:
        """True when the target desk was not found."""
        return self.target_desk is None

    def to_dict(self) -> dict:
        return {
            "targetDesk": self.target_desk.to_dict() if self.target_desk else None,
            "nearbyDesks": [r.to_dict() for r in self.nearby_desks],
            "availableNearby": [r.to_dict() for r in self.available_nearby],
            "nearbyColleagues": [c.to_dict() for c in self.nearby_colleagues],
            "sameRowDesks": [d.to_dict() for d in self.same_row_desks],
        }
