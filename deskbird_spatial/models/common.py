"""Common Pydantic models shared across floor-plan and availability data."""

import math
from collections.abc import Sequence

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class Point(BaseModel):
    """2-D coordinate in the pixel space of a floor image.

    Validates from either ``{"x": .., "y": ..}`` or the ``[x, y]`` pair used by
    the floor configuration payload.
    """

    x: float
    y: float

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data):
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) != 2:
                raise ValueError(f"Expected an [x, y] pair, got {len(data)} values")
            return {"x": data[0], "y": data[1]}
        return data

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


class TimeWindow(BaseModel):
    """Half-open time interval ``[start, end)`` in epoch milliseconds."""

    start: int
    end: int

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_order(self):
        if self.start >= self.end:
            raise ValueError(f"Window start ({self.start}) must be before end ({self.end})")
        return self

    @property
    def duration_ms(self) -> int:
        """Length of the window in milliseconds."""
        return self.end - self.start
