"""Payload parsing functions for deskbird-spatial."""

from .availability import parse_zone_availability
from .floor_config import parse_desks, parse_floor_config

__all__ = ["parse_floor_config", "parse_desks", "parse_zone_availability"]
