"""Floor configuration JSON parsing functions."""

import logging

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import MalformedFloorConfig
from ..models import Area, Desk, FloorPlan, Point
from ..utils import extract_desk_number, parse_json

logger = logging.getLogger(__name__)


def _unwrap(config) -> dict:
    """Return the floor configuration object, unwrapping the group envelope."""
    if isinstance(config, dict) and "areas" not in config and "floorConfig" in config:
        # Floor-group responses carry the configuration as a nested JSON string
        return parse_json(config["floorConfig"], MalformedFloorConfig)
    return config


def _parse_desk(raw: dict, area_name: str) -> Desk:
    title = raw.get("title") or ""
    return Desk(
        id=raw["id"],
        title=title,
        desk_number=extract_desk_number(title),
        zone_id=raw.get("zoneId"),
        area_name=area_name,
        position=Point.model_validate(raw["position"]),
        status=raw.get("status") or "unknown",
        active=raw.get("active"),
    )


def parse_floor_config(floor_config_json: str | bytes | dict) -> FloorPlan:
    """Parse a floor configuration payload into a FloorPlan snapshot.

    Desk entries without an ``id`` or ``position``, or with values that fail
    validation, are skipped. Each skip is counted in ``FloorPlan.skipped_desks``
    and described in ``FloorPlan.warnings``.

    Args:
        floor_config_json: Floor configuration JSON text, or the decoded object

    Returns:
        FloorPlan with areas, desks, and parse diagnostics

    Raises:
        MalformedFloorConfig: If the payload is not valid JSON or lacks an areas array
    """
    config = _unwrap(parse_json(floor_config_json, MalformedFloorConfig))

    if not isinstance(config, dict):
        raise MalformedFloorConfig(
            f"Floor config must be a JSON object, got {type(config).__name__}"
        )

    raw_areas = config.get("areas")
    if not isinstance(raw_areas, list):
        raise MalformedFloorConfig("Floor config is missing an 'areas' array")

    areas = []
    warnings = []
    skipped = 0

    for area_index, raw_area in enumerate(raw_areas):
        if not isinstance(raw_area, dict):
            raise MalformedFloorConfig(f"Area at index {area_index} is not an object")

        area_name = raw_area.get("title") or raw_area.get("name") or ""
        raw_desks = raw_area.get("desks")
        if raw_desks is None:
            raw_desks = []
        elif not isinstance(raw_desks, list):
            raise MalformedFloorConfig(f"Area '{area_name}' has a non-array 'desks' value")
        desks = []

        for desk_index, raw_desk in enumerate(raw_desks):
            if not isinstance(raw_desk, dict) or raw_desk.get("id") is None or raw_desk.get(
                "position"
            ) is None:
                skipped += 1
                message = (
                    f"Skipped desk {desk_index} in area '{area_name}': missing id or position"
                )
                warnings.append(message)
                logger.warning(message)
                continue

            try:
                desks.append(_parse_desk(raw_desk, area_name))
            except PydanticValidationError as e:
                skipped += 1
                message = (
                    f"Skipped desk {raw_desk.get('id')!r} in area '{area_name}': "
                    f"{e.error_count()} invalid field(s)"
                )
                warnings.append(message)
                logger.warning(message)

        try:
            area = Area(
                id=raw_area.get("id") or f"area-{area_index}",
                title=area_name,
                color=raw_area.get("color"),
                active=raw_area.get("active"),
                type=raw_area.get("type"),
                points=raw_area.get("points") or [],
                desks=desks,
            )
        except PydanticValidationError as e:
            raise MalformedFloorConfig(f"Area '{area_name}' is invalid: {e}") from e
        areas.append(area)

    try:
        floor_plan = FloorPlan(
            areas=areas,
            desk_radius=config.get("deskRadius"),
            scale=config.get("scale"),
            skipped_desks=skipped,
            warnings=warnings,
        )
    except PydanticValidationError as e:
        raise MalformedFloorConfig(f"Floor config is invalid: {e}") from e

    logger.info(
        f"Parsed {floor_plan.desk_count} desks across {len(areas)} areas "
        f"({skipped} skipped)"
    )
    return floor_plan


def parse_desks(floor_config_json: str | bytes | dict) -> list[Desk]:
    """Parse a floor configuration payload into its list of desks.

    Args:
        floor_config_json: Floor configuration JSON text, or the decoded object

    Returns:
        List of Desk objects in area iteration order

    Raises:
        MalformedFloorConfig: If the payload is not valid JSON or lacks an areas array
    """
    return parse_floor_config(floor_config_json).desks
