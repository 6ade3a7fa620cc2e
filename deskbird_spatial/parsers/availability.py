"""Zone availability JSON parsing functions."""

import logging

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import MalformedAvailability
from ..models import ZoneAvailability, ZoneItem
from ..utils import parse_json

logger = logging.getLogger(__name__)


def parse_zone_availability(payload: str | bytes | dict | ZoneAvailability) -> ZoneAvailability:
    """Parse a zone availability payload.

    Zone items that are not objects or fail validation are skipped. Each skip
    is counted in ``ZoneAvailability.skipped_items`` and described in
    ``ZoneAvailability.warnings``.

    Args:
        payload: Availability JSON text, the decoded object, or a parsed model

    Returns:
        ZoneAvailability object

    Raises:
        MalformedAvailability: If the payload is not valid JSON or lacks
            an ``availability.zoneItems`` list
    """
    if isinstance(payload, ZoneAvailability):
        return payload

    data = parse_json(payload, MalformedAvailability)
    if not isinstance(data, dict):
        raise MalformedAvailability(
            f"Zone availability must be a JSON object, got {type(data).__name__}"
        )

    availability = data.get("availability")
    if not isinstance(availability, dict) or not isinstance(availability.get("zoneItems"), list):
        raise MalformedAvailability("Zone availability is missing an 'availability.zoneItems' list")

    zone_items = []
    warnings = []

    for item_index, raw_item in enumerate(availability["zoneItems"]):
        if not isinstance(raw_item, dict):
            message = f"Skipped zone item {item_index}: not an object"
            warnings.append(message)
            logger.warning(message)
            continue

        try:
            zone_items.append(ZoneItem.model_validate(raw_item))
        except PydanticValidationError as e:
            message = (
                f"Skipped zone item {raw_item.get('id', item_index)!r}: "
                f"{e.error_count()} invalid field(s)"
            )
            warnings.append(message)
            logger.warning(message)

    try:
        zone = ZoneAvailability.model_validate(
            {
                **data,
                "availability": {**availability, "zoneItems": zone_items},
                "skippedItems": len(warnings),
                "warnings": warnings,
            }
        )
    except PydanticValidationError as e:
        raise MalformedAvailability(f"Failed to validate zone availability: {e}") from e

    logger.debug(
        f"Parsed availability for zone {zone.id!r} with "
        f"{len(zone.availability.zone_items)} zone items ({zone.skipped_items} skipped)"
    )
    return zone
