"""Example: Spatial queries over saved floor-plan and availability payloads."""

import os
from pathlib import Path

from dotenv import load_dotenv

from deskbird_spatial import OfficeSnapshot, SpatialSettings
from deskbird_spatial.exceptions import DeskbirdSpatialError

# Load environment variables from .env file
load_dotenv()

FLOOR_CONFIG_PATH = os.getenv("DESKBIRD_FLOOR_CONFIG", "floor_config.json")
AVAILABILITY_PATH = os.getenv("DESKBIRD_AVAILABILITY", "zone_availability.json")
DESK_NUMBER = int(os.getenv("DESKBIRD_DESK_NUMBER", "57"))

if not Path(FLOOR_CONFIG_PATH).exists():
    print(f"Error: floor config not found at {FLOOR_CONFIG_PATH}")
    print("\nCreate a .env file with:")
    print("DESKBIRD_FLOOR_CONFIG=path/to/floor_config.json")
    print("DESKBIRD_AVAILABILITY=path/to/zone_availability.json")
    print("DESKBIRD_DESK_NUMBER=57")
    exit(1)

availability = None
if Path(AVAILABILITY_PATH).exists():
    availability = Path(AVAILABILITY_PATH).read_text()

try:
    snapshot = OfficeSnapshot.from_payloads(
        Path(FLOOR_CONFIG_PATH).read_text(),
        availability,
        settings=SpatialSettings.from_env(),
    )
except DeskbirdSpatialError as e:
    print(f"Error loading payloads: {e}")
    exit(1)

print("=== Desks ===\n")
for desk in snapshot.list_desks():
    number = f"#{desk['deskNumber']}" if desk["deskNumber"] is not None else "-"
    print(f"  {desk['title']} ({number}) zone {desk['zoneId']} in {desk['areaName']}")

for warning in snapshot.warnings:
    print(f"  warning: {warning}")

summary = snapshot.summary_for_desk_number(DESK_NUMBER)
if summary.is_empty:
    print(f"\nDesk {DESK_NUMBER} not found - check the desk number")
    exit(1)

print(f"\n=== Around {summary.target_desk.title} ===\n")

print("Nearby desks:")
for result in summary.nearby_desks:
    print(f"  {result.desk.title}: {result.distance:.1f}px")

print("\nClosest available:")
for result in summary.available_nearby:
    print(f"  {result.desk.title}: {result.distance:.1f}px")

print("\nColleagues nearby:")
for colleague in summary.nearby_colleagues:
    names = ", ".join(o.full_name for o in colleague.occupants)
    print(f"  {colleague.desk.title} ({colleague.distance:.1f}px): {names}")

print("\nSame row:")
for desk in summary.same_row_desks:
    print(f"  {desk.title}")

print("\n=== Done ===")
