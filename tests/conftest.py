"""Pytest configuration and shared payload fixtures."""

import json
import logging

import pytest
from dotenv import load_dotenv

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Load environment variables
load_dotenv()


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep DESKBIRD_* variables from the shell out of the tests."""
    for name in (
        "DESKBIRD_NEARBY_RADIUS",
        "DESKBIRD_ROW_TOLERANCE",
        "DESKBIRD_AVAILABLE_COUNT",
        "DESKBIRD_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def floor_config():
    """Floor configuration with two areas, five usable desks and two broken entries.

    Distances from desk 1 at (0, 0): desk 2 = 10, desk 3 = 30,
    desk 4 = sqrt(1609) ~ 40.11, desk 5 ~ 141.42.
    """
    return {
        "areas": [
            {
                "id": "area-north",
                "title": "North Wing",
                "color": "#ff0000",
                "active": True,
                "type": "desk",
                "points": [[0, 0], [50, 0], [50, 50], [0, 50]],
                "desks": [
                    {"id": 1, "zoneId": 900, "title": "Desk 57", "type": "desk", "active": True, "position": [0, 0]},
                    {"id": 2, "zoneId": 901, "title": "Desk 58", "type": "desk", "active": True, "position": [10, 0]},
                    {"id": 3, "zoneId": 902, "title": "Desk 59", "type": "desk", "active": True, "position": [0, 30]},
                ],
            },
            {
                "id": "area-south",
                "title": "South Wing",
                "color": "#00ff00",
                "active": True,
                "type": "desk",
                "points": [[40, 0], [120, 0], [120, 120], [40, 120]],
                "desks": [
                    {"id": 4, "zoneId": "903", "title": "Desk 60", "type": "desk", "active": True, "position": [40, 3]},
                    {"id": 5, "zoneId": 904, "title": "Phone Booth", "type": "desk", "active": False, "position": [100, 100]},
                    {"id": 6, "zoneId": 905, "title": "Desk 61", "type": "desk"},
                    {"zoneId": 906, "title": "Ghost Desk", "position": [1, 1]},
                ],
            },
        ],
        "deskRadius": 12,
        "scale": 1.5,
    }


@pytest.fixture
def floor_config_json(floor_config):
    """Floor configuration as raw JSON text."""
    return json.dumps(floor_config)


def make_user(first_name, last_name, start_time, end_time, booking_id):
    return {
        "firstName": first_name,
        "lastName": last_name,
        "email": f"{first_name.lower()}@example.com",
        "id": f"u-{booking_id}",
        "userId": f"user-{first_name.lower()}",
        "uuid": f"uuid-{booking_id}",
        "color": "#123456",
        "bookingId": booking_id,
        "startTime": start_time,
        "endTime": end_time,
        "isFullDay": False,
    }


def make_zone_item(item_id, order, is_available, users=()):
    return {
        "id": item_id,
        "name": f"Item {item_id}",
        "description": "",
        "users": list(users),
        "order": order,
        "status": "available" if is_available else "booked",
        "isAvailable": is_available,
        "accessInfo": {"type": "public"},
        "resourceType": "flexDesk",
    }


@pytest.fixture
def availability():
    """Zone availability: desk 2 and 5 booked, 1, 3 and 4 free, one unmatched item."""
    ada = make_user("Ada", "Lovelace", 1000, 2000, 7001)
    grace = make_user("Grace", "Hopper", 3000, 4000, "b-7002")
    return {
        "id": "zone-1",
        "name": "Office Floor 1",
        "type": "flexDesk",
        "capacity": 6,
        "total": 6,
        "totalAvailable": 3,
        "availability": {
            "used": 2,
            "total": 6,
            "available": 3,
            "users": [ada, grace],
            "zoneItems": [
                make_zone_item(900, 1, True),
                make_zone_item(901, 2, False, [ada]),
                make_zone_item(902, 3, True),
                make_zone_item(903, 4, True),
                make_zone_item(904, 5, False, [grace]),
                make_zone_item(999, 99, True),
            ],
        },
    }
