"""Tests for the desk identity map."""

import logging

import pytest

from deskbird_spatial import IdentityMap, build_identity_map, extract_desk_number, parse_desks
from deskbird_spatial.exceptions import DuplicateIdentifier, IndexBuildError
from deskbird_spatial.models import Desk, Point

logger = logging.getLogger(__name__)


def make_desk(desk_id, title, zone_id=None, x=0.0, y=0.0):
    return Desk(
        id=desk_id,
        title=title,
        desk_number=extract_desk_number(title),
        zone_id=zone_id,
        position=Point(x=x, y=y),
    )


@pytest.fixture
def identity(floor_config):
    return IdentityMap.build(parse_desks(floor_config))


def test_lookup_by_each_identifier(identity):
    """Test the same desk is reachable from all three identifier spaces."""
    by_number = identity.by_desk_number(58)
    by_id = identity.by_internal_id(2)
    by_zone = identity.by_zone_id(901)

    assert by_number is not None
    assert by_number == by_id == by_zone
    assert by_number.title == "Desk 58"


def test_lookup_misses_return_none(identity):
    """Test that unknown identifiers are a normal, absent result."""
    assert identity.by_desk_number(1234) is None
    assert identity.by_internal_id(42) is None
    assert identity.by_zone_id(1) is None


def test_zone_id_for_desk_number(identity):
    """Test resolving a desk number to the zone id used for bookings."""
    assert identity.zone_id_for_desk_number(57) == 900
    assert identity.zone_id_for_desk_number(60) == 903
    assert identity.zone_id_for_desk_number(999) is None


def test_desk_number_for_zone_id(identity):
    """Test resolving a zone id back to the human desk number."""
    assert identity.desk_number_for_zone_id(902) == 59
    # Phone Booth has no number
    assert identity.desk_number_for_zone_id(904) is None
    assert identity.desk_number_for_zone_id(12345) is None


def test_desks_in_presentation_order(identity):
    """Test desks are exposed sorted by number, unnumbered last."""
    assert [d.title for d in identity.desks] == [
        "Desk 57",
        "Desk 58",
        "Desk 59",
        "Desk 60",
        "Phone Booth",
    ]
    assert len(identity) == 5
    assert 3 in identity
    assert 42 not in identity


def test_duplicate_desk_number_raises():
    """Test that two desks with the same desk number are rejected."""
    desks = [make_desk(1, "Desk 57", zone_id=900), make_desk(2, "Desk 57", zone_id=901)]

    with pytest.raises(DuplicateIdentifier) as exc_info:
        IdentityMap.build(desks)

    assert exc_info.value.kind == "desk_number"
    assert exc_info.value.value == 57


def test_duplicate_internal_id_raises():
    """Test that two desks with the same internal id are rejected."""
    desks = [make_desk(1, "Desk 1", zone_id=900), make_desk(1, "Desk 2", zone_id=901)]

    with pytest.raises(DuplicateIdentifier) as exc_info:
        build_identity_map(desks)

    assert exc_info.value.kind == "id"


def test_duplicate_zone_id_raises():
    """Test that two desks with the same zone id are rejected."""
    desks = [make_desk(1, "Desk 1", zone_id=900), make_desk(2, "Desk 2", zone_id=900)]

    with pytest.raises(DuplicateIdentifier) as exc_info:
        IdentityMap.build(desks)

    assert exc_info.value.kind == "zone_id"
    assert isinstance(exc_info.value, IndexBuildError)


def test_null_identifiers_are_not_duplicates():
    """Test that several desks without number or zone id are allowed."""
    desks = [make_desk(1, "Booth"), make_desk(2, "Lounge"), make_desk(3, "Sofa")]

    identity = IdentityMap.build(desks)

    assert len(identity) == 3
    assert identity.by_internal_id(2).title == "Lounge"


def test_identity_map_is_read_only(identity):
    """Test that the underlying lookups cannot be modified."""
    with pytest.raises(TypeError):
        identity._by_internal_id[99] = identity.by_internal_id(1)

    with pytest.raises(AttributeError):
        identity.extra = True


def test_rebuild_gives_identical_results(floor_config_json):
    """Test that two maps from the same payload answer identically."""
    first = IdentityMap.build(parse_desks(floor_config_json))
    second = IdentityMap.build(parse_desks(floor_config_json))

    assert first.desks == second.desks
    for number in (57, 58, 59, 60):
        assert first.by_desk_number(number) == second.by_desk_number(number)
