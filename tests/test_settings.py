"""Tests for spatial query settings."""

import logging

import pytest

from deskbird_spatial import SpatialSettings
from deskbird_spatial.exceptions import ValidationError

logger = logging.getLogger(__name__)


def test_defaults():
    """Test default query parameters."""
    settings = SpatialSettings()

    assert settings.nearby_radius == 50
    assert settings.row_tolerance == 5
    assert settings.available_count == 5
    assert settings.timezone == "Europe/Amsterdam"


def test_from_env(monkeypatch):
    """Test settings are read from DESKBIRD_* environment variables."""
    monkeypatch.setenv("DESKBIRD_NEARBY_RADIUS", "75.5")
    monkeypatch.setenv("DESKBIRD_ROW_TOLERANCE", "8")
    monkeypatch.setenv("DESKBIRD_AVAILABLE_COUNT", "3")
    monkeypatch.setenv("DESKBIRD_TIMEZONE", "Europe/Stockholm")

    settings = SpatialSettings.from_env()

    assert settings.nearby_radius == 75.5
    assert settings.row_tolerance == 8
    assert settings.available_count == 3
    assert settings.timezone == "Europe/Stockholm"


def test_from_env_overrides_win(monkeypatch):
    """Test explicit arguments take precedence over the environment."""
    monkeypatch.setenv("DESKBIRD_NEARBY_RADIUS", "75")

    settings = SpatialSettings.from_env(nearby_radius=20, row_tolerance=None)

    assert settings.nearby_radius == 20
    assert settings.row_tolerance == 5


def test_from_env_invalid_value(monkeypatch):
    """Test invalid environment values raise ValidationError."""
    monkeypatch.setenv("DESKBIRD_AVAILABLE_COUNT", "many")

    with pytest.raises(ValidationError):
        SpatialSettings.from_env()


def test_from_env_negative_radius(monkeypatch):
    """Test negative radius is rejected."""
    monkeypatch.setenv("DESKBIRD_NEARBY_RADIUS", "-1")

    with pytest.raises(ValidationError):
        SpatialSettings.from_env()


def test_from_env_unknown_timezone(monkeypatch):
    """Test unknown timezone names are rejected."""
    monkeypatch.setenv("DESKBIRD_TIMEZONE", "Nowhere/Special")

    with pytest.raises(ValidationError):
        SpatialSettings.from_env()
