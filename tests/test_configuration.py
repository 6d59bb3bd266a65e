"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from missioncomposer.configuration import MissionComposerSettings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_centre_on_hooghly_river() -> None:
    settings = MissionComposerSettings()
    assert settings.map_center_longitude == pytest.approx(88.8)
    assert settings.map_center_latitude == pytest.approx(22.6)
    assert settings.coordinate_decimals == 8


def test_environment_overrides_are_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSIONCOMPOSER_MAP_ZOOM", "14")
    monkeypatch.setenv("MISSIONCOMPOSER_DISTANCE_DECIMALS", "3")
    settings = get_settings()
    assert settings.map_zoom == 14
    assert settings.distance_decimals == 3
    assert get_settings() is settings


def test_out_of_range_map_centre_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSIONCOMPOSER_MAP_CENTER_LATITUDE", "120")
    with pytest.raises(ValidationError):
        MissionComposerSettings()


def test_settings_use_pydantic_v2_configuration() -> None:
    """Config and validators are declared in the v2 form, free of deprecation shims."""

    assert MissionComposerSettings.model_config["env_prefix"] == "MISSIONCOMPOSER_"
    validators = MissionComposerSettings.__pydantic_decorators__.field_validators
    assert {"_check_longitude", "_check_latitude"} <= set(validators)
