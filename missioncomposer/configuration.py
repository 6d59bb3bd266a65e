"""Mini README: Centralised configuration for the mission composer.

Structure:
    * MissionComposerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``MISSIONCOMPOSER_*`` environment variables or a local
    ``.env`` file. The map centre defaults to the Hooghly river view used by the
    drawing dashboard; decimal settings control how coordinates and distances
    are rendered in the waypoint table.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissionComposerSettings(BaseSettings):
    """Runtime configuration for the mission composer."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the interactive service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the interactive service exposes.",
        ge=1,
        le=65535,
    )
    map_center_longitude: float = Field(
        88.8, description="Initial map centre longitude in decimal degrees."
    )
    map_center_latitude: float = Field(
        22.6, description="Initial map centre latitude in decimal degrees."
    )
    map_zoom: int = Field(10, description="Initial map zoom level.", ge=0, le=28)
    coordinate_decimals: int = Field(
        8, description="Decimals shown for coordinates in the waypoint table.", ge=0
    )
    distance_decimals: int = Field(
        1, description="Decimals shown for distances in the waypoint table.", ge=0
    )

    model_config = SettingsConfigDict(
        env_prefix="MISSIONCOMPOSER_",
        env_file=".env",
        case_sensitive=False,
    )

    @field_validator("map_center_longitude")
    @classmethod
    def _check_longitude(cls, value: float) -> float:
        """Reject map centres outside the WGS84 longitude range."""

        if not -180.0 <= value <= 180.0:
            raise ValueError("map_center_longitude must be within [-180, 180]")
        return value

    @field_validator("map_center_latitude")
    @classmethod
    def _check_latitude(cls, value: float) -> float:
        """Reject map centres outside the WGS84 latitude range."""

        if not -90.0 <= value <= 90.0:
            raise ValueError("map_center_latitude must be within [-90, 90]")
        return value


@lru_cache()
def get_settings() -> MissionComposerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return MissionComposerSettings()
