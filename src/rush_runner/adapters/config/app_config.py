"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rush_runner.domain.models.day_type import DayType


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Timetable source configuration
    timetable_file: str | None = Field(
        default="stations.example.json",
        description="Path to the stations JSON file with timetables",
    )
    timetable_url: str | None = Field(
        default=None,
        description="URL of the stations JSON; takes precedence over timetable_file when set",
    )
    http_timeout_seconds: int = Field(
        default=10, description="Timeout for fetching the timetable over HTTP in seconds"
    )

    # Display configuration
    station_id: str | None = Field(
        default=None,
        description="Station to show on start; the first station of the timetable when unset",
    )
    day_type: DayType | None = Field(
        default=None,
        description="Day-type to show on start ('weekday' or 'holiday'); derived from today when unset",
    )
    tick_interval_seconds: float = Field(
        default=1.0, description="Interval between countdown ticks in seconds"
    )

    # Static rider position (stands in for a device location fix)
    latitude: float | None = Field(default=None, description="Rider latitude in decimal degrees")
    longitude: float | None = Field(
        default=None, description="Rider longitude in decimal degrees"
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML config file with [timetable], [position] and [display] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding the settings above",
    )

    @field_validator("tick_interval_seconds")
    @classmethod
    def validate_tick_interval(cls, v: float) -> float:
        """Validate the tick interval is positive."""
        if v <= 0:
            raise ValueError("tick_interval_seconds must be greater than 0")
        return v

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float | None) -> float | None:
        """Validate latitude is within [-90, 90]."""
        if v is not None and not -90.0 <= v <= 90.0:
            raise ValueError("latitude must be between -90 and 90")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float | None) -> float | None:
        """Validate longitude is within [-180, 180]."""
        if v is not None and not -180.0 <= v <= 180.0:
            raise ValueError("longitude must be between -180 and 180")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings on top of the current ones.

        Raises:
            ValueError: If config_file is not set.
            FileNotFoundError: If the file does not exist.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        timetable = toml_data.get("timetable", {})
        if "file" in timetable:
            self.timetable_file = timetable["file"]
        if "url" in timetable:
            self.timetable_url = timetable["url"]
        if "http_timeout_seconds" in timetable:
            self.http_timeout_seconds = timetable["http_timeout_seconds"]

        position = toml_data.get("position", {})
        if "latitude" in position:
            self.latitude = position["latitude"]
        if "longitude" in position:
            self.longitude = position["longitude"]

        display = toml_data.get("display", {})
        if "station_id" in display:
            self.station_id = display["station_id"]
        if "day_type" in display:
            self.day_type = display["day_type"]
        if "tick_interval_seconds" in display:
            self.tick_interval_seconds = display["tick_interval_seconds"]
        if "log_level" in display:
            self.log_level = display["log_level"]

        return toml_data
