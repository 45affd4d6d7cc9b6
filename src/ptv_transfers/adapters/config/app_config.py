"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    static_dir: str = Field(default="static", description="Directory served at '/'")
    cors_allow_origin: str = Field(
        default="*", description="Value of the Access-Control-Allow-Origin header"
    )
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )
    timezone: str = Field(
        default="Australia/Melbourne",
        description="Timezone for displaying times in the CLI (IANA timezone name)",
    )

    # PTV Timetable API configuration
    ptv_devid: str | None = Field(default=None, description="PTV developer id (PTV_DEVID)")
    ptv_key: str | None = Field(default=None, description="PTV API signing key (PTV_KEY)")
    ptv_base_url: str = Field(
        default="https://timetableapi.ptv.vic.gov.au", description="PTV Timetable API base URL"
    )
    ptv_api_timeout: int = Field(default=10, description="Timeout for PTV API requests in seconds")
    train_max_results: int = Field(
        default=5, description="Maximum number of train departures to fetch"
    )
    bus_max_results: int = Field(
        default=10, description="Maximum number of bus departures to fetch per stop"
    )

    # TOML config file path
    # If unset, or left at the default and missing, the built-in network is used
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file describing the transfer network",
    )

    @field_validator("train_max_results", "bus_max_results", "ptv_api_timeout")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate limits and timeouts are positive."""
        if v <= 0:
            raise ValueError("value must be a positive integer")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("ptv_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip the trailing slash so request paths can be appended directly."""
        return v.rstrip("/")

    @property
    def has_ptv_credentials(self) -> bool:
        """Whether both the PTV dev id and key are set."""
        return bool(self.ptv_devid and self.ptv_key)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the network configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update API settings from TOML if present
        api_config = toml_data.get("api", {})
        if "train_max_results" in api_config:
            self.train_max_results = api_config["train_max_results"]
        if "bus_max_results" in api_config:
            self.bus_max_results = api_config["bus_max_results"]

        return toml_data

    def get_network_config(self) -> dict[str, Any]:
        """Parse and return the transfer network section of the TOML file.

        Returns a dict with 'network', 'stations', 'bus_stops' and 'routes' keys.
        """
        toml_data = self._load_toml_data()

        network = toml_data.get("network", {})
        if not isinstance(network, dict):
            raise ValueError("TOML config 'network' must be a table")

        result: dict[str, Any] = {"network": network}
        for key in ("stations", "bus_stops", "routes"):
            value = toml_data.get(key, [])
            if not isinstance(value, list):
                raise ValueError(f"TOML config '{key}' must be a list")
            result[key] = value
        return result
