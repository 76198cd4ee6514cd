"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from property_commute.adapters.booli_api.constants import BOOLI_GRAPHQL_URL
from property_commute.adapters.skanetrafiken_api.constants import SKANETRAFIKEN_API_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream APIs
    booli_graphql_url: str = Field(default=BOOLI_GRAPHQL_URL, description="Booli GraphQL endpoint")
    skanetrafiken_api_url: str = Field(
        default=SKANETRAFIKEN_API_URL, description="Skånetrafiken journey planner API root"
    )
    listing_base_url: str = Field(
        default="https://www.booli.se", description="Site root that listing URLs are relative to"
    )
    image_url_template: str = Field(
        default="https://bcdn.se/images/cache/{image_id}_420x0.jpg",
        description="Listing image URL with an {image_id} placeholder",
    )

    # Search configuration
    area_name: str = Field(default="Skåne län", description="Area to search listings in")
    area_type: str | None = Field(
        default="Län", description="Only accept area suggestions of this type (empty for any)"
    )
    object_types: str = Field(
        default="Villa,Fritidshus,Gård", description="Comma-separated property types"
    )
    max_distance_to_water: int = Field(
        default=2000, description="Maximum distance to water in meters"
    )
    days_active: int = Field(default=3, description="Only listings published within this many days")
    search_limit: int = Field(default=100, description="Maximum listings fetched per run")

    # Commute configuration
    origin_address: str = Field(
        default="Hyllie, Malmö", description="Address every commute is measured from"
    )
    origin_label: str = Field(default="Hyllie", description="Origin name shown in the digest")
    prefer_stop_area: bool = Field(
        default=True, description="Prefer fixed stops over addresses as journey endpoints"
    )

    # Email delivery
    smtp_host: str | None = Field(default=None, description="SMTP server host")
    smtp_port: int = Field(default=587, description="SMTP server port")
    smtp_secure: bool = Field(default=False, description="Connect with implicit TLS (SMTPS)")
    smtp_user: str | None = Field(default=None, description="SMTP username")
    smtp_pass: str | None = Field(default=None, description="SMTP password")
    email_from: str | None = Field(default=None, description="Sender address")
    email_to: str | None = Field(default=None, description="Comma-separated recipients")
    email_subject: str = Field(default="New Properties in Skåne", description="Email subject")

    # Runtime
    debug: bool = Field(
        default=False, description="Write the digest to an HTML file instead of emailing it"
    )
    output_dir: str = Field(default=".", description="Directory for debug HTML files")
    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with extra search filters
    config_file: str | None = Field(
        default=None,
        description="Path to a TOML file with a [search.filters] table of extra filters",
    )

    @field_validator("search_limit")
    @classmethod
    def validate_search_limit(cls, v: int) -> int:
        """Validate the search limit is positive."""
        if v < 1:
            raise ValueError("search_limit must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("area_type")
    @classmethod
    def validate_area_type(cls, v: str | None) -> str | None:
        """Treat an empty area type as no type filter."""
        return v or None

    @property
    def email_configured(self) -> bool:
        """Whether enough SMTP settings are present to send the digest."""
        return bool(self.smtp_host and self.email_to)

    @property
    def recipients(self) -> list[str]:
        """Recipient addresses parsed from email_to."""
        if not self.email_to:
            return []
        return [address.strip() for address in self.email_to.split(",") if address.strip()]

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML config file."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_search_filters(self) -> dict[str, Any]:
        """Return the listing search filters in the order they are sent.

        Built-in filters come first; entries of the TOML ``[search.filters]``
        table override them in place or are appended.

        Raises:
            FileNotFoundError: If config_file is set but does not exist.
            ValueError: If ``[search.filters]`` is not a table.
        """
        filters: dict[str, Any] = {
            "objectType": self.object_types,
            "maxDistanceToWater": self.max_distance_to_water,
            "daysActive": self.days_active,
        }

        toml_data = self._load_toml_data()
        extra_filters = toml_data.get("search", {}).get("filters", {})
        if not isinstance(extra_filters, dict):
            raise ValueError("TOML config 'search.filters' must be a table")

        filters.update(extra_filters)
        return filters
