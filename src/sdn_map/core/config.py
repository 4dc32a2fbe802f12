"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Boundary dataset
    boundaries_path: str = Field(
        default="./data/thailand.geojson",
        description="Path to the province boundary GeoJSON FeatureCollection",
    )
    boundary_name_property: str = Field(
        default="name_th",
        min_length=1,
        description="Feature property holding the Thai province name",
    )
    boundary_english_name_property: str = Field(
        default="name_en",
        min_length=1,
        description="Feature property holding the English province name",
    )

    @property
    def boundaries_file(self) -> Path:
        """Boundary dataset location as a Path."""
        return Path(self.boundaries_path).expanduser()

    # Reverse geocoding (GISTDA Sphere)
    gistda_enabled: bool = Field(
        default=False,
        description="Enable GISTDA reverse geocoding (requires API key)",
    )
    gistda_api_key: str | None = Field(
        default=None,
        description="GISTDA Sphere API key",
    )
    gistda_base_url: str = Field(
        default="https://api.sphere.gistda.or.th",
        description="GISTDA Sphere API base URL",
    )
    gistda_timeout: float = Field(
        default=10.0,
        description="GISTDA request timeout in seconds",
        gt=0,
    )

    @field_validator("gistda_base_url")
    @classmethod
    def validate_gistda_base_url(cls, v: str) -> str:
        if not v.startswith("https://"):
            msg = "gistda_base_url must use HTTPS"
            raise ValueError(msg)
        return v.rstrip("/")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
