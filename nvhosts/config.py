"""
Configuration utilities and settings management.

Handles environment variables and default paths.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
        populate_by_name=True,
    )

    # Input / output paths
    config_path: str = Field(
        default="./nvhosts.toml", alias="NVHOSTS_CONFIG", description="Site description file"
    )
    output_dir: str = Field(
        default="./sites-available",
        alias="NVHOSTS_OUTPUT_DIR",
        description="Directory receiving one <domain>.conf per site",
    )

    # Logging
    verbose: bool = Field(
        default=False, alias="NVHOSTS_VERBOSE", description="Log every written file at INFO level"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


# Global settings instance
settings = Settings()


def get_output_dir() -> Path:
    """Get the configured output directory path."""
    return Path(settings.output_dir)
