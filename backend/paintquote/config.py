"""
Application configuration using pydantic-settings.
Loads environment variables from .env file.

Nested config groups (CalculationSettings, PricingSettings) are
env-overridable via the double-underscore delimiter, e.g.:
    PRICING__WALL_PAINT_PER_GALLON=52
    PRICING__SECOND_COAT_LABOR_MULTIPLIER=1.8
    CALCULATION__DOOR_HEIGHT=6.67
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paintquote.constants import DEFAULT_COATS, DEFAULT_WALL_HEIGHT_FT
from paintquote.models.settings import CalculationSettings, PricingSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # App Settings
    debug: bool = False
    log_level: str | None = None  # overrides the level implied by debug
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8081"]

    # Fallbacks when neither the entity nor the project sets a value
    default_wall_height: float = Field(default=DEFAULT_WALL_HEIGHT_FT, gt=0)
    default_coats: int = Field(default=DEFAULT_COATS, ge=1)

    # Nested config groups (env-overridable via SECTION__KEY format)
    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
