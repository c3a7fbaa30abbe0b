"""
Configuration Management for Deeday

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Everything has a sensible default so the app starts with no .env at all.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deeday.models.member import LeapDayPolicy


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from DEEDAY_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEDAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Local storage
    data_dir: Path = Field(
        default=Path("~/.deeday"),
        validate_default=True,
        description="Directory holding the roster file"
    )
    storage_key: str = Field(
        default="familyMembers",
        min_length=1,
        description="Storage key the whole roster is saved under"
    )

    # Birthday rules
    leap_day_policy: LeapDayPolicy = Field(
        default=LeapDayPolicy.FEB_28,
        description="Where Feb 29 birthdays land in non-leap years"
    )

    @field_validator('data_dir')
    @classmethod
    def expand_data_dir(cls, v: Path) -> Path:
        """Expand ~ so the path can be used directly."""
        return v.expanduser()

    @property
    def roster_path(self) -> Path:
        """Full path of the roster file."""
        return self.data_dir / f"{self.storage_key}.json"


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return AppSettings()
