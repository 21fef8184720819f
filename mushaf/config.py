"""
Configuration management for the mushaf library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the MUSHAF_ prefix.

The page geometry of the reference edition (604 pages, 15 lines per page) is
not configurable; see ``mushaf.data`` for those constants.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MushafSettings(BaseSettings):
    """
    Configuration settings for the mushaf library.

    All settings can be overridden via environment variables with MUSHAF_ prefix.

    Example:
        export MUSHAF_FONT_SCALE_BREAKPOINT="72"
        export MUSHAF_CACHE_SIZE="64"
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSHAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Line Composition ============

    font_scale_boost: float = Field(
        default=1.02,
        description="Scale applied to the base font size of every text line",
        gt=0.0,
        le=2.0,
    )

    font_scale_breakpoint: int = Field(
        default=80,
        description="Character count above which a line is shrunk to fit the page width",
        ge=1,
        le=400,
    )

    verse_end_open: str = Field(
        default="﴿",
        description="Ornamental bracket placed before a plain-digit verse number",
    )

    verse_end_close: str = Field(
        default="﴾",
        description="Ornamental bracket placed after a plain-digit verse number",
    )

    # ============ Caching ============

    cache_size: int = Field(
        default=32,
        description="Maximum number of page layouts kept by PageLayoutCache",
        ge=1,
        le=604,
    )

    # ============ Logging ============

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level used by the command line interface",
    )

    # ============ Validators ============

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


# Default settings instance
_default_settings: MushafSettings | None = None


def get_settings() -> MushafSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        MushafSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = MushafSettings()
    return _default_settings


def configure(**kwargs) -> MushafSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        MushafSettings: The new settings instance
    """
    global _default_settings
    _default_settings = MushafSettings(**kwargs)
    return _default_settings
