"""
Configuration management for the ghareeb library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the GHAREEB_ prefix.
"""

from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GhareebSettings(BaseSettings):
    """
    Configuration settings for the ghareeb library.

    All settings can be overridden via environment variables with GHAREEB_ prefix.

    Example:
        export GHAREEB_LOOSE_MAX_LENGTH_DIFF="1"
        export GHAREEB_MATCH_LEVEL="strict"
        export GHAREEB_MEDIUM_THRESHOLD="0.8"
    """

    model_config = SettingsConfigDict(
        env_prefix="GHAREEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Lexicon Settings ============

    min_fragment_length: int = Field(
        default=2,
        description="Normalized lexicon fragments shorter than this are dropped",
        ge=1,
        le=5,
    )

    # ============ Alignment Settings ============

    loose_max_length_diff: int = Field(
        default=2,
        description="Maximum length difference for a loose (substring) word match",
        ge=0,
        le=5,
    )

    loose_min_length: int = Field(
        default=3,
        description="Minimum length of the shorter word for a loose word match",
        ge=1,
        le=10,
    )

    page_window: int = Field(
        default=1,
        description="Entries hinted for a page further than this from the aligned page are skipped",
        ge=0,
        le=5,
    )

    # ============ Speech Matching Settings ============

    match_level: Optional[Literal["strict", "medium", "loose"]] = Field(
        default=None,
        description="Policy level used when a caller passes no threshold; unset means default_speech_threshold",
    )

    default_speech_threshold: float = Field(
        default=0.8,
        description="Similarity threshold used when neither the caller nor match_level sets one",
        ge=0.0,
        le=1.0,
    )

    short_target_length: int = Field(
        default=3,
        description="Normalized targets up to this length use the short-target thresholds",
        ge=1,
        le=10,
    )

    strict_threshold: float = Field(default=0.85, ge=0.0, le=1.0)
    strict_short_threshold: float = Field(default=1.0, ge=0.0, le=1.0)
    medium_threshold: float = Field(default=0.75, ge=0.0, le=1.0)
    medium_short_threshold: float = Field(default=1.0, ge=0.0, le=1.0)
    loose_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    loose_short_threshold: float = Field(default=0.66, ge=0.0, le=1.0)

    # ============ Validators ============

    @model_validator(mode="after")
    def short_thresholds_not_looser(self) -> "GhareebSettings":
        """Short targets must never be matched more loosely than long ones."""
        for level in ("strict", "medium", "loose"):
            long_value = getattr(self, f"{level}_threshold")
            short_value = getattr(self, f"{level}_short_threshold")
            if short_value < long_value:
                raise ValueError(
                    f"{level}_short_threshold ({short_value}) must be >= "
                    f"{level}_threshold ({long_value})"
                )
        return self

    def thresholds_for(self, level: str) -> tuple[float, float]:
        """
        Get the (long, short) threshold pair for a policy level.

        Args:
            level: One of 'strict', 'medium', 'loose'

        Returns:
            Tuple of (threshold for longer targets, threshold for short targets)
        """
        return (
            getattr(self, f"{level}_threshold"),
            getattr(self, f"{level}_short_threshold"),
        )


# Default settings instance
_default_settings: GhareebSettings | None = None


def get_settings() -> GhareebSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        GhareebSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = GhareebSettings()
    return _default_settings


def configure(**kwargs) -> GhareebSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        GhareebSettings: The new settings instance
    """
    global _default_settings
    _default_settings = GhareebSettings(**kwargs)
    return _default_settings
