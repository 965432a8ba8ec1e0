"""Settings for the Performance Lab GraphQL extension.

Defaults mirror a stock WordPress install with the Performance Lab plugin
generating WebP variants: uploads are served from ``/wp-content/uploads``,
``srcset`` candidates wider than 2048px are skipped and the interface is
attached to both spellings of the media item type. Every field can be
overridden through ``PERFLAB_*`` environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.variants import ImageVariant

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _default_image_sizes() -> list[str]:
    return ["thumbnail", "medium", "medium_large", "large", "1536x1536", "2048x2048"]


class PerfLabSettings(BaseSettings):
    """Pydantic settings container for the schema extension."""

    model_config = SettingsConfigDict(env_prefix="PERFLAB_")

    uploads_base_url: str = Field(
        default="http://localhost/wp-content/uploads",
        description="Public base URL of the uploads directory used to build srcset URLs.",
    )
    default_size: str = Field(
        default="medium",
        min_length=1,
        description="Image size used by srcSet when the query omits the size argument.",
    )
    default_variant: str = Field(
        default="original",
        min_length=1,
        description="Variant used by srcSet when the query omits the variant argument.",
    )
    max_srcset_image_width: int = Field(
        default=2048,
        ge=0,
        description="Widest candidate included in a srcset (0 disables the limit).",
    )
    image_sizes: list[str] = Field(
        default_factory=_default_image_sizes,
        description="Registered intermediate image sizes exposed by MediaItemSizeEnum.",
    )
    variant_mime_types: dict[str, str] = Field(
        default_factory=lambda: {"webp": "image/webp"},
        description="Mime type selected by each non-original srcSet variant.",
    )
    interface_targets: list[str] = Field(
        default_factory=lambda: ["mediaItem", "MediaItem"],
        description="Schema types the MediaItemPerformanceLab interface is attached to.",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Level of the perflab_graphql loggers set by configure_logging.",
    )

    @field_validator("variant_mime_types")
    @classmethod
    def require_variant_mime_types(cls, value: dict[str, str]) -> dict[str, str]:
        missing = [
            variant.value
            for variant in ImageVariant
            if variant is not ImageVariant.ORIGINAL and not value.get(variant.value)
        ]
        if missing:
            raise ValueError(f"no mime type configured for variants: {', '.join(missing)}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def build_default(cls) -> "PerfLabSettings":
        """Construct settings with stock WordPress defaults."""

        return cls()


@lru_cache(maxsize=1)
def load_settings() -> PerfLabSettings:
    """Load settings from the environment once per process."""

    return PerfLabSettings()


__all__ = ["PerfLabSettings", "load_settings"]
