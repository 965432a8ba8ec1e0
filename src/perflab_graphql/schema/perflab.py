"""Performance Lab fields for media items.

Registers the ``MediaItemPerformanceLab`` interface (``dominantColor``,
``hasTransparency``, ``srcSet``) with its two argument enums and attaches it to
the host's media item types.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Any, Mapping

import structlog

from ..config import PerfLabSettings
from ..domain.colors import DominantColorFormat, format_dominant_color
from ..domain.variants import ImageVariant, variant_transform
from ..media.library import MediaItemSource, MediaLibrary
from ..media.srcset import SrcSetCalculator
from .media_item import SIZE_ENUM, register_size_enum
from .registry import TypeRegistry

logger = structlog.get_logger(__name__)

VARIANT_ENUM = "MediaItemPerformanceLabVariant"
DOMINANT_COLOR_FORMAT_ENUM = "MediaItemPerformanceLabDominantColorFormat"
INTERFACE = "MediaItemPerformanceLab"

PRIORITY = 10


@dataclass(slots=True)
class PerformanceLabPlugin:
    """Schema plugin exposing Performance Lab image metadata."""

    library: MediaLibrary
    settings: PerfLabSettings = field(default_factory=PerfLabSettings.build_default)
    srcset_calculator: InitVar[SrcSetCalculator | None] = None
    calculator: SrcSetCalculator = field(init=False)

    def __post_init__(self, srcset_calculator: SrcSetCalculator | None) -> None:
        if srcset_calculator is None:
            srcset_calculator = SrcSetCalculator(
                library=self.library,
                uploads_base_url=self.settings.uploads_base_url,
                max_srcset_image_width=self.settings.max_srcset_image_width,
            )
        self.calculator = srcset_calculator

    def install(self, registry: TypeRegistry, *, priority: int = PRIORITY) -> TypeRegistry:
        """Add :meth:`register_types` as a registration hook of ``registry``."""

        registry.add_hook(self.register_types, priority=priority)
        return registry

    def register_types(self, registry: TypeRegistry) -> None:
        registry.register_enum_type(
            VARIANT_ENUM,
            {
                "ORIGINAL": {"value": ImageVariant.ORIGINAL.value},
                "WEBP": {"value": ImageVariant.WEBP.value},
            },
            description="Variant of the MediaItem files a srcSet is computed from.",
        )
        registry.register_enum_type(
            DOMINANT_COLOR_FORMAT_ENUM,
            {"HEX": {"value": DominantColorFormat.HEX.value}},
            description="Output format of the dominant color.",
        )
        if not registry.has_type(SIZE_ENUM):
            register_size_enum(registry, self.settings.image_sizes)

        registry.register_interface_type(
            INTERFACE,
            {
                "dominantColor": {
                    "type": "string",
                    "args": {
                        "format": {
                            "type": DOMINANT_COLOR_FORMAT_ENUM,
                            "description": "The format to return color",
                        },
                    },
                    "description": (
                        "The dominant color calculated for the image to use as "
                        "placeholder background with that color."
                    ),
                    "resolve": self.resolve_dominant_color,
                },
                "hasTransparency": {
                    "type": "boolean",
                    "description": "Whether the image has transparent pixels.",
                    "resolve": self.resolve_has_transparency,
                },
                "srcSet": {
                    "type": "string",
                    "args": {
                        "size": {
                            "type": SIZE_ENUM,
                            "description": "Size of the MediaItem to calculate srcSet with",
                        },
                        "variant": {
                            "type": VARIANT_ENUM,
                            "description": "Variant of the MediaItem to calculate srcSet with.",
                        },
                    },
                    "description": (
                        "The srcset attribute specifies the URL of the image to use in "
                        "different situations. It is a comma separated string of urls "
                        "and their widths."
                    ),
                    "resolve": self.resolve_src_set,
                },
            },
            description="Image metadata computed by the Performance Lab plugin.",
        )
        registry.register_interfaces_to_types([INTERFACE], self.settings.interface_targets)
        logger.info(
            "perflab.schema.registered",
            interface=INTERFACE,
            targets=list(self.settings.interface_targets),
        )

    # Resolvers ----------------------------------------------------------

    def resolve_dominant_color(
        self, source: MediaItemSource, args: Mapping[str, Any], info: Any = None
    ) -> str | None:
        metadata = self.library.get_metadata(source.database_id)
        if metadata is None:
            return None
        return format_dominant_color(metadata.dominant_color, args.get("format"))

    def resolve_has_transparency(
        self, source: MediaItemSource, args: Mapping[str, Any] | None = None, info: Any = None
    ) -> bool:
        metadata = self.library.get_metadata(source.database_id)
        return bool(metadata is not None and metadata.has_transparency)

    def resolve_src_set(
        self, source: MediaItemSource, args: Mapping[str, Any], info: Any = None
    ) -> str | None:
        size = args.get("size") or self.settings.default_size
        variant = args.get("variant") or self.settings.default_variant
        transform = variant_transform(variant, self.settings.variant_mime_types)

        src_set = self.calculator.srcset(source.database_id, size, transform=transform)
        return src_set or None


__all__ = [
    "DOMINANT_COLOR_FORMAT_ENUM",
    "INTERFACE",
    "PRIORITY",
    "PerformanceLabPlugin",
    "VARIANT_ENUM",
]
