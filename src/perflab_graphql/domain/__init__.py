"""Domain models and pure transforms over attachment metadata."""

from .colors import DominantColorFormat, format_dominant_color
from .metadata import FormatSource, ImageMetadata, SizeEntry
from .variants import (
    DEFAULT_VARIANT_MIME_TYPES,
    FormatSubstitution,
    ImageVariant,
    MetadataTransform,
    WEBP_MIME_TYPE,
    select_variant,
    variant_transform,
)

__all__ = [
    "DEFAULT_VARIANT_MIME_TYPES",
    "DominantColorFormat",
    "FormatSource",
    "FormatSubstitution",
    "ImageMetadata",
    "ImageVariant",
    "MetadataTransform",
    "SizeEntry",
    "WEBP_MIME_TYPE",
    "format_dominant_color",
    "select_variant",
    "variant_transform",
]
