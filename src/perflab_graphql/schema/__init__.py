"""GraphQL schema registration."""

from .media_item import (
    MEDIA_ITEM,
    SIZE_ENUM,
    MediaItemTypes,
    register_media_item_types,
    register_size_enum,
    safe_enum_name,
)
from .perflab import DOMINANT_COLOR_FORMAT_ENUM, INTERFACE, VARIANT_ENUM, PerformanceLabPlugin
from .registry import ROOT_QUERY, TypeDefinition, TypeKind, TypeRegistry

__all__ = [
    "DOMINANT_COLOR_FORMAT_ENUM",
    "INTERFACE",
    "MEDIA_ITEM",
    "MediaItemTypes",
    "PerformanceLabPlugin",
    "ROOT_QUERY",
    "SIZE_ENUM",
    "TypeDefinition",
    "TypeKind",
    "TypeRegistry",
    "VARIANT_ENUM",
    "register_media_item_types",
    "register_size_enum",
    "safe_enum_name",
]
