"""GraphQL fields for Performance Lab image metadata.

Extends a media item schema with ``dominantColor``, ``hasTransparency`` and a
format-aware ``srcSet``. Use :func:`create_schema` with a
:class:`~perflab_graphql.media.library.MediaLibrary` to get an executable
``graphql-core`` schema.
"""

from .config import PerfLabSettings, load_settings
from .core.app import create_registry, create_schema
from .domain import ImageMetadata, ImageVariant, SizeEntry, select_variant
from .media import Attachment, InMemoryMediaLibrary, MediaItemModel, SrcSetCalculator
from .plugins import PluginRegistry, SchemaPlugin
from .schema import PerformanceLabPlugin, TypeRegistry

__version__ = "1.2.0"

__all__ = [
    "Attachment",
    "ImageMetadata",
    "ImageVariant",
    "InMemoryMediaLibrary",
    "MediaItemModel",
    "PerfLabSettings",
    "PerformanceLabPlugin",
    "PluginRegistry",
    "SchemaPlugin",
    "SizeEntry",
    "SrcSetCalculator",
    "TypeRegistry",
    "create_registry",
    "create_schema",
    "load_settings",
    "select_variant",
]
