"""Schema factory wiring the host media item types and the Performance Lab plugin."""

from __future__ import annotations

import structlog
from graphql import GraphQLSchema

from ..config import PerfLabSettings, load_settings
from ..media.library import MediaLibrary
from ..plugins.registry import PluginRegistry
from ..schema.media_item import MediaItemTypes
from ..schema.perflab import PRIORITY as PERFORMANCE_LAB_PRIORITY
from ..schema.perflab import PerformanceLabPlugin
from ..schema.registry import TypeRegistry

logger = structlog.get_logger(__name__)

HOST_TYPES_PRIORITY = 5


def _configure_plugins(
    plugins: PluginRegistry,
    *,
    library: MediaLibrary,
    settings: PerfLabSettings,
) -> None:
    """Register the default plugins unless the caller already provided them."""

    if PluginRegistry.MEDIA_ITEM_TYPES not in plugins.plugins:
        plugins.register(
            PluginRegistry.MEDIA_ITEM_TYPES,
            MediaItemTypes(library=library, settings=settings),
            priority=HOST_TYPES_PRIORITY,
        )
    if PluginRegistry.PERFORMANCE_LAB not in plugins.plugins:
        plugins.register(
            PluginRegistry.PERFORMANCE_LAB,
            PerformanceLabPlugin(library=library, settings=settings),
            priority=PERFORMANCE_LAB_PRIORITY,
        )


def create_registry(
    library: MediaLibrary,
    settings: PerfLabSettings | None = None,
    *,
    plugins: PluginRegistry | None = None,
) -> TypeRegistry:
    """Return a type registry with all plugins installed as hooks."""

    settings = settings or load_settings()
    plugins = plugins if plugins is not None else PluginRegistry()
    _configure_plugins(plugins, library=library, settings=settings)
    return plugins.install(TypeRegistry())


def create_schema(
    library: MediaLibrary,
    settings: PerfLabSettings | None = None,
    *,
    plugins: PluginRegistry | None = None,
) -> GraphQLSchema:
    """Build the executable schema for ``library``."""

    schema = create_registry(library, settings, plugins=plugins).build_schema()
    logger.info("perflab.schema.built", types=len(schema.type_map))
    return schema


__all__ = ["create_registry", "create_schema"]
