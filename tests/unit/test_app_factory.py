from __future__ import annotations

import pytest
from graphql import graphql_sync

from perflab_graphql.core.app import create_registry, create_schema
from perflab_graphql.plugins import PluginRegistry
from perflab_graphql.schema.media_item import MediaItemTypes
from perflab_graphql.schema.perflab import PerformanceLabPlugin
from tests.mocks.media import JPEG_PHOTO_ID

pytestmark = pytest.mark.unit


def test_create_registry_installs_default_plugins(library, settings) -> None:
    plugins = PluginRegistry()

    create_registry(library, settings, plugins=plugins)

    assert isinstance(plugins.resolve(PluginRegistry.MEDIA_ITEM_TYPES), MediaItemTypes)
    assert isinstance(plugins.resolve(PluginRegistry.PERFORMANCE_LAB), PerformanceLabPlugin)


def test_create_schema_keeps_caller_plugins(library, settings) -> None:
    custom = PerformanceLabPlugin(library=library, settings=settings.model_copy(update={"default_size": "large"}))
    plugins = PluginRegistry()
    plugins.register(PluginRegistry.PERFORMANCE_LAB, custom)

    schema = create_schema(library, settings, plugins=plugins)
    result = graphql_sync(schema, "{ mediaItem(id: %d) { srcSet } }" % JPEG_PHOTO_ID)

    assert result.errors is None
    assert "photo-1024x683.jpg 1024w, " in result.data["mediaItem"]["srcSet"]
    assert result.data["mediaItem"]["srcSet"].startswith(
        "https://cdn.example.test/wp-content/uploads/2024/05/photo-1024x683.jpg"
    )
