"""Registry of schema plugins keyed by :data:`PluginKey`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Mapping

from ..schema.registry import TypeRegistry
from .base import PluginKey, SchemaPlugin


@dataclass(slots=True)
class PluginRegistry:
    """Keeps schema plugins and installs them as registration hooks."""

    MEDIA_ITEM_TYPES: ClassVar[PluginKey] = "schema.media_item"
    PERFORMANCE_LAB: ClassVar[PluginKey] = "schema.performance_lab"

    plugins: Dict[PluginKey, SchemaPlugin] = field(default_factory=dict)
    priorities: Dict[PluginKey, int] = field(default_factory=dict)

    def register(self, key: PluginKey, plugin: SchemaPlugin, *, priority: int = 10) -> None:
        """Register ``plugin`` to run at ``priority`` when types are registered."""

        if not isinstance(plugin, SchemaPlugin):
            raise TypeError(f"plugin '{key}' does not implement register_types()")
        self.plugins[key] = plugin
        self.priorities[key] = priority

    def resolve(self, key: PluginKey) -> SchemaPlugin:
        return self.plugins[key]

    def install(self, type_registry: TypeRegistry) -> TypeRegistry:
        """Add every plugin's ``register_types`` as a hook of ``type_registry``."""

        for key, plugin in self.plugins.items():
            type_registry.add_hook(plugin.register_types, priority=self.priorities[key])
        return type_registry

    def snapshot(self) -> Mapping[PluginKey, SchemaPlugin]:
        """Immutable snapshot of registered plugins."""

        return dict(self.plugins)
