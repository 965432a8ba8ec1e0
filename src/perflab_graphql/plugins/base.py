"""Base interfaces for schema plugins.

A plugin contributes types and fields to the schema when the type registry
initializes. Plugins are registered by key in a
:class:`~perflab_graphql.plugins.registry.PluginRegistry`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from ..schema.registry import TypeRegistry

PluginKey: TypeAlias = str


@runtime_checkable
class SchemaPlugin(Protocol):
    """Object registering its types into a :class:`TypeRegistry`."""

    def register_types(self, registry: "TypeRegistry") -> None:
        """Register enums, interfaces and fields with ``registry``."""
