"""Interfaces and registry for schema plugins."""

from .base import PluginKey, SchemaPlugin
from .registry import PluginRegistry

__all__ = ["PluginKey", "PluginRegistry", "SchemaPlugin"]
