"""Schema assembly."""

from .app import create_registry, create_schema

__all__ = ["create_registry", "create_schema"]
