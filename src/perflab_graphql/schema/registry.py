"""Schema type registry the extension registers its types into.

Types are recorded as plain definitions and only turned into ``graphql-core``
types when the schema is built, so interfaces can be attached to object types
registered by someone else. Type names are case-insensitive: ``mediaItem`` and
``MediaItem`` refer to the same type.

Field configs are mappings::

    {
        "type": "String",                    # or ["non_null", "Int"], ["list_of", T]
        "args": {"size": {"type": "MediaItemSizeEnum", "default": "medium"}},
        "description": "...",
        "resolve": callable(source, args, info),
    }
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

import structlog
from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
    Undefined,
)

from ..exceptions import DuplicateTypeError, SchemaRegistryError, UnknownTypeError

logger = structlog.get_logger(__name__)

ROOT_QUERY = "RootQuery"

FieldResolver = Callable[[Any, Mapping[str, Any], GraphQLResolveInfo], Any]
RegistrationHook = Callable[["TypeRegistry"], None]
TypeReference = str | Sequence[Any]

_SCALARS: dict[str, GraphQLNamedType] = {
    "string": GraphQLString,
    "boolean": GraphQLBoolean,
    "int": GraphQLInt,
    "float": GraphQLFloat,
    "id": GraphQLID,
}


class TypeKind(str, Enum):
    OBJECT = "object"
    INTERFACE = "interface"
    ENUM = "enum"


@dataclass(slots=True)
class TypeDefinition:
    """Registered, not yet built, schema type."""

    kind: TypeKind
    name: str
    description: str | None = None
    fields: dict[str, Mapping[str, Any]] = field(default_factory=dict)
    values: dict[str, Mapping[str, Any]] = field(default_factory=dict)
    interfaces: list[str] = field(default_factory=list)


@dataclass(order=True, slots=True)
class _Hook:
    priority: int
    sequence: int
    callback: RegistrationHook = field(compare=False)


def _adapt_resolver(resolve: FieldResolver | None) -> Callable[..., Any] | None:
    if resolve is None:
        return None

    def resolver(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        return resolve(source, args, info)

    return resolver


class TypeRegistry:
    """Collects type definitions and builds a :class:`GraphQLSchema`."""

    def __init__(self) -> None:
        self._definitions: dict[str, TypeDefinition] = {}
        self._hooks: list[_Hook] = []
        self._sequence = itertools.count()
        self._initialized = False
        self._built: dict[str, GraphQLNamedType] = {}
        self.register_object_type(ROOT_QUERY, {}, description="The root entry point into the Graph")

    # Registration hooks -------------------------------------------------

    def add_hook(self, callback: RegistrationHook, *, priority: int = 10) -> None:
        """Run ``callback(registry)`` when the registry initializes."""

        self._hooks.append(_Hook(priority, next(self._sequence), callback))

    def init(self) -> "TypeRegistry":
        """Fire registration hooks once, lowest priority first."""

        if self._initialized:
            return self
        self._initialized = True
        for hook in sorted(self._hooks):
            hook.callback(self)
        logger.info(
            "perflab.registry.initialized",
            hooks=len(self._hooks),
            types=len(self._definitions),
        )
        return self

    # Type registration --------------------------------------------------

    def register_enum_type(
        self,
        name: str,
        values: Mapping[str, Mapping[str, Any]],
        *,
        description: str | None = None,
    ) -> None:
        self._add(
            TypeDefinition(
                TypeKind.ENUM,
                name,
                description,
                values={key: dict(value) for key, value in values.items()},
            )
        )

    def register_interface_type(
        self,
        name: str,
        fields: Mapping[str, Mapping[str, Any]],
        *,
        description: str | None = None,
    ) -> None:
        self._add(TypeDefinition(TypeKind.INTERFACE, name, description, fields=dict(fields)))

    def register_object_type(
        self,
        name: str,
        fields: Mapping[str, Mapping[str, Any]],
        *,
        interfaces: Iterable[str] = (),
        description: str | None = None,
    ) -> None:
        self._add(
            TypeDefinition(
                TypeKind.OBJECT,
                name,
                description,
                fields=dict(fields),
                interfaces=list(interfaces),
            )
        )

    def register_field(
        self, type_name: str, field_name: str, config: Mapping[str, Any]
    ) -> None:
        """Add ``field_name`` to an object or interface type."""

        definition = self._definition(type_name)
        if definition.kind is TypeKind.ENUM:
            raise SchemaRegistryError(f"cannot add field '{field_name}' to enum '{definition.name}'")
        definition.fields[field_name] = dict(config)
        self._built.clear()

    def register_interfaces_to_types(
        self, interfaces: str | Iterable[str], types: str | Iterable[str]
    ) -> None:
        """Make every type in ``types`` implement every interface.

        Attaching an interface twice (for example through two spellings of
        the same type name) is a no-op.
        """

        interface_names = [interfaces] if isinstance(interfaces, str) else list(interfaces)
        type_names = [types] if isinstance(types, str) else list(types)

        resolved = []
        for interface_name in interface_names:
            interface = self._definition(interface_name)
            if interface.kind is not TypeKind.INTERFACE:
                raise SchemaRegistryError(f"'{interface.name}' is not an interface type")
            resolved.append(interface)

        for type_name in type_names:
            definition = self._definition(type_name)
            if definition.kind is TypeKind.ENUM:
                raise SchemaRegistryError(f"enum '{definition.name}' cannot implement interfaces")
            for interface in resolved:
                if interface.name not in definition.interfaces:
                    definition.interfaces.append(interface.name)
                    logger.debug(
                        "perflab.registry.interface_attached",
                        interface=interface.name,
                        type=definition.name,
                    )
        self._built.clear()

    # Lookup -------------------------------------------------------------

    def has_type(self, name: str) -> bool:
        return name.lower() in self._definitions or name.lower() in _SCALARS

    def get_definition(self, name: str) -> TypeDefinition:
        return self._definition(name)

    def get_type(self, name: str) -> GraphQLNamedType:
        """Return the built ``graphql-core`` type for ``name``."""

        key = name.lower()
        if key in _SCALARS:
            return _SCALARS[key]
        if key not in self._built:
            self._built[key] = self._build(self._definition(name))
        return self._built[key]

    def build_schema(self) -> GraphQLSchema:
        """Initialize the registry and build the executable schema."""

        self.init()
        self._check_references()
        types = [self.get_type(definition.name) for definition in self._definitions.values()]
        query = self.get_type(ROOT_QUERY)
        assert isinstance(query, GraphQLObjectType)
        return GraphQLSchema(query=query, types=types)

    # Internals ----------------------------------------------------------

    def _add(self, definition: TypeDefinition) -> None:
        key = definition.name.lower()
        if key in self._definitions or key in _SCALARS:
            raise DuplicateTypeError(f"type '{definition.name}' is already registered")
        self._definitions[key] = definition
        self._built.clear()
        logger.debug("perflab.registry.type_registered", type=definition.name, kind=definition.kind.value)

    def _definition(self, name: str) -> TypeDefinition:
        try:
            return self._definitions[name.lower()]
        except KeyError:
            raise UnknownTypeError(f"type '{name}' is not registered") from None

    def _fields_of(self, definition: TypeDefinition) -> dict[str, Mapping[str, Any]]:
        merged: dict[str, Mapping[str, Any]] = {}
        for interface_name in definition.interfaces:
            merged.update(self._definition(interface_name).fields)
        merged.update(definition.fields)
        return merged

    def _check_references(self) -> None:
        for definition in self._definitions.values():
            for interface_name in definition.interfaces:
                self._definition(interface_name)
            for config in self._fields_of(definition).values():
                self._named_reference(config["type"])
                for arg in config.get("args", {}).values():
                    self._named_reference(arg["type"])

    def _named_reference(self, reference: TypeReference) -> str:
        if isinstance(reference, str):
            if reference.lower() not in _SCALARS:
                self._definition(reference)
            return reference
        _, inner = reference
        return self._named_reference(inner)

    def _reference(self, reference: TypeReference) -> Any:
        if isinstance(reference, str):
            return self.get_type(reference)
        wrapper, inner = reference
        if wrapper == "non_null":
            return GraphQLNonNull(self._reference(inner))
        if wrapper == "list_of":
            return GraphQLList(self._reference(inner))
        raise SchemaRegistryError(f"unknown type wrapper '{wrapper}'")

    def _build_field(self, config: Mapping[str, Any]) -> GraphQLField:
        args = {
            name: GraphQLArgument(
                self._reference(arg["type"]),
                default_value=arg.get("default", Undefined),
                description=arg.get("description"),
            )
            for name, arg in config.get("args", {}).items()
        }
        return GraphQLField(
            self._reference(config["type"]),
            args=args,
            resolve=_adapt_resolver(config.get("resolve")),
            description=config.get("description"),
        )

    def _build(self, definition: TypeDefinition) -> GraphQLNamedType:
        if definition.kind is TypeKind.ENUM:
            return GraphQLEnumType(
                definition.name,
                {
                    key: GraphQLEnumValue(
                        value.get("value", key), description=value.get("description")
                    )
                    for key, value in definition.values.items()
                },
                description=definition.description,
            )

        def fields() -> dict[str, GraphQLField]:
            return {
                name: self._build_field(config)
                for name, config in self._fields_of(definition).items()
            }

        def interfaces() -> list[GraphQLInterfaceType]:
            return [self.get_type(name) for name in definition.interfaces]  # type: ignore[misc]

        if definition.kind is TypeKind.INTERFACE:
            return GraphQLInterfaceType(
                definition.name, fields, interfaces=interfaces, description=definition.description
            )
        return GraphQLObjectType(
            definition.name, fields, interfaces=interfaces, description=definition.description
        )


__all__ = [
    "FieldResolver",
    "ROOT_QUERY",
    "RegistrationHook",
    "TypeDefinition",
    "TypeKind",
    "TypeRegistry",
]
