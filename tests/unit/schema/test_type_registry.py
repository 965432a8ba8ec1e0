"""Unit coverage for the schema type registry."""

from __future__ import annotations

import pytest
from graphql import GraphQLEnumType, GraphQLInterfaceType, graphql_sync

from perflab_graphql.exceptions import DuplicateTypeError, SchemaRegistryError, UnknownTypeError
from perflab_graphql.schema.registry import ROOT_QUERY, TypeRegistry

pytestmark = pytest.mark.unit


def _registry_with_item() -> TypeRegistry:
    registry = TypeRegistry()
    registry.register_object_type(
        "Item",
        {"name": {"type": "String", "resolve": lambda source, args, info: source["name"]}},
    )
    registry.register_field(
        ROOT_QUERY,
        "item",
        {"type": "Item", "resolve": lambda source, args, info: {"name": "first"}},
    )
    return registry


def test_type_names_are_case_insensitive() -> None:
    registry = _registry_with_item()

    assert registry.has_type("item")
    assert registry.has_type("ITEM")
    assert registry.get_definition("iTeM").name == "Item"


def test_duplicate_registration_is_rejected() -> None:
    registry = _registry_with_item()

    with pytest.raises(DuplicateTypeError):
        registry.register_enum_type("item", {"A": {"value": "a"}})


def test_builtin_scalars_cannot_be_shadowed() -> None:
    with pytest.raises(DuplicateTypeError):
        TypeRegistry().register_object_type("String", {})


def test_interfaces_attach_once_across_spellings() -> None:
    registry = _registry_with_item()
    registry.register_interface_type("Named", {"label": {"type": "string"}})

    registry.register_interfaces_to_types(["Named"], ["item", "Item"])

    assert registry.get_definition("Item").interfaces == ["Named"]


def test_attaching_to_unknown_type_raises() -> None:
    registry = _registry_with_item()
    registry.register_interface_type("Named", {"label": {"type": "String"}})

    with pytest.raises(UnknownTypeError, match="'Missing'"):
        registry.register_interfaces_to_types("Named", "Missing")


def test_attaching_non_interface_raises() -> None:
    registry = _registry_with_item()

    with pytest.raises(SchemaRegistryError, match="not an interface"):
        registry.register_interfaces_to_types("Item", "RootQuery")


def test_objects_inherit_interface_fields() -> None:
    registry = _registry_with_item()
    registry.register_interface_type(
        "Named",
        {"label": {"type": "String", "resolve": lambda source, args, info: source["name"].upper()}},
    )
    registry.register_interfaces_to_types("Named", "Item")

    schema = registry.build_schema()
    result = graphql_sync(schema, "{ item { name label } }")

    assert result.errors is None
    assert result.data == {"item": {"name": "first", "label": "FIRST"}}
    assert isinstance(schema.get_type("Named"), GraphQLInterfaceType)


def test_enum_arguments_reach_resolvers_as_values() -> None:
    registry = TypeRegistry()
    registry.register_enum_type("Shade", {"DARK": {"value": "dark"}, "LIGHT": {"value": "light"}})
    registry.register_field(
        ROOT_QUERY,
        "shade",
        {
            "type": "String",
            "args": {"shade": {"type": "Shade"}},
            "resolve": lambda source, args, info: repr(args.get("shade")),
        },
    )

    schema = registry.build_schema()

    assert graphql_sync(schema, "{ shade(shade: DARK) }").data == {"shade": "'dark'"}
    assert graphql_sync(schema, "{ shade }").data == {"shade": "None"}
    assert isinstance(schema.get_type("Shade"), GraphQLEnumType)


def test_hooks_run_once_in_priority_order() -> None:
    registry = TypeRegistry()
    calls = []
    registry.add_hook(lambda r: calls.append("late"), priority=20)
    registry.add_hook(lambda r: calls.append("early"), priority=5)
    registry.add_hook(lambda r: calls.append("default"))

    registry.init()
    registry.init()

    assert calls == ["early", "default", "late"]


def test_unknown_field_type_fails_schema_build() -> None:
    registry = TypeRegistry()
    registry.register_field(ROOT_QUERY, "broken", {"type": ["list_of", "Nope"]})

    with pytest.raises(UnknownTypeError, match="'Nope'"):
        registry.build_schema()


def test_fields_cannot_be_added_to_enums() -> None:
    registry = TypeRegistry()
    registry.register_enum_type("Shade", {"DARK": {"value": "dark"}})

    with pytest.raises(SchemaRegistryError):
        registry.register_field("Shade", "oops", {"type": "String"})
