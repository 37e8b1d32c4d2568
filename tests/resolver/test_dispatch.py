# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for routing schema nodes to the scalar, array and dictionary resolvers."""

from unittest.mock import patch

import pytest

from schematype.errors import NotATypeSchemaError, ResolutionError, UnsupportedShapeError
from schematype.model.descriptors import ArrayTypeRef, MapTypeRef, PrimitiveTypeRef, ScalarKind
from schematype.model.schema import SchemaNode
from schematype.registry.symbols import SymbolRegistry
from schematype.resolver import resolve

# ###############
# Helpers
# ###############


def _node(**data: object) -> SchemaNode:
    return SchemaNode.model_validate(data)


# ###############
# Contract violations
# ###############


class TestContractViolations:
    def test_reference_node_is_rejected(self) -> None:
        """A node that is still a $ref never reaches a resolver."""
        node = _node(**{"$ref": "accessor.schema.json", "type": ["integer"], "default": 5})
        with pytest.raises(UnsupportedShapeError, match="accessor.schema.json"):
            resolve("Accessor", node)

    def test_reference_checked_before_type(self) -> None:
        """A bare $ref without any type still reports the reference."""
        with pytest.raises(UnsupportedShapeError):
            resolve("Accessor", _node(**{"$ref": "accessor.schema.json"}))

    def test_missing_type_list(self) -> None:
        with pytest.raises(NotATypeSchemaError):
            resolve("Thing", _node(title="Thing"))

    def test_empty_type_list(self) -> None:
        with pytest.raises(NotATypeSchemaError):
            resolve("Thing", _node(type=[]))

    def test_errors_share_a_base_class(self) -> None:
        with pytest.raises(ResolutionError):
            resolve("Thing", _node(type=[]))

    def test_dictionary_value_schema_requires_object_type(self) -> None:
        node = _node(type=["array"], dictionaryValueType={"type": ["string"]})
        with pytest.raises(UnsupportedShapeError):
            resolve("Extras", node)

    def test_dictionary_value_schema_with_several_tags_is_rejected(self) -> None:
        node = _node(type=["object", "string"], dictionaryValueType={"type": ["string"]})
        with pytest.raises(UnsupportedShapeError):
            resolve("Extras", node)


# ###############
# Routing
# ###############


class TestRouting:
    def test_single_array_tag_routes_to_array_resolver(self) -> None:
        node = _node(type=["array"], items={"type": ["string"]})
        with patch("schematype.resolver.dispatch.resolve_array") as mock_array:
            resolve("Names", node)
        mock_array.assert_called_once()
        assert mock_array.call_args[0][0] == "Names"

    def test_array_resolves_to_array_type(self) -> None:
        descriptor = resolve("Names", _node(type=["array"], items={"type": ["string"]}))
        assert descriptor.type == ArrayTypeRef(element_type=PrimitiveTypeRef(primitive=ScalarKind.STRING))

    def test_array_among_several_tags_routes_to_scalar_resolver(self) -> None:
        """["array", "string"] is polymorphic and resolves to an opaque scalar."""
        descriptor = resolve("Mixed", _node(type=["array", "string"]))
        assert descriptor.type == PrimitiveTypeRef(primitive=ScalarKind.OPAQUE)

    def test_array_reference_tag_routes_to_scalar_resolver(self) -> None:
        node = _node(type=[{"$ref": "array"}])
        with patch("schematype.resolver.dispatch.resolve_scalar") as mock_scalar:
            resolve("Ref", node)
        mock_scalar.assert_called_once()

    def test_dictionary_shape_routes_to_dictionary_resolver(self) -> None:
        descriptor = resolve("Extras", _node(type=["object"], dictionaryValueType={"type": ["string"]}))
        assert descriptor.type == MapTypeRef(value_type=PrimitiveTypeRef(primitive=ScalarKind.STRING))

    def test_scalar_resolution_does_not_build_registry(self) -> None:
        """Non-enum scalars never touch the symbol registry."""
        with patch("schematype.resolver.context.get_default_registry") as mock_registry:
            resolve("Count", _node(type=["integer"], default=3))
        mock_registry.assert_not_called()

    def test_injected_registry_is_used(self, registry: SymbolRegistry) -> None:
        with patch("schematype.resolver.context.get_default_registry") as mock_registry:
            descriptor = resolve("Filter", _node(type=["integer"], enum=[9728]), registry=registry)
        mock_registry.assert_not_called()
        assert descriptor.dependent_type is not None
        assert descriptor.dependent_type.members[0].name == "NEAREST"
