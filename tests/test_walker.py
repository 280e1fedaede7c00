# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for shape discovery and the shape registry.
"""

import logging
from typing import Any

import pytest

from dtogen.exceptions import ShapeNameCollisionError, UnsupportedRootError
from dtogen.schema.types import FieldDescriptor, FieldKind
from dtogen.schema.walker import build_shape_registry, walk_object


class TestWalkObject:
    """Test suite for walk_object."""

    def test_primitive_only_object(self) -> None:
        """Test that a flat object produces one field per key, in key order."""
        result = walk_object({"name": "x", "count": 3, "enabled": False})

        assert [f.source_key for f in result.fields] == ["name", "count", "enabled"]
        assert [f.kind for f in result.fields] == [
            FieldKind.STRING,
            FieldKind.NUMBER,
            FieldKind.BOOLEAN,
        ]
        assert result.shapes == {}

    def test_nested_object_is_owned_by_the_result(self) -> None:
        result = walk_object({"a": {"b": {"c": 1}}})

        assert list(result.shapes) == ["A", "AB"]
        assert result.shapes["A"][0].shape_name == "AB"

    def test_path_prefix_is_used_for_names(self) -> None:
        result = walk_object({"b": {"c": 1}}, ("a",))

        assert result.fields[0].shape_name == "AB"
        assert list(result.shapes) == ["AB"]

    def test_identifiers_are_camel_cased(self) -> None:
        result = walk_object({"created_at": "2024-01-01"})

        field = result.fields[0]
        assert field.source_key == "created_at"
        assert field.identifier == "createdAt"

    def test_example_value_is_kept(self) -> None:
        value = [{"b": 1}, {"c": 2}]
        result = walk_object({"a": value})

        assert result.fields[0].example_value == value


class TestBuildShapeRegistry:
    """Test suite for build_shape_registry."""

    def test_primitive_only_document_has_single_shape(self) -> None:
        document = {"host": "localhost", "port": 80, "debug": True}

        registry = build_shape_registry(document, "Root")

        assert list(registry) == ["Root"]
        assert len(registry["Root"]) == len(document)
        assert [f.source_key for f in registry["Root"]] == list(document)

    def test_nested_object_produces_reference(self) -> None:
        registry = build_shape_registry({"a": {"b": 1}}, "R")

        assert list(registry) == ["R", "A"]
        assert registry["R"] == [
            FieldDescriptor(
                source_key="a",
                identifier="a",
                is_array=False,
                kind=FieldKind.REFERENCE,
                example_value={"b": 1},
                shape_name="A",
            )
        ]
        assert registry["A"] == [
            FieldDescriptor(
                source_key="b",
                identifier="b",
                is_array=False,
                kind=FieldKind.NUMBER,
                example_value=1,
            )
        ]

    def test_array_of_objects_uses_first_element(self) -> None:
        registry = build_shape_registry({"a": [{"b": 1}, {"c": 2}]}, "R")

        field = registry["R"][0]
        assert field.is_array is True
        assert field.kind == FieldKind.REFERENCE
        assert field.shape_name == "A"
        assert [f.source_key for f in registry["A"]] == ["b"]
        assert all(
            f.source_key != "c" for fields in registry.values() for f in fields
        )

    def test_empty_array_is_string_array(self) -> None:
        registry = build_shape_registry({"a": []}, "R")

        field = registry["R"][0]
        assert field.is_array is True
        assert field.kind == FieldKind.STRING
        assert field.shape_name is None

    def test_null_is_object_primitive(self) -> None:
        registry = build_shape_registry({"a": None}, "R")

        field = registry["R"][0]
        assert field.kind == FieldKind.OBJECT
        assert field.is_array is False
        assert field.shape_name is None
        assert list(registry) == ["R"]

    def test_key_permutation_permutes_fields(self) -> None:
        first = {"z": 1, "a": {"y": "s"}, "m": [True]}
        second = {"m": [True], "z": 1, "a": {"y": "s"}}

        first_keys = [f.source_key for f in build_shape_registry(first, "R")["R"]]
        second_keys = [f.source_key for f in build_shape_registry(second, "R")["R"]]

        assert first_keys == list(first)
        assert second_keys == list(second)

    def test_registry_is_flattened_in_discovery_order(
        self, connection_document: dict[str, Any]
    ) -> None:
        registry = build_shape_registry(connection_document, "AppConnectionInfo")

        assert list(registry) == ["AppConnectionInfo", "Credentials", "Replicas"]
        assert [f.identifier for f in registry["Credentials"]] == [
            "userName",
            "password",
        ]
        assert [f.source_key for f in registry["Replicas"]] == ["host", "lag_ms"]

    def test_non_ascii_siblings_get_distinct_shapes(self) -> None:
        document = {
            "имя": {"a": 1},
            "город": {"b": 2},
            "café": {"c": 3},
            "caf": {"d": 4},
        }

        registry = build_shape_registry(document, "R", on_collision="error")

        assert list(registry) == ["R", "Имя", "Город", "Café", "Caf"]
        assert [f.source_key for f in registry["Café"]] == ["c"]
        assert [f.source_key for f in registry["Caf"]] == ["d"]
        assert [f.identifier for f in registry["R"]] == ["имя", "город", "café", "caf"]

    def test_non_object_root_is_rejected(self) -> None:
        with pytest.raises(UnsupportedRootError) as exc_info:
            build_shape_registry([{"a": 1}], "R")

        assert exc_info.value.value_type == "list"


class TestNameCollisions:
    """Test suite for shape name collisions."""

    document = {"a_b": {"first": 1}, "a": {"b": {"second": "x"}}}

    def test_last_write_wins_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dtogen.schema.walker"):
            registry = build_shape_registry(self.document, "R")

        assert list(registry) == ["R", "AB", "A"]
        assert [f.source_key for f in registry["AB"]] == ["second"]
        assert "AB" in caplog.text

    def test_root_name_can_be_overwritten(self) -> None:
        registry = build_shape_registry({"r": {"nested": 1}}, "R")

        assert list(registry) == ["R"]
        assert [f.source_key for f in registry["R"]] == ["nested"]

    def test_error_policy_raises(self) -> None:
        with pytest.raises(ShapeNameCollisionError) as exc_info:
            build_shape_registry(self.document, "R", on_collision="error")

        assert exc_info.value.shape_name == "AB"

    def test_error_policy_accepts_distinct_names(self) -> None:
        registry = build_shape_registry({"a": {"b": 1}}, "R", on_collision="error")

        assert list(registry) == ["R", "A"]


class TestFieldDescriptor:
    """Test suite for the FieldDescriptor invariant."""

    def test_reference_requires_shape_name(self) -> None:
        with pytest.raises(ValueError):
            FieldDescriptor("a", "a", False, FieldKind.REFERENCE, {})

    def test_primitive_rejects_shape_name(self) -> None:
        with pytest.raises(ValueError):
            FieldDescriptor("a", "a", False, FieldKind.STRING, "x", shape_name="A")

    def test_primitive_kinds(self) -> None:
        assert FieldKind.OBJECT.is_primitive
        assert FieldKind.STRING.is_primitive
        assert not FieldKind.REFERENCE.is_primitive

    def test_type_name(self) -> None:
        primitive = FieldDescriptor("a", "a", True, FieldKind.NUMBER, [1])
        reference = FieldDescriptor("b", "b", False, FieldKind.REFERENCE, {}, "B")

        assert primitive.type_name == "number"
        assert reference.type_name == "B"
