# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

JsonValue: TypeAlias = (
    None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    REFERENCE = "reference"

    @property
    def is_primitive(self) -> bool:
        return self is not FieldKind.REFERENCE


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One key of one object shape, as it will be rendered into a DTO class.

    Args:
        source_key: The JSON key, kept verbatim for the serialization name
        identifier: camelCase rendering of the key used as the property name
        is_array: Whether the JSON value was an array
        kind: Primitive kind, or REFERENCE when the value (or its first element) is an object
        example_value: The original JSON value, only used for documentation
        shape_name: Name of the referenced shape, set only for REFERENCE fields
    """

    source_key: str
    identifier: str
    is_array: bool
    kind: FieldKind
    example_value: Any = field(compare=False)
    shape_name: str | None = None

    def __post_init__(self) -> None:
        if not self.kind.is_primitive and not self.shape_name:
            raise ValueError(
                "Reference field %r must name the shape it points to"
                % self.source_key
            )
        if self.kind.is_primitive and self.shape_name is not None:
            raise ValueError(
                "Primitive field %r cannot carry a shape name (got %r)"
                % (self.source_key, self.shape_name)
            )

    @property
    def is_reference(self) -> bool:
        return self.kind is FieldKind.REFERENCE

    @property
    def type_name(self) -> str:
        if self.shape_name is not None:
            return self.shape_name
        return self.kind.value


ShapeRegistry: TypeAlias = dict[str, list[FieldDescriptor]]


@dataclass(frozen=True)
class WalkResult:
    fields: list[FieldDescriptor]
    shapes: ShapeRegistry
