# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from typing import Any

from dtogen.schema.types import FieldKind, JsonValue


@dataclass(frozen=True)
class Classification:
    kind: FieldKind
    is_array: bool = False
    representative: Any = None

    @property
    def is_structural(self) -> bool:
        return self.kind is FieldKind.REFERENCE


def primitive_kind(value: JsonValue) -> FieldKind:
    """
    Runtime type tag of a JSON value.

    null and arrays are both tagged "object", the same tag a plain object gets.
    """
    if isinstance(value, bool):
        return FieldKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldKind.NUMBER
    if isinstance(value, str):
        return FieldKind.STRING
    return FieldKind.OBJECT


def classify(value: JsonValue) -> Classification:
    """
    Determine how a JSON value is typed in a generated DTO.

    Arrays are typed by their first element only; an empty array is typed as
    an array of strings.
    """
    if isinstance(value, dict):
        return Classification(FieldKind.REFERENCE, representative=value)

    if isinstance(value, list):
        if not value:
            return Classification(FieldKind.STRING, is_array=True)

        first = value[0]
        if isinstance(first, dict):
            return Classification(
                FieldKind.REFERENCE, is_array=True, representative=first
            )
        return Classification(
            primitive_kind(first), is_array=True, representative=first
        )

    return Classification(primitive_kind(value), representative=value)
