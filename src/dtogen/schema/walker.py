# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from typing import Any, Literal, Mapping

from dtogen.exceptions import ShapeNameCollisionError, UnsupportedRootError
from dtogen.schema.classifier import classify
from dtogen.schema.naming import allocate_shape_name, field_identifier
from dtogen.schema.types import (
    FieldDescriptor,
    FieldKind,
    JsonValue,
    ShapeRegistry,
    WalkResult,
)

logger = logging.getLogger(__name__)

CollisionPolicy = Literal["overwrite", "error"]


def bind_shape(
    shapes: ShapeRegistry,
    shape_name: str,
    fields: list[FieldDescriptor],
    on_collision: CollisionPolicy = "overwrite",
) -> None:
    """
    Bind a field list to a shape name.

    A name that is already bound is replaced in place (last write wins) unless
    the policy is "error".
    """
    if shape_name in shapes:
        if on_collision == "error":
            raise ShapeNameCollisionError(shape_name)
        logger.warning(
            "Shape name %s is allocated more than once, keeping the last discovered shape",
            shape_name,
        )
    shapes[shape_name] = fields


def merge_shapes(
    target: ShapeRegistry,
    source: Mapping[str, list[FieldDescriptor]],
    on_collision: CollisionPolicy = "overwrite",
) -> None:
    for shape_name, fields in source.items():
        bind_shape(target, shape_name, fields, on_collision)


def walk_object(
    value: Mapping[str, Any],
    path_prefix: tuple[str, ...] = (),
    on_collision: CollisionPolicy = "overwrite",
) -> WalkResult:
    """
    Infer the fields of one object and every object shape nested below it.

    Args:
        value: The JSON object to walk
        path_prefix: Keys leading from the document root to this object
        on_collision: What to do when two nesting paths allocate the same name

    Returns:
        The fields of this object, in key order, and the flattened registry of
        all shapes discovered underneath it
    """
    fields: list[FieldDescriptor] = []
    shapes: ShapeRegistry = {}

    for key, item in value.items():
        classification = classify(item)

        if classification.is_structural:
            path = (*path_prefix, key)
            shape_name = allocate_shape_name(path)
            nested = walk_object(classification.representative, path, on_collision)

            bind_shape(shapes, shape_name, nested.fields, on_collision)
            merge_shapes(shapes, nested.shapes, on_collision)

            fields.append(
                FieldDescriptor(
                    source_key=key,
                    identifier=field_identifier(key),
                    is_array=classification.is_array,
                    kind=FieldKind.REFERENCE,
                    example_value=item,
                    shape_name=shape_name,
                )
            )
        else:
            fields.append(
                FieldDescriptor(
                    source_key=key,
                    identifier=field_identifier(key),
                    is_array=classification.is_array,
                    kind=classification.kind,
                    example_value=item,
                )
            )

    return WalkResult(fields=fields, shapes=shapes)


def build_shape_registry(
    document: JsonValue,
    root_name: str,
    on_collision: CollisionPolicy = "overwrite",
) -> ShapeRegistry:
    """
    Build the complete registry for one document, root shape first.
    """
    if not isinstance(document, dict):
        raise UnsupportedRootError(type(document).__name__)

    result = walk_object(document, (), on_collision)

    registry: ShapeRegistry = {root_name: result.fields}
    merge_shapes(registry, result.shapes, on_collision)

    logger.debug(
        "Discovered %d shape(s): %s", len(registry), ", ".join(registry.keys())
    )
    return registry
