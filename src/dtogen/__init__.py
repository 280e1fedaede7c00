# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dtogen.config import GeneratorConfig
    from dtogen.emitter import (
        generate_dto_files,
        generate_dto_sources,
        load_json_document,
        write_dto_files,
    )
    from dtogen.exceptions import (
        DtoGenError,
        InputDocumentError,
        MalformedDocumentError,
        OutputWriteError,
        ShapeNameCollisionError,
        UnsupportedRootError,
    )
    from dtogen.schema.classifier import Classification, classify
    from dtogen.schema.naming import allocate_shape_name, field_identifier
    from dtogen.schema.types import (
        FieldDescriptor,
        FieldKind,
        ShapeRegistry,
        WalkResult,
    )
    from dtogen.schema.walker import build_shape_registry, walk_object
    from dtogen.tools.typescript.dto_renderer import render_dto_class

    __all__ = [
        "GeneratorConfig",
        "generate_dto_files",
        "generate_dto_sources",
        "load_json_document",
        "write_dto_files",
        "DtoGenError",
        "InputDocumentError",
        "MalformedDocumentError",
        "OutputWriteError",
        "ShapeNameCollisionError",
        "UnsupportedRootError",
        "Classification",
        "classify",
        "allocate_shape_name",
        "field_identifier",
        "FieldDescriptor",
        "FieldKind",
        "ShapeRegistry",
        "WalkResult",
        "build_shape_registry",
        "walk_object",
        "render_dto_class",
    ]

__SPEC_PARENT__: str = __spec__.parent  # type: ignore
# A mapping of {<member name>: (package, <module name>, <real name>)} defining dynamic imports
_dynamic_imports: "dict[str, tuple[str, str, str | None]]" = {
    "GeneratorConfig": (__SPEC_PARENT__, "config", None),
    "generate_dto_files": (__SPEC_PARENT__, "emitter", None),
    "generate_dto_sources": (__SPEC_PARENT__, "emitter", None),
    "load_json_document": (__SPEC_PARENT__, "emitter", None),
    "write_dto_files": (__SPEC_PARENT__, "emitter", None),
    "DtoGenError": (__SPEC_PARENT__, "exceptions", None),
    "InputDocumentError": (__SPEC_PARENT__, "exceptions", None),
    "MalformedDocumentError": (__SPEC_PARENT__, "exceptions", None),
    "OutputWriteError": (__SPEC_PARENT__, "exceptions", None),
    "ShapeNameCollisionError": (__SPEC_PARENT__, "exceptions", None),
    "UnsupportedRootError": (__SPEC_PARENT__, "exceptions", None),
    "Classification": (__SPEC_PARENT__, "schema.classifier", None),
    "classify": (__SPEC_PARENT__, "schema.classifier", None),
    "allocate_shape_name": (__SPEC_PARENT__, "schema.naming", None),
    "field_identifier": (__SPEC_PARENT__, "schema.naming", None),
    "FieldDescriptor": (__SPEC_PARENT__, "schema.types", None),
    "FieldKind": (__SPEC_PARENT__, "schema.types", None),
    "ShapeRegistry": (__SPEC_PARENT__, "schema.types", None),
    "WalkResult": (__SPEC_PARENT__, "schema.types", None),
    "build_shape_registry": (__SPEC_PARENT__, "schema.walker", None),
    "walk_object": (__SPEC_PARENT__, "schema.walker", None),
    "render_dto_class": (__SPEC_PARENT__, "tools.typescript.dto_renderer", None),
}


def __getattr__(attr_name: str) -> object:

    dynamic_attr = _dynamic_imports.get(attr_name)
    if dynamic_attr is None:
        raise AttributeError(f"module {__name__!r} has no attribute {attr_name!r}")

    package, module_name, realname = dynamic_attr

    module = import_module(f"{package}.{module_name}", package=package)
    result = getattr(module, attr_name if realname is None else realname)
    g = globals()
    g[attr_name] = result
    for k, (_, v_module_name, v_realname) in _dynamic_imports.items():
        if v_module_name == module_name:
            g[k] = getattr(module, k if v_realname is None else v_realname)
    return result


def __dir__() -> "list[str]":
    return list(_dynamic_imports)
