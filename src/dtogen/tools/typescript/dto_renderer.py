# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import importlib.resources
import json
from functools import cache
from typing import Sequence

from mako.template import Template

from dtogen.config import GeneratorConfig
from dtogen.schema.types import FieldDescriptor, FieldKind

LIBRARY_FILES_PATH = importlib.resources.files("dtogen") / "files"
DTO_TEMPLATE_PATH = LIBRARY_FILES_PATH / "dto.ts.mako"

BASE_IMPORTS = [
    "import { ApiProperty } from '@nestjs/swagger';",
    "import { Expose, Type } from 'class-transformer';",
    "import { IsArray, IsBoolean, IsNumber, IsObject, IsString, ValidateNested } from 'class-validator';",
]

TYPE_TO_VALIDATOR: dict[str, str] = {
    "string": "IsString",
    "number": "IsNumber",
    "boolean": "IsBoolean",
    "object": "IsObject",
    "array": "IsArray",
}

DEFAULT_VALIDATOR = "IsString"


@cache
def get_dto_template() -> Template:
    return Template(filename=str(DTO_TEMPLATE_PATH))


def validator_for(kind: FieldKind | str) -> str:
    key = kind.value if isinstance(kind, FieldKind) else kind
    return TYPE_TO_VALIDATOR.get(key, DEFAULT_VALIDATOR)


def format_example(value: object) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def escape_single_quoted(value: str) -> str:
    # json.dumps escapes backslashes and control characters but leaves line
    # and paragraph separators as they are
    escaped = json.dumps(value, ensure_ascii=False)[1:-1]
    return (
        escaped.replace("'", "\\'")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def render_field(field: FieldDescriptor, indent: str = "  ") -> str:
    """
    Render the decorators and the property declaration of one field.

    Each line gets the indent; continuation lines of a multi-line example
    are left as json.dumps produced them.
    """
    each = "{ each: true }" if field.is_array else ""

    lines = [
        f"@ApiProperty({{ example: {format_example(field.example_value)} }})",
        f"@Expose({{ name: '{escape_single_quoted(field.source_key)}' }})",
    ]

    if field.is_reference:
        lines.append(f"@ValidateNested({each})")
        lines.append(f"@Type(() => {field.shape_name})")
    else:
        if field.is_array:
            lines.append("@IsArray()")
        lines.append(f"@{validator_for(field.kind)}({each})")

    lines.append(
        f"{field.identifier}: {field.type_name}{'[]' if field.is_array else ''};"
    )

    return "\n".join(f"{indent}{line}" for line in lines)


def reference_imports(
    fields: Sequence[FieldDescriptor], module_suffix: str = ".dto"
) -> list[str]:
    """
    One import per referencing field, in field order.

    Fields referencing the same shape each produce their own (identical) line.
    """
    return [
        f"import {{ {field.shape_name} }} from './{field.shape_name}{module_suffix}';"
        for field in fields
        if field.is_reference
    ]


def render_dto_class(
    shape_name: str,
    fields: Sequence[FieldDescriptor],
    config: GeneratorConfig | None = None,
) -> str:
    config = config or GeneratorConfig()

    imports = [*BASE_IMPORTS, *reference_imports(fields, config.module_suffix)]
    body = "\n\n".join(render_field(field, config.indent) for field in fields)

    return str(
        get_dto_template().render(
            imports=imports,
            class_name=shape_name,
            body=body,
        )
    )
