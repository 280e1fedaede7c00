# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import logging
from pathlib import Path
from typing import Mapping

from dtogen.config import GeneratorConfig
from dtogen.exceptions import (
    InputDocumentError,
    MalformedDocumentError,
    OutputWriteError,
)
from dtogen.schema.types import JsonValue, ShapeRegistry
from dtogen.schema.walker import build_shape_registry
from dtogen.tools.typescript.dto_renderer import render_dto_class

logger = logging.getLogger(__name__)


def reject_constant(constant: str) -> None:
    raise ValueError(f"{constant} is not valid JSON")


def load_json_document(path: str | Path) -> JsonValue:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as file:
            content = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputDocumentError(path, original_exception=e) from e

    try:
        return json.loads(content, parse_constant=reject_constant)
    except ValueError as e:
        raise MalformedDocumentError(path, original_exception=e) from e


def dto_file_name(shape_name: str, config: GeneratorConfig) -> str:
    return f"{shape_name}{config.module_suffix}{config.file_extension}"


def render_shape_registry(
    registry: ShapeRegistry, config: GeneratorConfig
) -> dict[str, str]:
    """
    Render every shape of the registry, keyed by its output file name.
    """
    rendered: dict[str, str] = {}
    for shape_name, fields in registry.items():
        logger.debug("Rendering %s (%d fields)", shape_name, len(fields))
        rendered[dto_file_name(shape_name, config)] = render_dto_class(
            shape_name, fields, config
        )
    return rendered


def generate_dto_sources(
    document: JsonValue, config: GeneratorConfig | None = None
) -> dict[str, str]:
    config = config or GeneratorConfig()
    registry = build_shape_registry(document, config.root_name, config.on_collision)
    return render_shape_registry(registry, config)


def write_dto_files(rendered: Mapping[str, str], output_dir: str | Path) -> list[Path]:
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(output_dir, original_exception=e) from e

    written: list[Path] = []
    for file_name, content in rendered.items():
        file_path = output_dir / file_name
        try:
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(file_path, original_exception=e) from e
        logger.info("Wrote %s", file_path)
        written.append(file_path)

    return written


def generate_dto_files(
    input_path: str | Path, config: GeneratorConfig | None = None
) -> list[Path]:
    """
    Generate one DTO file per shape found in the example document.

    Everything is inferred and rendered before the first file is written.
    """
    config = config or GeneratorConfig()
    document = load_json_document(input_path)
    rendered = generate_dto_sources(document, config)
    return write_dto_files(rendered, config.output_dir)
