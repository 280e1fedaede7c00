# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from dtogen.config import DEFAULT_OUTPUT_DIR, DEFAULT_ROOT_NAME, GeneratorConfig
from dtogen.emitter import generate_dto_sources, load_json_document, write_dto_files
from dtogen.exceptions import DtoGenError
from dtogen.schema.walker import build_shape_registry

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(**kwargs: Any) -> GeneratorConfig:
    try:
        return GeneratorConfig(**kwargs)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise click.UsageError(f"Invalid configuration: {messages}") from e


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.argument(
    "input_path",
    type=click.Path(dir_okay=False),
    envvar="INPUT_PATH",
)
@click.argument(
    "output_dir",
    type=click.Path(file_okay=False, dir_okay=True),
    required=False,
    default=DEFAULT_OUTPUT_DIR,
    envvar="OUTPUT_DIR",
)
@click.argument(
    "root_name",
    type=str,
    required=False,
    default=DEFAULT_ROOT_NAME,
    envvar="ROOT_NAME",
)
@click.option(
    "--module-suffix",
    type=str,
    default=".dto",
    envvar="MODULE_SUFFIX",
    help="Suffix of the module name used in file names and nested imports [env: MODULE_SUFFIX]",
)
@click.option(
    "--file-extension",
    type=str,
    default=".ts",
    envvar="FILE_EXTENSION",
    help="Extension of the generated files [env: FILE_EXTENSION]",
)
@click.option(
    "--indent-size",
    type=click.IntRange(min=1),
    default=2,
    envvar="INDENT_SIZE",
    help="Number of spaces used to indent class members [env: INDENT_SIZE]",
)
@click.option(
    "--on-collision",
    type=click.Choice(["overwrite", "error"]),
    default="overwrite",
    envvar="ON_COLLISION",
    help="What to do when two nesting paths produce the same class name [env: ON_COLLISION]",
)
@click.option(
    "--stdout",
    is_flag=True,
    envvar="STDOUT",
    help="Print generated DTOs to stdout instead of writing files",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="LOG_LEVEL",
)
def gen_dto(
    input_path: str,
    output_dir: str,
    root_name: str,
    module_suffix: str,
    file_extension: str,
    indent_size: int,
    on_collision: str,
    stdout: bool,
    log_level: str,
) -> None:
    """
    Generate NestJS DTO classes from an example JSON document.

    One file is generated per object shape found in the document, the root
    object being named ROOT_NAME.

    Examples:

    \b
    # Write ./dtos/AppConnectionInfo.dto.ts and one file per nested object
    dtogen gen-dto input.json

    \b
    # Choose the output directory and the root class name
    dtogen gen-dto input.json src/dtos UserProfile
    """
    configure_logging(log_level)

    config = build_config(
        root_name=root_name,
        output_dir=Path(output_dir),
        module_suffix=module_suffix,
        file_extension=file_extension,
        indent=" " * indent_size,
        on_collision=on_collision,
    )

    try:
        document = load_json_document(input_path)
        rendered = generate_dto_sources(document, config)

        if stdout:
            for file_name, content in rendered.items():
                click.echo(f"// {file_name}")
                click.echo(content)
            return

        written = write_dto_files(rendered, config.output_dir)
    except DtoGenError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"Generated {len(written)} DTO file(s) at {str(config.output_dir.absolute())}"
    )


@cli.command()
@click.argument(
    "input_path",
    type=click.Path(dir_okay=False),
    envvar="INPUT_PATH",
)
@click.argument(
    "root_name",
    type=str,
    required=False,
    default=DEFAULT_ROOT_NAME,
    envvar="ROOT_NAME",
)
def shapes(input_path: str, root_name: str) -> None:
    """Print the object shapes inferred from an example JSON document."""

    try:
        document = load_json_document(input_path)
        registry = build_shape_registry(document, root_name)
    except DtoGenError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    for shape_name, fields in registry.items():
        click.echo(f"{shape_name} {{")
        for field in fields:
            suffix = "[]" if field.is_array else ""
            click.echo(f"  {field.identifier}: {field.type_name}{suffix}")
        click.echo("}")
