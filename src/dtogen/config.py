# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

DEFAULT_ROOT_NAME = "AppConnectionInfo"
DEFAULT_OUTPUT_DIR = "./dtos"


class GeneratorConfig(BaseModel):
    """
    Settings for one DTO generation run.
    """

    model_config = ConfigDict(frozen=True)

    root_name: str = DEFAULT_ROOT_NAME
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    module_suffix: str = ".dto"
    file_extension: str = ".ts"
    indent: str = "  "
    on_collision: Literal["overwrite", "error"] = "overwrite"

    @field_validator("root_name")
    @classmethod
    def validate_root_name(cls, value: str) -> str:
        if not IDENTIFIER_PATTERN.match(value):
            raise ValueError(f"{value!r} is not a valid TypeScript class name")
        return value

    @field_validator("module_suffix", "file_extension")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError(f"{value!r} must start with a dot")
        return value

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, value: str) -> str:
        if not value or value.strip():
            raise ValueError("indent must be a non-empty run of whitespace")
        return value
