# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path


class DtoGenError(Exception):
    """Base exception for DTO generation errors."""


class InputDocumentError(DtoGenError):
    """The example document could not be read."""

    def __init__(self, path: str | Path, *, original_exception: Exception) -> None:
        self.path = Path(path)
        self.original_exception = original_exception
        super().__init__(f"Could not read {self.path}: {original_exception}")


class MalformedDocumentError(InputDocumentError):
    """The example document is not valid JSON."""

    def __init__(self, path: str | Path, *, original_exception: Exception) -> None:
        super().__init__(path, original_exception=original_exception)
        self.args = (f"Malformed JSON in {self.path}: {original_exception}",)


class UnsupportedRootError(DtoGenError):

    def __init__(self, value_type: str) -> None:
        self.value_type = value_type
        super().__init__(
            f"The root of the example document must be a JSON object (it is {value_type})"
        )


class ShapeNameCollisionError(DtoGenError):

    def __init__(self, shape_name: str) -> None:
        self.shape_name = shape_name
        super().__init__(
            f"Shape name {shape_name!r} was allocated by more than one nesting path"
        )


class OutputWriteError(DtoGenError):

    def __init__(self, path: str | Path, *, original_exception: Exception) -> None:
        self.path = Path(path)
        self.original_exception = original_exception
        super().__init__(f"Could not write {self.path}: {original_exception}")
