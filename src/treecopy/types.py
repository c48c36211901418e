"""Domain types for directory creation and tree copying."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class PathKind(str, Enum):
    """What a path refers to at the moment it was inspected."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    ALREADY_EXISTS_AS_NON_DIRECTORY = "already_exists_as_non_directory"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_PATH = "invalid_path"
    IO_ERROR = "io_error"


class CopyOptions(BaseModel):
    # Overwrite existing destination files. Directories are always merged.
    force: bool = False


class OperationResult(BaseModel):
    success: bool
    operation: Literal["mkdir", "cp"]
    path: str | None = None
    source: str | None = None
    dest: str | None = None
    created: list[str] | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
