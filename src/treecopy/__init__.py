"""Directory creation and cp-style recursive copying."""

from __future__ import annotations

from .classify import classify, is_directory
from .copy import copy_tree, cp
from .ensure_dir import ensure_dir, mkdir
from .errors import (
    AlreadyExistsAsNonDirectoryError,
    AlreadyExistsError,
    FsError,
    InvalidPathError,
    NotFoundError,
    PathIOError,
    TypeMismatchError,
)
from .operations import cp_async, mkdir_async, try_cp, try_mkdir
from .resolve import resolve_destination
from .types import CopyOptions, ErrorKind, OperationResult, PathKind

__all__ = [
    # classify
    "classify",
    "is_directory",
    # copy
    "copy_tree",
    "cp",
    # ensure_dir
    "ensure_dir",
    "mkdir",
    # errors
    "AlreadyExistsAsNonDirectoryError",
    "AlreadyExistsError",
    "FsError",
    "InvalidPathError",
    "NotFoundError",
    "PathIOError",
    "TypeMismatchError",
    # operations
    "cp_async",
    "mkdir_async",
    "try_cp",
    "try_mkdir",
    # resolve
    "resolve_destination",
    # types
    "CopyOptions",
    "ErrorKind",
    "OperationResult",
    "PathKind",
]
