"""Failure taxonomy for directory creation and tree copying."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .types import ErrorKind


class FsError(Exception):
    """Base class for every failure raised by treecopy.

    Carries the path the failure concerns and any extra context in ``details``.
    """

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path else None
        self.details = details or {}


class NotFoundError(FsError):
    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(FsError):
    kind = ErrorKind.ALREADY_EXISTS


class AlreadyExistsAsNonDirectoryError(FsError):
    kind = ErrorKind.ALREADY_EXISTS_AS_NON_DIRECTORY


class TypeMismatchError(FsError):
    kind = ErrorKind.TYPE_MISMATCH


class InvalidPathError(FsError):
    kind = ErrorKind.INVALID_PATH


class PathIOError(FsError):
    """An underlying filesystem call failed for a reason outside the taxonomy."""

    kind = ErrorKind.IO_ERROR

    @property
    def errno(self) -> int | None:
        cause = self.__cause__
        return cause.errno if isinstance(cause, OSError) else None


def wrap_os_error(err: OSError, path: str | os.PathLike[str], action: str) -> PathIOError:
    """Build a PathIOError for ``err``; raise it with ``from err`` to keep the chain."""
    reason = err.strerror or str(err)
    return PathIOError(f"{action} failed for '{os.fspath(path)}': {reason}", path, {"errno": err.errno})
