"""Classify what a path refers to without following symlinks."""

from __future__ import annotations

import os
import stat

from .errors import InvalidPathError, wrap_os_error
from .types import PathKind


def check_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` as a string, rejecting paths no filesystem accepts."""
    raw = os.fspath(path)
    if not raw:
        raise InvalidPathError("Path must not be empty", raw)
    if "\0" in raw:
        raise InvalidPathError(f"Path contains a null byte: {raw!r}", None, {"path": repr(raw)})
    return raw


def classify(path: str | os.PathLike[str], *, follow_symlinks: bool = False) -> PathKind:
    """Report whether ``path`` is missing, a file, a directory or a symlink.

    By default the link itself is inspected, not its target. With
    ``follow_symlinks=True`` a link reports the kind of what it points at, and
    a dangling link reports MISSING.

    Only "does not exist" maps to MISSING; every other failure (permission
    denied, an ancestor that is not a directory) raises PathIOError.
    """
    raw = check_path(path)
    try:
        st = os.stat(raw, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        return PathKind.MISSING
    except OSError as err:
        raise wrap_os_error(err, raw, "stat") from err

    if stat.S_ISLNK(st.st_mode):
        return PathKind.SYMLINK
    if stat.S_ISDIR(st.st_mode):
        return PathKind.DIRECTORY
    return PathKind.FILE


def is_directory(path: str | os.PathLike[str]) -> bool:
    """True when ``path`` is a directory, directly or through a symlink."""
    return classify(path, follow_symlinks=True) is PathKind.DIRECTORY
