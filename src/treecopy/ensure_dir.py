"""Recursive, idempotent directory creation (``mkdir -p``)."""

from __future__ import annotations

import os
from pathlib import Path

from treecopy.infrastructure.logger import logger

from .classify import check_path, classify, is_directory
from .errors import AlreadyExistsAsNonDirectoryError, wrap_os_error
from .types import PathKind


def _not_a_directory(level: Path) -> AlreadyExistsAsNonDirectoryError:
    return AlreadyExistsAsNonDirectoryError(f"'{level}' already exists and is not a directory", level)


def make_dir_level(level: Path) -> bool:
    """Create one directory level whose parent already exists.

    Returns False if the directory appeared concurrently.
    """
    try:
        os.mkdir(level)
    except FileExistsError:
        if is_directory(level):
            return False
        raise _not_a_directory(level) from None
    except OSError as err:
        raise wrap_os_error(err, level, "mkdir") from err
    logger.debug("Created directory", path=str(level))
    return True


def ensure_dir(path: str | os.PathLike[str]) -> list[Path]:
    """Make sure ``path`` is a directory, creating missing ancestors.

    A directory that already exists, directly or through a symlink, is a
    no-op. Anything else in the way, at ``path`` or at any ancestor, raises
    AlreadyExistsAsNonDirectoryError before a single directory is created.

    Returns the directories created, root-most first.
    """
    target = Path(check_path(path))
    levels = [*reversed(target.parents), target]

    # Everything below the first missing level is missing too, so the checks
    # only run until then and no mkdir happens before all of them pass.
    first_missing: int | None = None
    for index, level in enumerate(levels):
        kind = classify(level, follow_symlinks=True)
        if kind is PathKind.DIRECTORY:
            continue
        if kind is PathKind.MISSING:
            first_missing = index
            break
        if kind is PathKind.FILE or kind is PathKind.SYMLINK:
            raise _not_a_directory(level)
        raise AssertionError(f"unhandled path kind: {kind}")

    if first_missing is None:
        return []

    created = [level for level in levels[first_missing:] if make_dir_level(level)]
    return created


mkdir = ensure_dir
