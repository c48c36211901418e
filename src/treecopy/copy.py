"""Recursive copy of files, directories and symlinks with ``cp`` semantics."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from treecopy.infrastructure.logger import logger

from .classify import check_path, classify, is_directory
from .ensure_dir import ensure_dir, make_dir_level
from .errors import (
    AlreadyExistsError,
    InvalidPathError,
    NotFoundError,
    TypeMismatchError,
    wrap_os_error,
)
from .resolve import resolve_destination
from .types import CopyOptions, PathKind


def _already_exists(src: Path, dst: Path) -> AlreadyExistsError:
    return AlreadyExistsError(f"'{dst}' already exists", dst, {"source": str(src)})


def _type_mismatch(src: Path, dst: Path, what: str) -> TypeMismatchError:
    return TypeMismatchError(f"Cannot overwrite {what} '{dst}' with '{src}'", dst, {"source": str(src)})


def _unlink(path: Path) -> None:
    try:
        os.unlink(path)
    except OSError as err:
        raise wrap_os_error(err, path, "unlink") from err


def _check_not_into_itself(src: Path, dst: Path, kind: PathKind) -> None:
    if kind is PathKind.SYMLINK:
        # A link is copied as a link, so only the literal locations matter.
        src_abs, dst_abs = Path(os.path.abspath(src)), Path(os.path.abspath(dst))
    else:
        src_abs, dst_abs = Path(os.path.realpath(src)), Path(os.path.realpath(dst))

    if src_abs == dst_abs:
        raise InvalidPathError(f"Source and destination are the same: '{src}'", dst, {"source": str(src)})
    if kind is PathKind.DIRECTORY and src_abs in dst_abs.parents:
        raise InvalidPathError(
            f"Cannot copy '{src}' into a subdirectory of itself: '{dst}'", dst, {"source": str(src)}
        )


def _copy_symlink(src: Path, dst: Path, options: CopyOptions) -> None:
    try:
        target = os.readlink(src)
    except OSError as err:
        raise wrap_os_error(err, src, "readlink") from err

    dest_kind = classify(dst)
    if dest_kind is PathKind.DIRECTORY:
        raise _type_mismatch(src, dst, "directory")
    if dest_kind is PathKind.FILE or dest_kind is PathKind.SYMLINK:
        if not options.force:
            raise _already_exists(src, dst)
        _unlink(dst)
    elif dest_kind is not PathKind.MISSING:
        raise AssertionError(f"unhandled path kind: {dest_kind}")

    try:
        # target_is_directory only matters on Windows, where directory links differ.
        os.symlink(target, dst, target_is_directory=os.path.isdir(src))
    except OSError as err:
        raise wrap_os_error(err, dst, "symlink") from err
    logger.debug("Copied symlink", source=str(src), dest=str(dst), target=target)


def _copy_file(src: Path, dst: Path, options: CopyOptions) -> None:
    dest_kind = classify(dst)
    if dest_kind is PathKind.DIRECTORY:
        raise _type_mismatch(src, dst, "directory")
    if dest_kind is PathKind.SYMLINK:
        if is_directory(dst):
            raise _type_mismatch(src, dst, "symlink to directory")
        if not options.force:
            raise _already_exists(src, dst)
        # Replace the link itself rather than writing through it.
        _unlink(dst)
    elif dest_kind is PathKind.FILE:
        if not options.force:
            raise _already_exists(src, dst)
    elif dest_kind is not PathKind.MISSING:
        raise AssertionError(f"unhandled path kind: {dest_kind}")

    try:
        shutil.copy2(src, dst)
    except OSError as err:
        raise wrap_os_error(err, dst, "copy") from err
    logger.debug("Copied file", source=str(src), dest=str(dst), overwrite=dest_kind is not PathKind.MISSING)


def _enter_directory(src: Path, dst: Path, parent_ready: bool) -> list[str]:
    """Make ``dst`` ready to receive the entries of ``src`` and return their names, sorted."""
    dest_kind = classify(dst)
    if dest_kind is PathKind.FILE:
        raise _type_mismatch(src, dst, "non-directory")
    if dest_kind is PathKind.SYMLINK and not is_directory(dst):
        raise _type_mismatch(src, dst, "non-directory")

    # Existing directories, including symlinked ones, are merged into as they are.
    if dest_kind is PathKind.MISSING:
        if parent_ready:
            make_dir_level(dst)
        else:
            ensure_dir(dst)

    try:
        with os.scandir(src) as it:
            names = sorted(entry.name for entry in it)
    except OSError as err:
        raise wrap_os_error(err, src, "list directory") from err
    logger.debug("Copying directory", source=str(src), dest=str(dst), entries=len(names))
    return names


def _copy_nodes(src: Path, dst: Path, options: CopyOptions) -> None:
    # Depth-first with an explicit stack: a directory is set up before its
    # children, and siblings are visited in name order.
    stack: list[tuple[Path, Path, bool]] = [(src, dst, False)]
    while stack:
        node_src, node_dst, parent_ready = stack.pop()
        kind = classify(node_src)
        if kind is PathKind.SYMLINK:
            _copy_symlink(node_src, node_dst, options)
        elif kind is PathKind.FILE:
            _copy_file(node_src, node_dst, options)
        elif kind is PathKind.DIRECTORY:
            names = _enter_directory(node_src, node_dst, parent_ready)
            stack.extend((node_src / name, node_dst / name, True) for name in reversed(names))
        elif kind is PathKind.MISSING:
            # Removed while the traversal was running.
            raise NotFoundError(f"Source '{node_src}' does not exist", node_src)
        else:
            raise AssertionError(f"unhandled path kind: {kind}")


def copy_tree(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    options: CopyOptions | None = None,
) -> None:
    """Copy ``source`` to exactly ``dest``.

    ``dest`` is taken literally; use :func:`cp` for "copy into an existing
    directory" resolution. Symlinks are recreated, never dereferenced.
    Directories merge into existing ones. Each existing destination file is
    only replaced when ``options.force`` is set.

    Raises on the first failure. Whatever was written before it stays.
    """
    options = options or CopyOptions()
    src = Path(check_path(source))
    dst = Path(check_path(dest))

    kind = classify(src)
    if kind is PathKind.MISSING:
        raise NotFoundError(f"Source '{src}' does not exist", src)
    _check_not_into_itself(src, dst, kind)

    _copy_nodes(src, dst, options)


def cp(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    options: CopyOptions | None = None,
    *,
    force: bool | None = None,
) -> Path:
    """Copy a file, directory or symlink like ``cp -R``.

    When ``dest`` is an existing directory the source is copied into it under
    its own name. Returns the path that was written.
    """
    options = options or CopyOptions()
    if force is not None:
        options = options.model_copy(update={"force": force})

    actual_dest = resolve_destination(source, dest)
    copy_tree(source, actual_dest, options)
    logger.info("Copied", source=os.fspath(source), dest=str(actual_dest), force=options.force)
    return actual_dest
