"""Result-returning and asyncio wrappers around mkdir and cp."""

from __future__ import annotations

import asyncio
import functools
import os
from pathlib import Path

from treecopy.infrastructure.logger import logger

from .copy import cp
from .ensure_dir import ensure_dir
from .errors import FsError
from .types import CopyOptions, OperationResult


def try_mkdir(path: str | os.PathLike[str]) -> OperationResult:
    """Ensure a directory exists, reporting failure in the result instead of raising."""
    try:
        created = ensure_dir(path)
    except FsError as err:
        logger.warning("mkdir failed", path=os.fspath(path), error=str(err), kind=err.kind.value)
        return OperationResult(
            success=False,
            operation="mkdir",
            path=os.fspath(path),
            error=str(err),
            error_kind=err.kind,
        )
    return OperationResult(
        success=True,
        operation="mkdir",
        path=os.fspath(path),
        created=[str(p) for p in created],
    )


def try_cp(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    options: CopyOptions | None = None,
) -> OperationResult:
    """Copy like :func:`treecopy.cp`, reporting failure in the result instead of raising.

    On success ``dest`` holds the resolved destination, not the requested one.
    """
    try:
        actual_dest = cp(source, dest, options)
    except FsError as err:
        logger.warning(
            "cp failed",
            source=os.fspath(source),
            dest=os.fspath(dest),
            error=str(err),
            kind=err.kind.value,
        )
        return OperationResult(
            success=False,
            operation="cp",
            source=os.fspath(source),
            dest=os.fspath(dest),
            error=str(err),
            error_kind=err.kind,
        )
    return OperationResult(success=True, operation="cp", source=os.fspath(source), dest=str(actual_dest))


async def mkdir_async(path: str | os.PathLike[str]) -> list[Path]:
    """Run :func:`ensure_dir` in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, ensure_dir, path)


async def cp_async(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    options: CopyOptions | None = None,
) -> Path:
    """Run :func:`cp` in the default executor.

    Cancelling the awaiting task does not stop a copy that already started.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(cp, source, dest, options))
