"""Work out where a copy actually lands, ``cp``-style."""

from __future__ import annotations

import os
from pathlib import Path

from .classify import check_path, classify
from .types import PathKind


def resolve_destination(source: str | os.PathLike[str], dest: str | os.PathLike[str]) -> Path:
    """Return the literal path a copy of ``source`` to ``dest`` writes to.

    An existing directory at ``dest`` means "copy into it", so the result is
    ``dest / basename(source)``. A missing ``dest``, or one that is a file or
    a symlink, is used as is. The kind of ``source`` plays no part. Read-only.
    """
    dest_path = Path(check_path(dest))
    kind = classify(dest_path)
    if kind is PathKind.DIRECTORY:
        return dest_path / Path(source).name
    if kind is PathKind.MISSING or kind is PathKind.FILE or kind is PathKind.SYMLINK:
        return dest_path
    raise AssertionError(f"unhandled path kind: {kind}")
