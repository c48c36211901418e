"""Shared fixtures for treecopy tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def fs_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it so relative paths stay inside."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def create_symlink_dir(real: Path, link: Path) -> None:
    """Create a directory symlink, skipping the test where the platform refuses."""
    try:
        os.symlink(real, link, target_is_directory=True)
    except (OSError, NotImplementedError) as err:
        pytest.skip(f"symlinks not supported: {err}")


def create_symlink(target: str, link: Path) -> None:
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError) as err:
        pytest.skip(f"symlinks not supported: {err}")


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Write ``{relative_path: content}`` under root, creating parents."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def build_chain(root: Path, depth: int, name: str = "d") -> Path:
    """Create ``root/name/name/...`` ``depth`` levels deep, one mkdir at a time."""
    current = root
    current.mkdir()
    for _ in range(depth):
        current = current / name
        current.mkdir()
    return current


def remove_tree(root: Path) -> None:
    """Delete a directory tree without recursing, so very deep trees are fine."""
    directories = []
    pending = [root]
    while pending:
        current = pending.pop()
        directories.append(current)
        with os.scandir(current) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(current / entry.name)
                else:
                    os.unlink(entry.path)
    for directory in reversed(directories):
        os.rmdir(directory)
