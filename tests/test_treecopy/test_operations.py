"""Tests for the result-returning and async wrappers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from treecopy.errors import AlreadyExistsError, NotFoundError
from treecopy.operations import cp_async, try_cp, try_mkdir
from treecopy.types import CopyOptions, ErrorKind

if TYPE_CHECKING:
    from pathlib import Path


class TestTryMkdir:
    @pytest.fixture(autouse=True)
    def _setup(self, fs_tmp: Path) -> None:
        self.tmp_dir = fs_tmp

    def test_success_lists_created_directories(self) -> None:
        result = try_mkdir(self.tmp_dir / "a" / "b")
        assert result.success is True
        assert result.operation == "mkdir"
        assert result.created == [str(self.tmp_dir / "a"), str(self.tmp_dir / "a" / "b")]
        assert result.error is None

    def test_second_call_creates_nothing(self) -> None:
        try_mkdir(self.tmp_dir / "a")
        result = try_mkdir(self.tmp_dir / "a")
        assert result.success is True
        assert result.created == []

    def test_failure_is_reported_not_raised(self) -> None:
        (self.tmp_dir / "file").write_text("x")
        result = try_mkdir(self.tmp_dir / "file" / "sub")
        assert result.success is False
        assert result.error_kind is ErrorKind.ALREADY_EXISTS_AS_NON_DIRECTORY
        assert str(self.tmp_dir / "file") in (result.error or "")

    def test_invalid_path(self) -> None:
        result = try_mkdir("")
        assert result.success is False
        assert result.error_kind is ErrorKind.INVALID_PATH


class TestTryCp:
    @pytest.fixture(autouse=True)
    def _setup(self, fs_tmp: Path) -> None:
        self.tmp_dir = fs_tmp

    def test_success_reports_resolved_destination(self) -> None:
        (self.tmp_dir / "file").write_text("x")
        (self.tmp_dir / "out").mkdir()
        result = try_cp(self.tmp_dir / "file", self.tmp_dir / "out")
        assert result.success is True
        assert result.dest == str(self.tmp_dir / "out" / "file")
        assert (self.tmp_dir / "out" / "file").read_text() == "x"

    def test_missing_source(self) -> None:
        result = try_cp(self.tmp_dir / "nope", self.tmp_dir / "out")
        assert result.success is False
        assert result.error_kind is ErrorKind.NOT_FOUND
        assert result.source == str(self.tmp_dir / "nope")

    def test_existing_destination_without_force(self) -> None:
        (self.tmp_dir / "src").write_text("foo")
        (self.tmp_dir / "dst").write_text("bar")
        result = try_cp(self.tmp_dir / "src", self.tmp_dir / "dst")
        assert result.success is False
        assert result.error_kind is ErrorKind.ALREADY_EXISTS
        assert (self.tmp_dir / "dst").read_text() == "bar"

    def test_existing_destination_with_force(self) -> None:
        (self.tmp_dir / "src").write_text("foo")
        (self.tmp_dir / "dst").write_text("bar")
        result = try_cp(self.tmp_dir / "src", self.tmp_dir / "dst", CopyOptions(force=True))
        assert result.success is True
        assert (self.tmp_dir / "dst").read_text() == "foo"

    def test_result_serializes_error_kind_as_string(self) -> None:
        result = try_cp(self.tmp_dir / "nope", self.tmp_dir / "out")
        dumped = result.model_dump(mode="json")
        assert dumped["error_kind"] == "not_found"


class TestCpAsync:
    @pytest.mark.asyncio
    async def test_copies_file(self, fs_tmp: Path) -> None:
        (fs_tmp / "src").write_text("foo")
        dest = await cp_async(fs_tmp / "src", fs_tmp / "dst")
        assert dest == fs_tmp / "dst"
        assert (fs_tmp / "dst").read_text() == "foo"

    @pytest.mark.asyncio
    async def test_force_option(self, fs_tmp: Path) -> None:
        (fs_tmp / "src").write_text("foo")
        (fs_tmp / "dst").write_text("bar")
        with pytest.raises(AlreadyExistsError):
            await cp_async(fs_tmp / "src", fs_tmp / "dst")
        await cp_async(fs_tmp / "src", fs_tmp / "dst", CopyOptions(force=True))
        assert (fs_tmp / "dst").read_text() == "foo"

    @pytest.mark.asyncio
    async def test_missing_source_raises(self, fs_tmp: Path) -> None:
        with pytest.raises(NotFoundError):
            await cp_async(fs_tmp / "nope", fs_tmp / "dst")
