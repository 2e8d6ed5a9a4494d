"""Tests for SequenceService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from aockit.config.settings import AockitSettings
from aockit.services.sequence import SequenceService


@pytest.fixture
def lines_file(write_input: Callable[..., Path]) -> Path:
    return write_input("1\n2\n3\n4\n5\n")


class TestShow:
    def test_all_lines(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).show(lines_file)
        assert result.ok
        assert result.data == {"count": 5, "items": ["1", "2", "3", "4", "5"]}
        assert result.meta == {"input": str(lines_file)}

    def test_first_only(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).show(lines_file, first_only=True)
        assert result.data["items"] == ["1"]

    def test_missing_file(self, settings: AockitSettings, tmp_path: Path) -> None:
        result = SequenceService(settings).show(tmp_path / "nope.txt")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FILE_NOT_FOUND"


class TestCut:
    def test_cut(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).cut(lines_file, 1, 3)
        assert result.ok
        assert result.op == "seq_cut"
        assert result.data["items"] == ["1", "4", "5"]
        assert result.data["removed"] == ["2", "3"]
        assert result.data["count"] == 3

    def test_file_not_modified(self, settings: AockitSettings, lines_file: Path) -> None:
        SequenceService(settings).cut(lines_file, 0, 5)
        assert lines_file.read_text() == "1\n2\n3\n4\n5\n"

    def test_invalid_range(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).cut(lines_file, 3, 9)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INDEX_OUT_OF_RANGE"
        assert result.error.detail["start"] == 3
        assert result.error.detail["end"] == 9
        assert result.error.detail["length"] == 5


class TestDelete:
    def test_delete(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).delete(lines_file, 0)
        assert result.ok
        assert result.data["removed"] == "1"
        assert result.data["items"] == ["2", "3", "4", "5"]

    def test_delete_past_end(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).delete(lines_file, 5)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INDEX_OUT_OF_RANGE"
        assert result.error.detail == {"index": 5, "length": 5}


class TestInsert:
    def test_insert(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).insert(lines_file, "9", 1)
        assert result.ok
        assert result.data["items"] == ["1", "9", "2", "3", "4", "5"]
        assert result.data["inserted"] == "9"
        assert result.data["index"] == 1

    def test_insert_at_end(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).insert(lines_file, "6", 5)
        assert result.data["items"][-1] == "6"

    def test_insert_negative(self, settings: AockitSettings, lines_file: Path) -> None:
        result = SequenceService(settings).insert(lines_file, "x", -1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INDEX_OUT_OF_RANGE"
