"""Tests for GridService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from aockit.config.models import InputConfig
from aockit.config.settings import AockitSettings
from aockit.services.grid import GridService, ragged_row_warnings

CHAR_GRID = "abcd\nefgh\nijkl\n"


class TestRaggedRows:
    def test_rectangular(self) -> None:
        assert ragged_row_warnings([[1, 2], [3, 4]]) == []

    def test_ragged(self) -> None:
        assert ragged_row_warnings([[1, 2], [3]]) == ["Row 1 has 1 cells, expected 2"]

    def test_empty(self) -> None:
        assert ragged_row_warnings([]) == []


class TestShow:
    def test_character_grid(
        self, settings: AockitSettings, write_input: Callable[..., Path]
    ) -> None:
        result = GridService(settings).show(write_input(CHAR_GRID))
        assert result.ok
        assert result.data["columns"] == 4
        assert result.data["rows"] == 3
        assert result.data["grid"][1] == ["e", "f", "g", "h"]
        assert result.warnings == []

    def test_number_grid(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        path = write_input("1 2 3\n4 5 6\n")
        result = GridService(settings).show(path, delimiter=" ", numbers=True)
        assert result.data["grid"] == [[1, 2, 3], [4, 5, 6]]

    def test_bad_number(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        path = write_input("1,x\n")
        result = GridService(settings).show(path, delimiter=",", numbers=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONVERSION_ERROR"

    def test_configured_delimiter(self, write_input: Callable[..., Path]) -> None:
        settings = AockitSettings(input=InputConfig(delimiter=","))
        result = GridService(settings).show(write_input("a,b\nc,d\n"))
        assert result.data["grid"] == [["a", "b"], ["c", "d"]]

    def test_explicit_delimiter_beats_config(self, write_input: Callable[..., Path]) -> None:
        settings = AockitSettings(input=InputConfig(delimiter=","))
        result = GridService(settings).show(write_input("a,b\n"), delimiter="")
        assert result.data["grid"] == [["a", ",", "b"]]

    def test_ragged_warning(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        result = GridService(settings).show(write_input("abc\nde\n"))
        assert result.ok
        assert result.warnings == ["Row 1 has 2 cells, expected 3"]

    def test_empty_file(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        result = GridService(settings).show(write_input(""))
        assert result.ok
        assert result.data == {"columns": 0, "rows": 0, "grid": []}


class TestBounds:
    def test_inside(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        result = GridService(settings).bounds(write_input(CHAR_GRID), 3, 2)
        assert result.ok
        assert result.data["in_bounds"] is True
        assert result.data["value"] == "l"

    def test_origin(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        result = GridService(settings).bounds(write_input(CHAR_GRID), 0, 0)
        assert result.data["in_bounds"] is True
        assert result.data["value"] == "a"

    def test_outside_is_not_an_error(
        self, settings: AockitSettings, write_input: Callable[..., Path]
    ) -> None:
        path = write_input(CHAR_GRID)
        for x, y in [(4, 0), (0, 3), (-1, 0), (0, -1)]:
            result = GridService(settings).bounds(path, x, y)
            assert result.ok
            assert result.data["in_bounds"] is False
            assert result.data["value"] is None

    def test_empty_grid(self, settings: AockitSettings, write_input: Callable[..., Path]) -> None:
        result = GridService(settings).bounds(write_input(""), 0, 0)
        assert result.data["in_bounds"] is False

    def test_past_end_of_short_row(
        self, settings: AockitSettings, write_input: Callable[..., Path]
    ) -> None:
        result = GridService(settings).bounds(write_input("abcd\nab\n"), 3, 1)
        assert result.ok
        assert result.data["in_bounds"] is True
        assert result.data["value"] is None
        assert result.warnings == ["Row 1 has 2 cells, expected 4"]

    def test_inside_short_row(
        self, settings: AockitSettings, write_input: Callable[..., Path]
    ) -> None:
        result = GridService(settings).bounds(write_input("abcd\nab\n"), 1, 1)
        assert result.data["value"] == "b"

    def test_missing_file(self, settings: AockitSettings, tmp_path: Path) -> None:
        result = GridService(settings).bounds(tmp_path / "missing.txt", 0, 0)
        assert result.error is not None
        assert result.error.code == "FILE_NOT_FOUND"
        assert result.error.detail["path"].endswith("missing.txt")
