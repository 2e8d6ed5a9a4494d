"""Shared pytest fixtures and test helpers for aockit tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from aockit.config.settings import AockitSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from any aockit.toml or AOCKIT_* vars on the host."""
    for name in ("AOCKIT_CONFIG", "AOCKIT_QUIET", "AOCKIT_VERBOSE", "AOCKIT_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state; the CLI reconfigures logging on every run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("aockit")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def settings(tmp_path: Path) -> AockitSettings:
    """Default settings with no config file."""
    return AockitSettings.from_cli(cwd=tmp_path)


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    """Write an input file under tmp_path and return its path."""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
