"""Tests for the calc command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from aockit.cli import cli


class TestCalc:
    def test_abs(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "calc", "abs", "--", "-7"])
        assert result.exit_code == 0
        assert result.output == "7\n"

    @pytest.mark.parametrize("args,expected", [(["2", "10"], "1024"), (["5", "0"], "1")])
    def test_pow(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "calc", "pow", *args])
        assert result.exit_code == 0
        assert result.output == f"{expected}\n"

    def test_pow_negative_exponent(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "calc", "pow", "2", "--", "-1"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_ARGUMENT"

    def test_int(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "calc", "int", "007"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["normalized"] == "7"

    def test_int_rejects_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calc", "int", "seven"])
        assert result.exit_code == 1
        assert "CONVERSION_ERROR" in result.output

    def test_human_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["calc", "pow", "3", "2"])
        assert "value: 9" in result.output
