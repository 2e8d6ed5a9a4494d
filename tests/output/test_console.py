"""Tests for the Rich console factory."""

from io import StringIO

from aockit.output.console import AOCKIT_THEME, create_console, get_output, style_for_bool


class TestCreateConsole:
    def test_writes_to_buffer(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_custom_width(self) -> None:
        assert create_console(width=60).width == 60

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in AOCKIT_THEME.styles:
            console.get_style(name)


class TestGetOutput:
    def test_returns_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello [not markup")
        assert get_output(console) == "hello [not markup\n"


class TestStyleForBool:
    def test_true(self) -> None:
        assert style_for_bool(True) == "aockit.true"

    def test_false(self) -> None:
        assert style_for_bool(False) == "aockit.false"
