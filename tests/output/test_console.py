"""Tests for Rich Console factory and theme."""

from io import StringIO

from boardgate.output.console import BOARDGATE_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_verdict_styles_defined(self) -> None:
        for name in ("bg.allowed", "bg.denied", "bg.path", "bg.error"):
            assert name in BOARDGATE_THEME.styles

    def test_theme_applies(self) -> None:
        console = create_console()
        console.print("[bg.denied]denied[/bg.denied]")
        assert get_output(console).strip() == "denied"
