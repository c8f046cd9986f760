"""Tests for the command line entry point."""

import pytest

from colorcast import __version__, main


def run_cli(capsys, *argv):
    main.main(list(argv))
    return capsys.readouterr()


class TestConversionOutput:
    def test_hex_input(self, capsys):
        out = run_cli(capsys, "#ff0000").out
        assert out.splitlines() == [
            "notation : hex",
            "hex      : #ff0000",
            "rgb      : rgb(255, 0, 0)",
            "hsl      : hsl(0, 100%, 50%)",
            "cmyk     : cmyk(0%, 100%, 100%, 0%)",
        ]

    def test_cmyk_input(self, capsys):
        out = run_cli(capsys, "cmyk(0,100,100,0)").out
        assert "notation : cmyk" in out
        assert "rgb      : rgb(255, 0, 0)" in out
        assert "hex      : #ff0000" in out

    def test_hsl_input_keeps_parsed_values(self, capsys):
        out = run_cli(capsys, "hsl(120, 12.5%, 40%)").out
        assert "notation : hsl" in out
        assert "hsl      : hsl(120, 12.5%, 40%)" in out

    def test_alpha_input(self, capsys):
        out = run_cli(capsys, "rgba(255, 0, 0, 0.5)").out
        assert "hex      : #ff000080" in out
        assert "rgb      : rgba(255, 0, 0, 0.5)" in out
        assert "hsl      : hsla(0, 100%, 50%, 0.5)" in out

    def test_transparent(self, capsys):
        out = run_cli(capsys, "transparent").out
        assert "hex      : #00000000" in out
        assert "rgb      : rgba(0, 0, 0, 0)" in out

    def test_unquoted_fields_are_joined(self, capsys):
        out = run_cli(capsys, "255,", "0,", "0").out
        assert "notation : rgb" in out


class TestInvalidInput:
    def test_invalid_color_string(self, capsys):
        assert run_cli(capsys, "not a color").out == "Invalid color string\n"

    def test_out_of_range_channel(self, capsys):
        assert run_cli(capsys, "rgb(255,256,0)").out == "Invalid color string\n"

    def test_unknown_flag_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--bogus"])
        assert exc.value.code == 2
        assert "[error]" in capsys.readouterr().err


class TestHelp:
    @pytest.mark.parametrize("argv", [[], ["help"], ["HELP"]])
    def test_help(self, capsys, argv):
        out = run_cli(capsys, *argv).out
        assert out.startswith("usage: colorcast")
        assert "supported notations" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.strip() == f"colorcast {__version__}"
