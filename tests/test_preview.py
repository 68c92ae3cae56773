"""
Unit tests for the command-line layout preview.
"""

import argparse

import pytest
from tiler.commands import Hide, Move, Resize
from tiler.geometry import ScreenRect
from tiler.preview import format_command, main, parse_screen


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch, bus):
    monkeypatch.delenv("TILER_DEBUG", raising=False)


@pytest.mark.unit
class TestPreview:
    """Test the preview entry point."""

    def test_grid_five_windows(self, capsys):
        assert main(["grid", "5", "--screen", "1000x800"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "move   w0 0 0",
            "resize w0 333 400",
            "move   w1 333 0",
            "resize w1 333 400",
            "move   w2 666 0",
            "resize w2 334 400",
            "move   w3 0 400",
            "resize w3 500 400",
            "move   w4 500 400",
            "resize w4 500 400",
        ]

    def test_monocle_hides(self, capsys):
        assert main(["monocle", "2", "--screen", "1000x800"]) == 0

        assert capsys.readouterr().out.splitlines()[-1] == "hide   w1"

    def test_no_absorb(self, capsys):
        assert main(["tile", "4", "--screen", "1000x800", "--no-absorb"]) == 0

        assert capsys.readouterr().out.splitlines()[-1] == "resize w3 500 266"

    def test_no_windows(self, capsys):
        assert main(["tile", "0"]) == 0
        assert capsys.readouterr().out == ""

    def test_unknown_layout(self, capsys):
        assert main(["spiral", "3"]) == 2
        assert "Unknown layout: 'spiral'" in capsys.readouterr().err

    def test_zero_sized_screen(self, capsys):
        assert main(["tile", "3", "--screen", "0x800"]) == 2
        assert "Invalid screen dimensions: 0x800" in capsys.readouterr().err

    def test_malformed_screen(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tile", "3", "--screen", "wide"])
        assert exc_info.value.code == 2

    def test_negative_count(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tile", "-1"])
        assert exc_info.value.code == 2


@pytest.mark.unit
class TestPreviewHelpers:
    def test_parse_screen(self):
        assert parse_screen("1920x1080") == ScreenRect(1920, 1080)
        assert parse_screen("800X600") == ScreenRect(800, 600)

    @pytest.mark.parametrize("value", ["1920", "axb", "1x2x3", ""])
    def test_parse_screen_rejects(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_screen(value)

    def test_format_command(self):
        assert format_command(Move("a", 1, 2)) == "move   a 1 2"
        assert format_command(Resize("a", 3, 4)) == "resize a 3 4"
        assert format_command(Hide("a")) == "hide   a"
