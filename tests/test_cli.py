import re

import pytest

from mobilekit.cli import Color, Label, Report, paint

ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture(autouse=True)
def _no_forced_colour(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_label_exit_codes():
    assert Label.VICTORY.exit_code() == 0
    assert Label.ERROR.exit_code() == 1
    assert Label.ACTION_REQUEST.exit_code() == 1


def test_label_colors():
    assert Label.ERROR.color() is Color.BRIGHT_RED
    assert Label.ACTION_REQUEST.color() is Color.BRIGHT_MAGENTA
    assert Label.VICTORY.color() is Color.BRIGHT_GREEN


def test_label_text():
    text = Report.action_request("m", "d").format(width=80, colorize=False)
    assert text.startswith("action request: m\n")


def test_constructors_set_label():
    assert Report.error("a", "b").label is Label.ERROR
    assert Report.action_request("a", "b").label is Label.ACTION_REQUEST
    assert Report.victory("a", "b").label is Label.VICTORY
    assert Report.error("a", "b").exit_code() == 1
    assert Report.victory("a", "b").exit_code() == 0


def test_values_are_stringified():
    report = Report.error(ValueError("boom"), 42)
    assert report.msg == "boom"
    assert report.details == str(42)


def test_plain_format():
    text = Report.victory("done", "details here").format(width=80, colorize=False)
    assert text == "victory: done\n    details here\n"


def test_details_wrap_with_indent():
    details = " ".join(["word"] * 40)
    text = Report.error("failed", details).format(width=20, colorize=False)
    lines = text.rstrip("\n").split("\n")
    assert lines[0] == "error: failed"
    for line in lines[1:]:
        assert line.startswith("    ")
        assert len(line) <= 20
    assert " ".join(line.strip() for line in lines[1:]) == details


def test_coloured_format_strips_to_plain():
    report = Report.action_request("do it", "now")
    coloured = report.format(width=200, colorize=True)
    assert "\x1b[" in coloured
    assert ANSI.sub("", coloured) == report.format(width=200, colorize=False)


def test_paint_bold():
    assert paint("x", Color.GREEN, bold=True) == "\x1b[1;32mx\x1b[0m"


def test_error_prints_to_stderr(capsys):
    Report.error("bad", "very bad").print(width=80)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: bad\n")


def test_victory_prints_to_stdout(capsys):
    Report.victory("good", "fine").print(width=80)
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == Report.victory("good", "fine").format(80, colorize=False)