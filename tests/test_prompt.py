import io

import pytest

from mobilekit import prompt
from mobilekit.cli import Color


@pytest.fixture(autouse=True)
def _no_forced_colour(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_minimal_trims(monkeypatch, capsys):
    feed(monkeypatch, "  bob \n")
    assert prompt.minimal("Name") == "bob"
    assert capsys.readouterr().out == "Name: "


def test_minimal_eof(monkeypatch):
    feed(monkeypatch, "")
    with pytest.raises(EOFError):
        prompt.minimal("Name")


def test_default_used_on_empty(monkeypatch, capsys):
    feed(monkeypatch, "\n")
    assert prompt.default("Name", "alice", Color.GREEN) == "alice"
    assert "(alice)" in capsys.readouterr().out


def test_default_overridden(monkeypatch):
    feed(monkeypatch, "carol\n")
    assert prompt.default("Name", "alice") == "carol"


def test_default_without_default(monkeypatch):
    feed(monkeypatch, "\n")
    assert prompt.default("Name") == ""


@pytest.mark.parametrize(
    "reply, default, expected",
    [
        ("y\n", None, True),
        ("Y\n", False, True),
        ("n\n", True, False),
        ("N\n", None, False),
        ("\n", True, True),
        ("\n", False, False),
        ("\n", None, None),
    ],
)
def test_yes_no(monkeypatch, reply, default, expected):
    feed(monkeypatch, reply)
    assert prompt.yes_no("Continue?", default) is expected


def test_yes_no_prompt_shows_default(monkeypatch, capsys):
    feed(monkeypatch, "y\n")
    prompt.yes_no("Continue?", True)
    assert "[Y/n]" in capsys.readouterr().out


def test_yes_no_nonsense(monkeypatch, capsys):
    feed(monkeypatch, "maybe\n")
    assert prompt.yes_no("Continue?", True) is None
    assert "That was neither a Y nor an N! You're pretty silly." in capsys.readouterr().out


def test_list_display_only_empty(capsys):
    prompt.list_display_only([])
    assert capsys.readouterr().out == "  -- none --\n"


def test_list_display_only_items(capsys):
    prompt.list_display_only(["a", "b"])
    assert capsys.readouterr().out == "  [0] a\n  [1] b\n"


def test_choose_retries_until_valid(monkeypatch, capsys):
    feed(monkeypatch, "x\n9\n\n1\n")
    assert prompt.choose("Devices", ["a", "b"], "device") == 1
    out = capsys.readouterr().out
    assert "Hey, that wasn't a number! You're silly." in out
    assert "There's no device with an index that high." in out
    assert "Not to be pushy, but you need to pick a device." in out
    assert out.startswith("Devices:\n")


def test_choose_single_defaults_to_zero(monkeypatch):
    feed(monkeypatch, "\n")
    assert prompt.choose("Devices", ["only"], "device") == 0


def test_choose_mentions_alternative(monkeypatch, capsys):
    feed(monkeypatch, "0\n")
    assert prompt.choose("Teams", ["a", "b"], "team", alternative="team id") == 0
    assert "or enter a team id manually." in capsys.readouterr().out


def test_choose_runs_out_of_input(monkeypatch):
    feed(monkeypatch, "7\n")
    with pytest.raises(EOFError):
        prompt.choose("Devices", ["a"], "device")