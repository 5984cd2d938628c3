"""Interactive terminal prompts."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from mobilekit.cli import Color, paint, should_colorize

_INDEX_RE = re.compile(r"\+?[0-9]+")


def _styled(text: str, color: Color, bold: bool = False) -> str:
    return paint(text, color, bold) if should_colorize(sys.stdout) else text


def minimal(msg: Any) -> str:
    """Show ``msg`` followed by a colon and return the trimmed reply.

    Raises EOFError when input is exhausted.
    """
    sys.stdout.write(f"{msg}: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no input available")
    return line.strip()


def default(msg: Any, default: str | None = None, default_color: Color | None = None) -> str:
    """Prompt with an optional default that an empty reply selects."""
    if default is None:
        return minimal(msg)
    shown = _styled(default, default_color, bold=True) if default_color else default
    response = minimal(f"{msg} ({shown})")
    return response or default


def yes_no(msg: Any, default: bool | None = None) -> bool | None:
    """Ask a yes/no question; None means no usable answer was given."""
    y_n = {True: "[Y/n]", False: "[y/N]", None: "[y/n]"}[default]
    response = minimal(f"{msg} {y_n}")
    if response.lower() == "y":
        return True
    if response.lower() == "n":
        return False
    if not response:
        return default
    print("That was neither a Y nor an N! You're pretty silly.")
    return None


def list_display_only(choices: Iterable[Any]) -> None:
    """Print numbered choices, or a placeholder when there are none."""
    shown = False
    for index, choice in enumerate(choices):
        print(f"  [{_styled(str(index), Color.GREEN)}] {choice}")
        shown = True
    if not shown:
        print("  -- none --")


def choose(
    header: Any,
    choices: Sequence[Any],
    noun: Any,
    alternative: str | None = None,
    msg: Any = "Index",
) -> int:
    """Show numbered choices and ask until a valid index is entered."""
    print(f"{header}:")
    count = len(choices)
    list_display_only(choices)
    index_word = _styled("index", Color.GREEN)
    if alternative is not None:
        print(
            f"  Enter an {index_word} for a {noun} above, "
            f"or enter a {_styled(alternative, Color.CYAN)} manually."
        )
    else:
        print(f"  Enter an {index_word} for a {noun} above.")
    while True:
        response = default(msg, "0" if count == 1 else None, Color.GREEN)
        if not response:
            print("Not to be pushy, but you need to pick a device.")
        elif not _INDEX_RE.fullmatch(response):
            print("Hey, that wasn't a number! You're silly.")
        elif int(response) < count:
            return int(response)
        else:
            print("There's no device with an index that high.")