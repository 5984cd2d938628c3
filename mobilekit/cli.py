"""Coloured, wrapped reports for command-line output."""

from __future__ import annotations

import os
import shutil
import sys
import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TextIO

_INDENT = "    "
_RESET = "\x1b[0m"


class Color(Enum):
    """ANSI foreground colours used in terminal output."""

    GREEN = "32"
    CYAN = "36"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_MAGENTA = "95"


ERROR_COLOR = Color.BRIGHT_RED
WARNING_COLOR = Color.BRIGHT_YELLOW
ACTION_REQUEST_COLOR = Color.BRIGHT_MAGENTA
VICTORY_COLOR = Color.BRIGHT_GREEN


def should_colorize(stream: TextIO) -> bool:
    """Whether output written to ``stream`` should carry colour codes."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CLICOLOR_FORCE", "0") not in ("", "0"):
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def paint(text: str, color: Color, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI escape codes for ``color``."""
    codes = f"1;{color.value}" if bold else color.value
    return f"\x1b[{codes}m{text}{_RESET}"


class Label(Enum):
    """Kind of a report, deciding its colour and exit code."""

    ERROR = "error"
    ACTION_REQUEST = "action request"
    VICTORY = "victory"

    def __str__(self) -> str:
        return self.value

    def color(self) -> Color:
        """Colour the label is shown in."""
        return {
            Label.ERROR: ERROR_COLOR,
            Label.ACTION_REQUEST: ACTION_REQUEST_COLOR,
            Label.VICTORY: VICTORY_COLOR,
        }[self]

    def exit_code(self) -> int:
        """Process exit code that goes with this label."""
        return 0 if self is Label.VICTORY else 1


def _fill(text: str, width: int, indent: str = "") -> str:
    width = max(width, len(indent) + 1)
    return "\n".join(
        textwrap.fill(
            line,
            width=width,
            initial_indent=indent,
            subsequent_indent=indent,
            break_on_hyphens=False,
        )
        for line in text.split("\n")
    )


@dataclass
class Report:
    """A headline message with indented details, labelled by outcome."""

    label: Label
    msg: str
    details: str

    def __post_init__(self) -> None:
        self.msg = str(self.msg)
        self.details = str(self.details)

    @classmethod
    def error(cls, msg: Any, details: Any) -> Report:
        return cls(Label.ERROR, str(msg), str(details))

    @classmethod
    def action_request(cls, msg: Any, details: Any) -> Report:
        return cls(Label.ACTION_REQUEST, str(msg), str(details))

    @classmethod
    def victory(cls, msg: Any, details: Any) -> Report:
        return cls(Label.VICTORY, str(msg), str(details))

    def exit_code(self) -> int:
        """Process exit code for this report."""
        return self.label.exit_code()

    def format(self, width: int | None = None, colorize: bool = False) -> str:
        """Render the report wrapped to ``width`` columns."""
        if width is None:
            width = shutil.get_terminal_size().columns
        label = f"{self.label.value}:"
        if colorize:
            color = self.label.color()
            head = _fill(f"{paint(label, color, bold=True)} {paint(self.msg, color)}", width)
        else:
            head = _fill(f"{label} {self.msg}", width)
        return f"{head}\n{_fill(self.details, width, _INDENT)}\n"

    def print(self, width: int | None = None) -> None:
        """Write the report: errors to stderr, everything else to stdout."""
        stream = sys.stderr if self.label is Label.ERROR else sys.stdout
        stream.write(self.format(width, should_colorize(stream)))
        stream.flush()


class Reportable(Protocol):
    """Something that can describe itself as a report."""

    def report(self) -> Report: ...