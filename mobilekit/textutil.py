"""Small text helpers for listing, domains, commit messages and regex groups."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


class CaptureGroupError(LookupError):
    """Raised when a named capture group did not match."""

    def __init__(self, group: str, string: str) -> None:
        self.group = group
        self.string = string
        super().__init__(
            f"Capture group {_quote(group)} missing from string {_quote(string)}"
        )


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def list_display(items: Iterable[Any]) -> str:
    """Render items as an English list: ``a``, ``a and b``, ``a, b, and c``."""
    words = [str(item) for item in items]
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    if not words:
        return ""
    return "".join(f"{word}, " for word in words[:-1]) + f"and {words[-1]}"


def reverse_domain(domain: str) -> str:
    """Reverse the dot-separated labels of a domain name."""
    return ".".join(reversed(domain.split(".")))


def prepend_to_path(path: Any, base_path: Any) -> str:
    """Prepend ``path`` to a colon-separated search path."""
    return f"{path}:{base_path}"


def format_commit_msg(msg: str) -> str:
    """Describe the latest commit contained in an installation."""
    return f"Contains commits up to {_quote(msg)}"


def one_or_many(value: T | list[T]) -> list[T]:
    """Return ``value`` as a list, wrapping a single value."""
    if isinstance(value, list):
        return value
    return [value]


def get_string_for_group(match: re.Match[str], group: str, string: str) -> str:
    """Return the text of a named group, raising if it did not take part."""
    try:
        value = match.group(group)
    except IndexError:
        value = None
    if value is None:
        raise CaptureGroupError(group, string)
    return value