"""Version numbers and ``rustc --version`` output parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1

_RUSTC_VERSION_RE = re.compile(
    r"rustc (?P<version>(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(-(?P<flavor>\w+)(.(?P<candidate>\d+))?)?)"
    r"(?P<details> \((?P<hash>\w{9}) "
    r"(?P<date>(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2}))\))?"
)
_HOST_TRIPLE_RE = re.compile(r"host: ([\w-]+)")


class VersionError(ValueError):
    """Raised when a version string cannot be parsed."""


class RustVersionError(Exception):
    """Raised when rustc's version output cannot be understood."""


def _parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit integer, raising ValueError with a reason."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _part(text: str, name: str, version: str, error: type[Exception], what: str) -> int:
    try:
        return _parse_u32(text)
    except ValueError as exc:
        raise error(f"Failed to parse {name} {what} from {version!r}: {exc}") from None


@dataclass(frozen=True, order=True)
class VersionTriple:
    """A ``major.minor.patch`` version."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def from_str(cls, v: str) -> VersionTriple:
        """Parse ``<major>[.minor][.patch]``; missing parts default to zero."""
        pieces = v.split(".")
        if len(pieces) > 3:
            raise VersionError(
                f"Failed to parse version string {v!r}: "
                "string must be in format <major>[.minor][.patch]"
            )
        names = ("major", "minor", "patch")
        numbers = [
            _part(piece, name, v, VersionError, "version")
            for piece, name in zip(pieces, names)
        ]
        return cls(*numbers)


@dataclass(frozen=True, order=True)
class VersionDouble:
    """A ``major.minor`` version."""

    major: int = 0
    minor: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    @classmethod
    def from_str(cls, v: str) -> VersionDouble:
        """Parse ``<major>[.minor]``; a missing minor defaults to zero."""
        pieces = v.split(".")
        if len(pieces) > 2:
            raise VersionError(
                f"Failed to parse version string {v!r}: "
                "string must be in format <major>[.minor]"
            )
        names = ("major", "minor")
        numbers = [
            _part(piece, name, v, VersionError, "version")
            for piece, name in zip(pieces, names)
        ]
        return cls(*numbers)


@dataclass(frozen=True)
class RustVersionFlavor:
    """Release channel suffix such as ``nightly`` or ``beta.3``."""

    flavor: str
    candidate: str | None = None


@dataclass(frozen=True)
class RustVersionDetails:
    """Commit hash and release date of a toolchain."""

    hash: str
    date: tuple[int, int, int]


@dataclass(frozen=True)
class RustVersion:
    """A parsed ``rustc --version`` line."""

    triple: VersionTriple
    flavor: RustVersionFlavor | None = None
    details: RustVersionDetails | None = None

    def __str__(self) -> str:
        text = str(self.triple)
        if self.flavor is not None:
            text += f"-{self.flavor.flavor}"
            if self.flavor.candidate is not None:
                text += f".{self.flavor.candidate}"
        if self.details is not None:
            year, month, day = self.details.date
            text += f" ({self.details.hash} {year}-{month}-{day})"
        return text

    @classmethod
    def parse(cls, text: str) -> RustVersion:
        """Parse the output of ``rustc --version``."""
        match = _RUSTC_VERSION_RE.search(text)
        if match is None:
            raise RustVersionError(
                f"Failed to check rustc version: 'rustc --version' "
                f"output failed to match regex: {text!r}"
            )
        version_str = match["version"]
        try:
            triple = VersionTriple(
                *(
                    _part(match[name], name, version_str, VersionError, "version")
                    for name in ("major", "minor", "patch")
                )
            )
        except VersionError as exc:
            raise RustVersionError(str(exc)) from exc

        flavor = None
        if match["flavor"] is not None:
            flavor = RustVersionFlavor(match["flavor"], match["candidate"])

        details = None
        if match["details"] is not None:
            date_str = match["date"]
            date = tuple(
                _part(match[name], f"rustc release {name}", date_str, RustVersionError, "")
                for name in ("year", "month", "day")
            )
            details = RustVersionDetails(match["hash"], date)  # type: ignore[arg-type]

        version = cls(triple, flavor, details)
        log.info("detected rustc version %s", version)
        return version

    def valid(self, is_macos: bool) -> bool:
        """Whether this toolchain is known to work for the platform."""
        if not is_macos:
            return True
        last_good_stable = VersionTriple(1, 45, 2)
        next_good_stable = VersionTriple(1, 49, 0)
        first_good_nightly = (2020, 10, 24)

        old_good = self.triple <= last_good_stable
        if self.details is not None:
            date_good = self.details.date >= first_good_nightly
        else:
            log.warning(
                "output of `rustc --version` didn't contain date info; continuing "
                "with the assumption that the release date is at least 2020-10-24"
            )
            date_good = True
        new_good = self.triple >= next_good_stable and date_good
        return old_good or new_good


def parse_host_target_triple(text: str) -> str:
    """Extract the host target triple from ``rustc --verbose --version`` output."""
    match = _HOST_TRIPLE_RE.search(text)
    if match is None:
        raise ValueError(
            "Failed to detect host target triple: 'rustc --verbose --version' "
            f"output failed to match regex: {text!r}"
        )
    triple = match[1]
    log.info("detected host target triple %r", triple)
    return triple