"""Git working trees, tool checkouts and submodule bookkeeping."""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from mobilekit.paths import checkouts_dir

log = logging.getLogger(__name__)

_SUBMODULE_NAME_RE = re.compile(r"(?P<name>\w+)\.git")


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _read_optional(path: Path) -> str | None:
    if path.exists():
        return path.read_text()
    return None


@dataclass(frozen=True)
class Git:
    """A git working tree rooted at ``root``."""

    root: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

    def config(self) -> str | None:
        """Contents of ``.git/config``, or None when it doesn't exist."""
        return _read_optional(self.root / ".git" / "config")

    def modules(self) -> str | None:
        """Contents of ``.gitmodules``, or None when it doesn't exist."""
        return _read_optional(self.root / ".gitmodules")


class Status(Enum):
    """Whether a checkout is behind its upstream."""

    STALE = "stale"
    FRESH = "fresh"

    def stale(self) -> bool:
        return self is Status.STALE

    def fresh(self) -> bool:
        return self is Status.FRESH


@dataclass(frozen=True)
class Repo:
    """A repository checked out at ``path``."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_checkouts(cls, checkout: str | os.PathLike[str]) -> Repo:
        """The repository named ``checkout`` inside the checkouts directory."""
        return cls(checkouts_dir() / checkout)

    def git(self) -> Git:
        return Git(self.path)


def updating_marker_path(repo: Repo) -> Path:
    """Marker file that exists while an update of ``repo`` is in progress."""
    return repo.path.parent.parent / ".updating"


class SubmoduleCause(Enum):
    NAME_MISSING = "name missing"
    INDEX_CHECK_FAILED = "index check failed"
    INIT_CHECK_FAILED = "init check failed"


class SubmoduleError(Exception):
    """Raised when a submodule cannot be inspected."""

    def __init__(
        self, submodule: Submodule, cause: SubmoduleCause, error: OSError | None = None
    ) -> None:
        self.submodule = submodule
        self.cause = cause
        self.error = error
        name = submodule.resolved_name()
        if cause is SubmoduleCause.NAME_MISSING:
            message = (
                f"Failed to infer name for submodule at remote {_quote(submodule.remote)}; "
                "please specify a name explicitly."
            )
        elif cause is SubmoduleCause.INDEX_CHECK_FAILED:
            message = (
                f'Failed to check ".gitmodules" for submodule {_quote(name or "")}: {error}'
            )
        else:
            message = (
                f'Failed to check ".git/config" for submodule {_quote(name or "")}: {error}'
            )
        super().__init__(message)


@dataclass(frozen=True)
class Submodule:
    """A submodule with a remote URL, a path inside the superproject and an optional name."""

    remote: str
    path: Path
    name: str | None = None
    lfs: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Submodule:
        """Build from configuration keys ``remote``, ``path``, ``name`` and ``lfs``."""
        return cls(
            remote=data["remote"],
            path=Path(data["path"]),
            name=data.get("name"),
            lfs=bool(data.get("lfs", False)),
        )

    def resolved_name(self) -> str | None:
        """The explicit name, or one inferred from a ``<name>.git`` remote."""
        if self.name is not None:
            return self.name
        match = _SUBMODULE_NAME_RE.search(self.remote)
        name = match["name"] if match else None
        log.info("detected submodule name: %r", name)
        return name

    def _required_name(self) -> str:
        name = self.resolved_name()
        if name is None:
            raise SubmoduleError(self, SubmoduleCause.NAME_MISSING)
        return name

    def _header(self) -> str:
        return f"[submodule {_quote(self._required_name())}]"

    def in_index(self, git: Git) -> bool:
        """Whether ``.gitmodules`` already declares this submodule."""
        header = self._header()
        try:
            modules = git.modules()
        except OSError as exc:
            raise SubmoduleError(self, SubmoduleCause.INDEX_CHECK_FAILED, exc) from exc
        return modules is not None and header in modules

    def initialized(self, git: Git) -> bool:
        """Whether ``.git/config`` already has this submodule initialised."""
        header = self._header()
        try:
            config = git.config()
        except OSError as exc:
            raise SubmoduleError(self, SubmoduleCause.INIT_CHECK_FAILED, exc) from exc
        return config is not None and header in config