"""Creation of hard and symbolic links with optional clobbering."""

from __future__ import annotations

import errno
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mobilekit.paths import relativize_path

_WINDOWS_PRIVILEGE_NOT_HELD = 1314


class LinkType(Enum):
    HARD = "hard"
    SYMBOLIC = "symbolic"

    def __str__(self) -> str:
        return self.value


class Clobber(Enum):
    NEVER = "clobbering disabled"
    FILE_ONLY = "file clobbering enabled"
    FILE_OR_DIRECTORY = "file and directory clobbering enabled"

    def __str__(self) -> str:
        return self.value


class TargetStyle(Enum):
    FILE = "file"
    DIRECTORY = "directory"

    def __str__(self) -> str:
        return self.value


class ErrorCause(Enum):
    MISSING_FILE_NAME = "Neither the source nor target contained a file name."
    LINK_FAILED = "Link creation failed"
    IO_ERROR = "IO error"
    SYMLINK_NOT_ALLOWED = (
        "Creating symbolic links is not allowed on this system.\n\n"
        "On Windows 10 or newer, enable developer mode.\n"
        "On Windows 8.1 or older, the `SeCreateSymbolicLinkPrivilege` "
        "security policy is required."
    )


class LinkError(OSError):
    """Raised when a link cannot be created."""

    def __init__(
        self,
        link_type: LinkType,
        force: Clobber,
        source: Path,
        target: Path,
        target_style: TargetStyle,
        cause: ErrorCause,
        error: OSError | None = None,
    ) -> None:
        self.link_type = link_type
        self.force = force
        self.source = source
        self.target = target
        self.target_style = target_style
        self.cause = cause
        self.error = error
        reason = f"{cause.value}: {error}" if error is not None else cause.value
        super().__init__(
            f"Failed to create a {link_type} link from {str(source)!r} to "
            f"{target_style} {str(target)!r} ({force}): {reason}"
        )


def _has_file_name(path: Path) -> bool:
    return path.name not in ("", "..")


@dataclass
class LinkCall:
    """A single link to create; a directory target receives the source's name."""

    link_type: LinkType
    force: Clobber
    source: Path
    target: Path
    target_style: TargetStyle
    target_override: Path = field(init=False)

    def __post_init__(self) -> None:
        self.source = Path(self.source)
        self.target = Path(self.target)
        if self.target_style is TargetStyle.DIRECTORY:
            if not _has_file_name(self.source):
                raise self._error(ErrorCause.MISSING_FILE_NAME)
            self.target_override = self.target / self.source.name
        else:
            self.target_override = self.target

    def _error(self, cause: ErrorCause, error: OSError | None = None) -> LinkError:
        return LinkError(
            self.link_type, self.force, self.source, self.target, self.target_style, cause, error
        )

    def _create(self, destination: Path) -> None:
        if self.link_type is LinkType.HARD:
            os.link(self.source, destination)
        else:
            is_dir = (destination.parent / self.source).is_dir()
            os.symlink(self.source, destination, target_is_directory=is_dir)

    def exec(self) -> None:
        """Create the link, clobbering existing entries as ``force`` allows."""
        destination = self.target_override
        if self.force is Clobber.FILE_OR_DIRECTORY and destination.is_dir():
            try:
                if destination.is_symlink():
                    destination.unlink()
                else:
                    shutil.rmtree(destination)
            except OSError as exc:
                raise self._error(ErrorCause.IO_ERROR, exc) from exc
        # A real directory (not a link to one) receives the link inside it.
        if destination.is_dir() and not destination.is_symlink():
            destination = destination / self.source.name
        try:
            exists = destination.is_symlink() or destination.exists()
            if exists and self.force is not Clobber.NEVER:
                if destination.is_dir() and not destination.is_symlink():
                    raise IsADirectoryError(
                        errno.EISDIR, "cannot overwrite directory", str(destination)
                    )
                destination.unlink()
            self._create(destination)
        except OSError as exc:
            if getattr(exc, "winerror", None) == _WINDOWS_PRIVILEGE_NOT_HELD:
                raise self._error(ErrorCause.SYMLINK_NOT_ALLOWED, exc) from exc
            raise self._error(ErrorCause.LINK_FAILED, exc) from exc


def force_symlink(
    source: str | os.PathLike[str],
    target: str | os.PathLike[str],
    target_style: TargetStyle,
) -> None:
    """Create a symbolic link, replacing any file or directory in the way."""
    LinkCall(
        LinkType.SYMBOLIC, Clobber.FILE_OR_DIRECTORY, Path(source), Path(target), target_style
    ).exec()


def force_symlink_relative(
    abs_source: str | os.PathLike[str],
    abs_target: str | os.PathLike[str],
    target_style: TargetStyle,
) -> None:
    """Like ``force_symlink``, but the link holds a path relative to ``abs_target``."""
    abs_source, abs_target = Path(abs_source), Path(abs_target)
    rel_source = relativize_path(abs_source, abs_target)
    if target_style is TargetStyle.DIRECTORY and not _has_file_name(rel_source):
        if not _has_file_name(abs_source):
            raise LinkError(
                LinkType.SYMBOLIC,
                Clobber.FILE_OR_DIRECTORY,
                rel_source,
                abs_target,
                target_style,
                ErrorCause.MISSING_FILE_NAME,
            )
        force_symlink(rel_source, abs_target / abs_source.name, TargetStyle.FILE)
    else:
        force_symlink(rel_source, abs_target, target_style)