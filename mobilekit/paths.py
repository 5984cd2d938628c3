"""Path helpers: home expansion, install locations, prefixing and normalisation."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePath, PureWindowsPath

log = logging.getLogger(__name__)

_INSTALL_DIR_NAME = ".mobilekit"
_TEMP_DIR_NAME = "mobilekit"
_VERBATIM_PREFIX = "\\\\?\\"


class NoHomeDirError(Exception):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Failed to get user's home directory!")


class PathNotPrefixedError(ValueError):
    """Raised when a path does not start with the expected prefix."""

    def __init__(self, path: PurePath, prefix: PurePath) -> None:
        self.path = path
        self.prefix = prefix
        super().__init__(f"Path {str(path)!r} didn't have prefix {str(prefix)!r}.")


class NormalizationError(Exception):
    """Raised when a path cannot be made absolute and canonical."""

    def __init__(self, path: PurePath, cause: OSError, existing: bool) -> None:
        self.path = path
        self.cause = cause
        self.existing = existing
        if existing:
            message = f"Failed to canonicalize existing path {str(path)!r}: {cause}"
        else:
            message = f"Failed to normalize non-existent path {str(path)!r}: {cause}"
        super().__init__(message)


def home_dir() -> Path:
    """Return the user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise NoHomeDirError() from exc


def expand_home(path: str | os.PathLike[str]) -> Path:
    """Replace a leading ``~`` component with the home directory."""
    home = home_dir()
    p = Path(path)
    if p.parts and p.parts[0] == "~":
        return home.joinpath(*p.parts[1:])
    return p


def contract_home(path: str | os.PathLike[str]) -> str:
    """Replace occurrences of the home directory in ``path`` with ``~``."""
    text = os.fspath(path)
    if os.name == "nt":
        return text
    return text.replace(str(home_dir()), "~")


def install_dir() -> Path:
    """Directory holding this tool's installation data."""
    return home_dir() / _INSTALL_DIR_NAME


def checkouts_dir() -> Path:
    """Directory holding repository checkouts."""
    return install_dir() / "checkouts"


def tools_dir() -> Path:
    """Directory holding auxiliary tools."""
    return install_dir() / "tools"


def temp_dir() -> Path:
    """Scratch directory under the system temporary directory."""
    return Path(tempfile.gettempdir()) / _TEMP_DIR_NAME


def _is_verbatim(root: str | os.PathLike[str]) -> bool:
    return os.fspath(root).startswith(_VERBATIM_PREFIX)


def prefix_path(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> PurePath:
    """Join ``path`` onto ``root``.

    Verbatim Windows roots (``\\\\?\\``) don't accept ``.`` or ``..``
    components, so for those the components are resolved lexically.
    """
    if not _is_verbatim(root):
        cls = type(root) if isinstance(root, PurePath) else Path
        return cls(root) / path

    win_root = PureWindowsPath(root)
    win_path = PureWindowsPath(path)
    buf = list(win_root.parts)
    if win_path.drive:
        buf = [win_path.anchor]
    elif win_path.root:
        buf = buf[:1]
    for part in win_path.parts[1:] if win_path.anchor else win_path.parts:
        if part == "..":
            if buf:
                buf.pop()
        elif part != ".":
            buf.append(part)
    result_cls = Path if os.name == "nt" else PureWindowsPath
    return result_cls(*buf)


def unprefix_path(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> Path:
    """Strip ``root`` from the front of ``path``."""
    root_p, path_p = Path(root), Path(path)
    try:
        return path_p.relative_to(root_p)
    except ValueError as exc:
        raise PathNotPrefixedError(path_p, root_p) from exc


def _common_root(abs_src: Path, abs_dest: Path) -> Path:
    for candidate in (abs_dest, *abs_dest.parents):
        if abs_src.is_relative_to(candidate):
            return candidate
    raise ValueError(f"{str(abs_src)!r} and {str(abs_dest)!r} have no common root")


def relativize_path(
    abs_path: str | os.PathLike[str], abs_relative_to: str | os.PathLike[str]
) -> Path:
    """Express ``abs_path`` relative to the directory ``abs_relative_to``."""
    path_p, rel_p = Path(abs_path), Path(abs_relative_to)
    if not path_p.is_absolute():
        raise ValueError(f"path {str(path_p)!r} is not absolute")
    if not rel_p.is_absolute():
        raise ValueError(f"path {str(rel_p)!r} is not absolute")
    common = _common_root(path_p, rel_p)
    remainder = path_p.relative_to(common)
    ups = len(rel_p.relative_to(common).parts)
    result = Path(*([".."] * ups)) / remainder
    log.info("%r relative to %r is %r", str(path_p), str(rel_p), str(result))
    return result


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Return an absolute, canonical form of ``path``, which need not exist."""
    p = Path(path)
    if p.exists():
        try:
            return p.resolve(strict=True)
        except OSError as exc:
            raise NormalizationError(p, exc, existing=True) from exc
    try:
        return p.resolve(strict=False)
    except OSError as exc:
        raise NormalizationError(p, exc, existing=False) from exc


def under_root(path: str | os.PathLike[str], root: str | os.PathLike[str]) -> bool:
    """Whether ``path``, taken relative to ``root``, stays inside ``root``."""
    root_p = Path(root)
    return normalize_path(root_p / path).is_relative_to(root_p)


@contextmanager
def working_dir(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Temporarily change the current working directory to ``path``."""
    previous = Path.cwd()
    target = Path(path)
    os.chdir(target)
    try:
        yield target
    finally:
        os.chdir(previous)


def installed_commit_msg() -> str | None:
    """Contents of the installed ``commit`` file, or None when absent."""
    path = install_dir() / "commit"
    if path.is_file():
        return path.read_text()
    return None