"""Assembly of ``cargo`` invocations."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

_CARGO_ENV_VARS = ("CARGO_TARGET_DIR", "CARGO_BUILD_TARGET_DIR")


@dataclass
class CargoCommand:
    """Options for a single ``cargo`` subcommand invocation.

    A manifest path is canonicalised on construction and must exist.
    """

    subcommand: str
    verbose: bool = False
    package: str | None = None
    manifest_path: str | os.PathLike[str] | None = None
    target: str | None = None
    no_default_features: bool = False
    features: Sequence[str] | None = None
    args: Sequence[str] | None = None
    release: bool = False

    def __post_init__(self) -> None:
        if self.manifest_path is not None:
            self.manifest_path = Path(self.manifest_path).resolve(strict=True)

    def to_args(self) -> list[str]:
        """Full argument vector, starting with ``cargo``."""
        argv = ["cargo", self.subcommand]
        if self.verbose:
            argv.append("-vv")
        if self.package is not None:
            argv += ["--package", self.package]
        if self.manifest_path is not None:
            manifest = Path(self.manifest_path)
            if not manifest.exists():
                log.error("manifest path %r doesn't exist!", str(manifest))
            argv += ["--manifest-path", str(manifest)]
        if self.target is not None:
            argv += ["--target", self.target]
        if self.no_default_features:
            argv.append("--no-default-features")
        if self.features is not None:
            argv += ["--features", " ".join(self.features)]
        if self.args is not None:
            argv += list(self.args)
        if self.release:
            argv.append("--release")
        return argv

    def to_env(self, explicit_env: Mapping[str, str]) -> dict[str, str]:
        """Environment for a clean run: ``explicit_env`` plus cargo's target dirs."""
        env = dict(explicit_env)
        env.update(explicit_cargo_env())
        return env


def explicit_cargo_env() -> dict[str, str]:
    """Cargo target-directory variables present in the current environment."""
    return {name: os.environ[name] for name in _CARGO_ENV_VARS if name in os.environ}