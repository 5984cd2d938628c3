"""Helpers for mobile build tooling: paths, versions, cargo arguments, reports, prompts, links and git files."""

__version__ = "0.1.0"
__all__ = ["__version__"]