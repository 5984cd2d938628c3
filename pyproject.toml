[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobilekit"
version = "0.1.0"
description = "Helpers for mobile build tooling: paths, version parsing, cargo argument lists, reports, prompts, links and git checkout files"
requires-python = ">=3.10"
keywords = ["mobile", "build", "cargo", "git", "tooling", "symlink", "version"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobilekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
