# mobilekit

Small building blocks for mobile build tooling. Standard library only.

## Install

    pip install .

## Modules

### `mobilekit.paths`

- `home_dir()`, `install_dir()` (`~/.mobilekit`), `checkouts_dir()`,
  `tools_dir()` and `temp_dir()` return the tool's standard locations.
  `home_dir()` raises `NoHomeDirError` when no home directory can be found.
- `expand_home(path)` replaces a leading `~`. `contract_home(path)` replaces
  the home directory with `~`. On Windows the path is returned unchanged.
- `prefix_path(root, path)` joins two paths. For verbatim Windows roots
  (`\\?\...`) it resolves `.` and `..` by hand.
- `unprefix_path(root, path)` strips a prefix and raises
  `PathNotPrefixedError` if the prefix is not there.
- `relativize_path(abs_path, abs_relative_to)` expresses one absolute path
  relative to another.
- `normalize_path(path)` makes a path absolute and canonical, whether or not
  it exists. It raises `NormalizationError` on failure.
- `under_root(path, root)` tells whether a path stays inside a root.
- `working_dir(path)` is a context manager that changes the current directory
  and restores it afterwards.
- `installed_commit_msg()` reads the `commit` file in the install directory,
  or returns `None` when the file is absent.

### `mobilekit.textutil`

- `list_display(items)` joins items as an English list.
- `reverse_domain(domain)` reverses the labels of a domain.
- `prepend_to_path(path, base_path)` prepends to a colon-separated search
  path.
- `format_commit_msg(msg)` describes the latest commit.
- `one_or_many(value)` returns a single value or a list as a list.
- `get_string_for_group(match, group, string)` returns the text of a named
  regex group. It raises `CaptureGroupError` if the group did not match.

### `mobilekit.versions`

- `VersionTriple.from_str` parses `<major>[.minor][.patch]`.
  `VersionDouble.from_str` parses `<major>[.minor]`. Missing parts become
  zero. Both raise `VersionError` on bad input. Both classes are ordered.
- `RustVersion.parse(text)` reads `rustc --version` output, including the
  channel flavour and the optional hash and date. It raises
  `RustVersionError` on bad input.
- `RustVersion.valid(is_macos)` checks a toolchain against the known-good
  ranges for macOS. On other platforms it always returns `True`.
- `parse_host_target_triple(text)` extracts the `host:` triple from
  `rustc --verbose --version` output.

### `mobilekit.cargo`

- `CargoCommand` holds the options for a cargo subcommand: verbose, package,
  manifest path, target, features, extra args and release. A manifest path
  must exist, and it is canonicalised when the command is constructed.
- `to_args()` returns the full argument list, starting with `cargo`.
- `to_env(explicit_env)` returns the given environment plus any
  `CARGO_TARGET_DIR` or `CARGO_BUILD_TARGET_DIR` from the current process.
  `explicit_cargo_env()` returns those two variables alone.

### `mobilekit.cli`

- `Report.error`, `Report.action_request` and `Report.victory` create
  labelled messages with details.
- `format(width, colorize)` wraps a report to the given width and indents the
  details. It adds ANSI colour when `colorize` is true.
- `print(width)` writes errors to stderr and all other reports to stdout. It
  uses colour only when the stream is a terminal and the `NO_COLOR` and
  `CLICOLOR` settings allow it.
- `exit_code()` returns 0 for a victory and 1 for anything else.

### `mobilekit.prompt`

- `minimal(msg)` reads one trimmed line of input.
- `default(msg, default, default_color)` returns the default when the reply
  is empty.
- `yes_no(msg, default)` returns `True`, `False` or `None`.
- `list_display_only(choices)` prints a numbered list of choices.
- `choose(header, choices, noun, alternative, msg)` asks until a valid index
  is entered.

All prompts raise `EOFError` when input runs out.

### `mobilekit.ln`

- `force_symlink(source, target, target_style)` creates a symbolic link and
  replaces any file or directory already at the target.
- `force_symlink_relative(abs_source, abs_target, target_style)` does the
  same, but stores a path relative to the target.
- `LinkCall` creates a single hard or symbolic link. Its `Clobber` setting
  decides what may be replaced.
- Every failure raises `LinkError`, which carries an `ErrorCause`.

### `mobilekit.git`

- `Git(root).config()` and `Git(root).modules()` return the contents of
  `.git/config` and `.gitmodules`, or `None` when the file is missing.
- `Repo.from_checkouts(name)` locates a checkout in the checkouts directory.
  `updating_marker_path(repo)` gives the path of its `.updating` marker file.
- `Status` is either stale or fresh.
- `Submodule.resolved_name()` returns the explicit name, or a name taken from
  a `<name>.git` remote.
- `in_index(git)` and `initialized(git)` check the two files for the
  submodule. They raise `SubmoduleError` when the check cannot be made.

## Example

```python
from mobilekit.versions import VersionTriple
from mobilekit.textutil import list_display, reverse_domain

print(VersionTriple.from_str("1.49"))            # 1.49.0
print(list_display(["arm64", "x86_64", "i686"])) # arm64, x86_64, and i686
print(reverse_domain("example.com"))             # com.example
```

## What it does not do

mobilekit never starts other programs, and it has no command-line entry
point.

- `CargoCommand` builds argument lists and environments, but it does not run
  cargo.
- `RustVersion.parse` and `parse_host_target_triple` take text that you
  supply.
- `mobilekit.git` only reads files in a working tree. It cannot clone, fetch,
  reset, add or initialise submodules, and it cannot check a repository's
  status against its upstream.
- Nothing in the package performs a self-update.

## Tests

    pip install ".[test]"
    pytest