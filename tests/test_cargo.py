import pytest

from mobilekit.cargo import CargoCommand, explicit_cargo_env


@pytest.fixture(autouse=True)
def _clean_cargo_env(monkeypatch):
    monkeypatch.delenv("CARGO_TARGET_DIR", raising=False)
    monkeypatch.delenv("CARGO_BUILD_TARGET_DIR", raising=False)


def test_minimal_args():
    assert CargoCommand("build").to_args() == ["cargo", "build"]


def test_full_args_order(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("[package]\n")
    cmd = CargoCommand(
        "build",
        verbose=True,
        package="app",
        manifest_path=manifest,
        target="aarch64-linux-android",
        no_default_features=True,
        features=["a", "b"],
        args=["--lib"],
        release=True,
    )
    assert cmd.to_args() == [
        "cargo",
        "build",
        "-vv",
        "--package",
        "app",
        "--manifest-path",
        str(manifest.resolve()),
        "--target",
        "aarch64-linux-android",
        "--no-default-features",
        "--features",
        "a b",
        "--lib",
        "--release",
    ]


def test_features_are_single_argument():
    argv = CargoCommand("check", features=["x", "y", "z"]).to_args()
    index = argv.index("--features")
    assert argv[index + 1] == "x y z"
    assert len(argv) == index + 2


def test_manifest_path_canonicalized(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("")
    cmd = CargoCommand("build", manifest_path=sub / ".." / "Cargo.toml")
    assert cmd.manifest_path == manifest.resolve()


def test_missing_manifest_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CargoCommand("build", manifest_path=tmp_path / "missing.toml")


def test_explicit_cargo_env_empty():
    assert explicit_cargo_env() == {}


def test_explicit_cargo_env_reads_vars(monkeypatch):
    monkeypatch.setenv("CARGO_TARGET_DIR", "/tmp/t")
    monkeypatch.setenv("CARGO_BUILD_TARGET_DIR", "/tmp/b")
    assert explicit_cargo_env() == {
        "CARGO_TARGET_DIR": "/tmp/t",
        "CARGO_BUILD_TARGET_DIR": "/tmp/b",
    }


def test_to_env_merges_and_cargo_wins(monkeypatch):
    monkeypatch.setenv("CARGO_TARGET_DIR", "/tmp/t")
    env = CargoCommand("build").to_env({"PATH": "/bin", "CARGO_TARGET_DIR": "/old"})
    assert env == {"PATH": "/bin", "CARGO_TARGET_DIR": "/tmp/t"}


def test_to_env_does_not_mutate_input():
    base = {"HOME": "/home/x"}
    CargoCommand("build").to_env(base)
    assert base == {"HOME": "/home/x"}