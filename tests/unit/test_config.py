"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from rustdocify.config import RustdocifyConfig, load_config
from rustdocify.core.errors import ConfigError


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and make it the working directory."""
    d = tmp_path / "project"
    d.mkdir()
    monkeypatch.chdir(d)
    return d


@pytest.fixture()
def valid_config_data() -> dict:
    """Minimal valid config data."""
    return {"package_name": "foo"}


def write_config(path: Path, data: dict, name: str = "config.yaml") -> Path:
    """Write config data to a YAML file."""
    config_file = path / name
    config_file.write_text(yaml.dump(data))
    return config_file


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_valid_config(self, config_dir: Path, valid_config_data: dict) -> None:
        valid_config_data.update(version="1.2.3", crate_name="foo", strict=True)
        config_file = write_config(config_dir, valid_config_data)
        config = load_config(str(config_file))

        assert config.package_name == "foo"
        assert config.version == "1.2.3"
        assert config.crate_name == "foo"
        assert config.strict is True

    def test_defaults(self, config_dir: Path, valid_config_data: dict) -> None:
        config = load_config(str(write_config(config_dir, valid_config_data)))
        assert config.version is None
        assert config.crate_name is None
        assert config.strict is False
        assert config.input == "README.md"
        assert config.output is None
        assert config.log_level == "INFO"

    def test_missing_file_raises_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(str(tmp_path / "nonexistent.yaml"))

    def test_default_file_is_optional(self, config_dir: Path) -> None:
        config = load_config(overrides={"package_name": "foo"})
        assert config.package_name == "foo"

    def test_default_file_is_read(self, config_dir: Path) -> None:
        write_config(config_dir, {"package_name": "bar"}, name=".rustdocify.yaml")
        assert load_config().package_name == "bar"

    def test_invalid_yaml_raises_config_error(self, config_dir: Path) -> None:
        config_file = config_dir / "config.yaml"
        config_file.write_text(":\n  bad: [yaml\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(config_file))

    def test_non_mapping_yaml_raises_config_error(self, config_dir: Path) -> None:
        config_file = config_dir / "config.yaml"
        config_file.write_text("- just a list\n")
        with pytest.raises(ConfigError, match="must contain a YAML mapping"):
            load_config(str(config_file))

    def test_empty_file_needs_package_name(self, config_dir: Path) -> None:
        config_file = config_dir / "config.yaml"
        config_file.write_text("")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(str(config_file))

    def test_missing_package_name_raises_config_error(self, config_dir: Path) -> None:
        config_file = write_config(config_dir, {"version": "1.0.0"})
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(str(config_file))


class TestOverrides:
    """Tests for environment and explicit overrides."""

    def test_env_var_overrides(
        self, config_dir: Path, valid_config_data: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RUSTDOCIFY_PACKAGE_NAME", "env-pkg")
        monkeypatch.setenv("RUSTDOCIFY_VERSION", "2.0.0")
        monkeypatch.setenv("RUSTDOCIFY_CRATE_NAME", "env_pkg")
        config_file = write_config(config_dir, valid_config_data)

        config = load_config(str(config_file))
        assert config.package_name == "env-pkg"
        assert config.version == "2.0.0"
        assert config.crate_name == "env_pkg"

    def test_cargo_env_vars(self, config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CARGO_PKG_NAME", "cargo-pkg")
        monkeypatch.setenv("CARGO_PKG_VERSION", "0.4.1")
        monkeypatch.setenv("CARGO_CRATE_NAME", "cargo_pkg")

        config = load_config()
        assert config.package_name == "cargo-pkg"
        assert config.version == "0.4.1"
        assert config.crate_name == "cargo_pkg"

    def test_rustdocify_env_wins_over_cargo(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CARGO_PKG_NAME", "cargo-pkg")
        monkeypatch.setenv("RUSTDOCIFY_PACKAGE_NAME", "explicit")
        assert load_config().package_name == "explicit"

    def test_overrides_win(
        self, config_dir: Path, valid_config_data: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RUSTDOCIFY_VERSION", "2.0.0")
        config_file = write_config(config_dir, valid_config_data)

        config = load_config(
            str(config_file), {"version": "3.0.0", "input": "docs/README.md", "crate_name": None}
        )
        assert config.version == "3.0.0"
        assert config.input == "docs/README.md"
        assert config.crate_name is None


class TestPackageNameValidation:
    """Tests for package name validation."""

    def test_valid_package_name(self) -> None:
        assert RustdocifyConfig(package_name="foo-bar").package_name == "foo-bar"

    @pytest.mark.parametrize("name", ["", "foo/bar", " foo"])
    def test_invalid_package_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid package name"):
            RustdocifyConfig(package_name=name)
