"""Configuration loading and validation for rustdocify."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from rustdocify.core.errors import ConfigError

DEFAULT_CONFIG_PATH = ".rustdocify.yaml"

# field -> environment variables, first set one wins
_ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "package_name": ("RUSTDOCIFY_PACKAGE_NAME", "CARGO_PKG_NAME"),
    "version": ("RUSTDOCIFY_VERSION", "CARGO_PKG_VERSION"),
    "crate_name": ("RUSTDOCIFY_CRATE_NAME", "CARGO_CRATE_NAME"),
}


class RustdocifyConfig(BaseModel):
    """Top-level rustdocify configuration."""

    package_name: str = Field(description="Package whose docs.rs links are rewritten")
    version: str | None = Field(default=None, description="Expected version in links")
    crate_name: str | None = Field(default=None, description="Expected crate name in links")
    strict: bool = Field(default=False, description="Reject unrecognized links")
    input: str = Field(default="README.md", description="README to convert")
    output: str | None = Field(default=None, description="Output path (stdout if unset)")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str) -> str:
        """Validate package name is a single non-empty URL path segment."""
        if not v or "/" in v or v != v.strip():
            raise ValueError(f"Invalid package name: {v!r}")
        return v


def load_config(
    path: str | None = None, overrides: dict[str, Any] | None = None
) -> RustdocifyConfig:
    """Load and validate configuration.

    Sources, later ones winning: the YAML file, environment variables,
    then `overrides` (entries set to None are ignored).

    Environment variable overrides:
        RUSTDOCIFY_PACKAGE_NAME, falling back to CARGO_PKG_NAME
        RUSTDOCIFY_VERSION, falling back to CARGO_PKG_VERSION
        RUSTDOCIFY_CRATE_NAME, falling back to CARGO_CRATE_NAME

    Args:
        path: Path to config file. Defaults to ./.rustdocify.yaml, which
            may be absent.
        overrides: Values taking precedence over file and environment.

    Returns:
        Validated RustdocifyConfig.

    Raises:
        ConfigError: If the config file is missing, unreadable, or invalid.
    """
    data = _read_config_file(path)

    for field, env_vars in _ENV_OVERRIDES.items():
        for env_var in env_vars:
            value = os.environ.get(env_var)
            if value:
                data[field] = value
                break

    for field, value in (overrides or {}).items():
        if value is not None:
            data[field] = value

    try:
        return RustdocifyConfig(**data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _read_config_file(path: str | None) -> dict[str, Any]:
    """Read the YAML config file into a dict."""
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    if not config_path.exists():
        if path is None:
            return {}
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = config_path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")
    return data
