"""Shared test fixtures for rustdocify."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from rustdocify.converter import Converter

_ENV_VARS = (
    "RUSTDOCIFY_PACKAGE_NAME",
    "RUSTDOCIFY_VERSION",
    "RUSTDOCIFY_CRATE_NAME",
    "CARGO_PKG_NAME",
    "CARGO_PKG_VERSION",
    "CARGO_CRATE_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep build environment variables from leaking into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def converter() -> Converter:
    """Converter for package `foo` that checks the crate name."""
    return Converter("foo", expected_crate_name="foo")


@pytest.fixture()
def readme_path(tmp_path: Path) -> Path:
    """A small README for package `foo`."""
    path = tmp_path / "README.md"
    path.write_text(_readme())
    return path


@pytest.fixture()
def make_readme() -> Callable[..., str]:
    """Factory fixture for README content."""
    return _readme


def _readme(version: str = "*", crate: str = "foo") -> str:
    """Factory for README content linking into package `foo`."""
    return (
        "# foo\n"
        "\n"
        "A foo library.\n"
        "\n"
        "## Usage\n"
        "\n"
        "Create [`Foo::new`].\n"
        "\n"
        f"[`Foo::new`]: https://docs.rs/foo/{version}/{crate}/struct.Foo.html#method.new\n"
    )
