"""Rustdocify: turn a README into the crate-level docs of a Rust package."""

from __future__ import annotations

from rustdocify.converter import Converter, rustdocify
from rustdocify.core.errors import (
    ConfigError,
    ConversionError,
    CrateNameMismatchError,
    MissingVersionError,
    NonFirstTopLevelHeaderError,
    RustdocifyError,
    UnrecognizedUrlError,
    VersionMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConversionError",
    "Converter",
    "CrateNameMismatchError",
    "MissingVersionError",
    "NonFirstTopLevelHeaderError",
    "RustdocifyError",
    "UnrecognizedUrlError",
    "VersionMismatchError",
    "__version__",
    "rustdocify",
]
