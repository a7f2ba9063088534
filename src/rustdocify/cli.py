"""CLI entry point for rustdocify."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from rustdocify import __version__

if TYPE_CHECKING:
    from rustdocify.config import RustdocifyConfig

logger = logging.getLogger(__name__)


def _conversion_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the commands that run a conversion."""
    options = [
        click.argument("input_path", required=False, metavar="[INPUT]"),
        click.option(
            "-p",
            "--package-name",
            default=None,
            help="Package whose docs.rs links are rewritten",
        ),
        click.option(
            "--expected-version",
            default=None,
            help="Require links with a version to carry exactly this version",
        ),
        click.option(
            "--crate-name",
            default=None,
            help="Require links with a crate segment to name exactly this crate",
        ),
        click.option(
            "--strict",
            is_flag=True,
            help="Reject unrecognized docs.rs links and repeated top-level headers",
        ),
        click.option(
            "-c",
            "--config",
            "config_path",
            default=None,
            help="Path to config file (default: ./.rustdocify.yaml)",
        ),
        click.option(
            "-v",
            "--verbose",
            is_flag=True,
            help="Enable verbose (DEBUG) logging",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


@click.group()
@click.version_option(version=__version__, prog_name="rustdocify")
def main() -> None:
    """Rustdocify: convert a README into crate-level rustdoc."""
    pass


@main.command()
@_conversion_options
@click.option(
    "-o",
    "--output",
    "output_path",
    default=None,
    help="Write the result here instead of stdout",
)
def convert(
    input_path: str | None,
    package_name: str | None,
    expected_version: str | None,
    crate_name: str | None,
    strict: bool,
    config_path: str | None,
    verbose: bool,
    output_path: str | None,
) -> None:
    """Convert a README and write the result."""
    config = _load(
        config_path,
        input=input_path,
        package_name=package_name,
        version=expected_version,
        crate_name=crate_name,
        strict=strict or None,
        output=output_path,
    )
    _setup_logging(verbose, config.log_level)

    result = _convert(config)

    if config.output is None:
        click.echo(result, nl=False)
        return

    try:
        with open(config.output, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    except OSError as e:
        click.echo(f"Error writing {config.output}: {e}", err=True)
        sys.exit(1)
    logger.info("Wrote %s", config.output)


@main.command()
@_conversion_options
def check(
    input_path: str | None,
    package_name: str | None,
    expected_version: str | None,
    crate_name: str | None,
    strict: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Check that a README converts cleanly, without writing anything."""
    config = _load(
        config_path,
        input=input_path,
        package_name=package_name,
        version=expected_version,
        crate_name=crate_name,
        strict=strict or None,
    )
    _setup_logging(verbose, config.log_level)

    _convert(config)
    click.echo(f"OK: {config.input}")


def _load(config_path: str | None, **overrides: Any) -> RustdocifyConfig:
    """Load config, exiting with an error message on failure."""
    from rustdocify.config import load_config

    try:
        return load_config(config_path, overrides)
    except Exception as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)


def _convert(config: RustdocifyConfig) -> str:
    """Read and convert the configured input, exiting on failure."""
    from rustdocify.converter import rustdocify
    from rustdocify.core.errors import ConversionError

    try:
        with open(config.input, encoding="utf-8", newline="") as f:
            content = f.read()
    except OSError as e:
        click.echo(f"Error reading {config.input}: {e}", err=True)
        sys.exit(1)

    try:
        return rustdocify(
            content,
            config.package_name,
            config.version,
            config.crate_name,
            strict=config.strict,
        )
    except ConversionError as e:
        click.echo(f"Error: {config.input}: {e}", err=True)
        sys.exit(1)


def _setup_logging(verbose: bool, level_name: str = "INFO") -> None:
    """Configure logging; output goes to stderr."""
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
