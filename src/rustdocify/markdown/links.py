"""Rewriting of docs.rs link reference definitions into intra-doc links.

A link reference definition such as

    [`Foo::new`]: https://docs.rs/foo/*/foo/struct.Foo.html#method.new

becomes

    [`Foo::new`]: crate::Foo::new

when `foo` is the package being documented. Links to other packages or
hosts are left alone.
"""

from __future__ import annotations

import logging
import re

from rustdocify.core.errors import (
    CrateNameMismatchError,
    MissingVersionError,
    UnrecognizedUrlError,
    VersionMismatchError,
)
from rustdocify.core.models import LinkTarget
from rustdocify.shapes.builtin import default_registry
from rustdocify.shapes.registry import ShapeRegistry, is_package_url

logger = logging.getLogger(__name__)

# [label]: URL rest
_LINK_DEFINITION = re.compile(r"^(\s*\[[^\]]+\]:\s+)(\S+)(.*)$")


def render(target: LinkTarget) -> str:
    """Render a parsed target as `crate::path::Item::member[#fragment]`."""
    link = "::".join(["crate", *target.path])
    if target.fragment is not None:
        link += f"#{target.fragment}"
    return link


class LinkRewriter:
    """Rewrites docs.rs link reference definitions for one package.

    Expected version and crate name are only consulted when given; when
    they are, parsed links must agree with them exactly.
    """

    def __init__(
        self,
        package_name: str,
        expected_version: str | None = None,
        expected_crate_name: str | None = None,
        strict: bool = False,
        registry: ShapeRegistry | None = None,
    ) -> None:
        if not package_name:
            raise ValueError("package_name must not be empty")
        self.package_name = package_name
        self.expected_version = expected_version
        self.expected_crate_name = expected_crate_name
        self.strict = strict
        self._registry = registry or default_registry()

    def rewrite(self, line: str, line_number: int) -> str:
        """Rewrite `line` if it defines a docs.rs link for this package.

        Raises:
            ConversionError: On a validation mismatch, or in strict mode
                on an unrecognised URL.
        """
        match = _LINK_DEFINITION.match(line)
        if match is None:
            return line

        head, url, tail = match.groups()
        target = self._registry.match(url, self.package_name)
        if target is None:
            if is_package_url(url, self.package_name):
                if self.strict:
                    raise UnrecognizedUrlError(line_number, line, url)
                logger.warning(
                    "Line %d: leaving unrecognized docs.rs URL as is: %s", line_number, url
                )
            return line

        self._validate(target, url, line_number, line)

        link = render(target)
        logger.debug("Line %d: %s -> %s", line_number, url, link)
        return f"{head}{link}{tail}"

    def _validate(self, target: LinkTarget, url: str, line_number: int, line: str) -> None:
        """Cross-check version and crate segments against expected values."""
        if self.expected_version is not None:
            if target.version is None:
                if self.strict:
                    raise MissingVersionError(line_number, line, url, self.expected_version)
            elif target.version != self.expected_version:
                raise VersionMismatchError(
                    line_number, line, url, self.expected_version, target.version
                )

        if self.expected_crate_name is not None and target.crate is not None:
            if target.crate != self.expected_crate_name:
                raise CrateNameMismatchError(
                    line_number, line, url, self.expected_crate_name, target.crate
                )
