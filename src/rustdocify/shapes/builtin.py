"""Built-in docs.rs URL shapes, most specific first."""

from __future__ import annotations

import re

from rustdocify.shapes.registry import ShapeRegistry, UrlShape

# Building blocks for the shape patterns below.
_SEGMENT = r"[^/#]+"
_NAME = r"[^/#.]+"
_INDEX = r"(?P<index>/|/index\.html)?"
_FRAGMENT = r"(?:#(?P<fragment>.+))?"


def item_shape() -> UrlShape:
    """`/VERSION/CRATE/MODULES.../KIND.NAME.html[#FRAGMENT]`."""
    return UrlShape(
        name="item",
        pattern=re.compile(
            rf"/(?P<version>{_SEGMENT})/(?P<crate>{_NAME})(?P<modules>(?:/{_NAME})*)"
            rf"/(?P<kind>enum|fn|struct|trait)\.(?P<name>{_NAME})\.html{_FRAGMENT}"
        ),
        description="Item page, optionally anchored at a member",
    )


def module_shape() -> UrlShape:
    """`/VERSION/CRATE/MODULES...[/|/index.html][#FRAGMENT]`."""
    return UrlShape(
        name="module",
        pattern=re.compile(
            rf"/(?P<version>{_SEGMENT})/(?P<crate>{_NAME})(?P<modules>(?:/{_NAME})*)"
            rf"{_INDEX}{_FRAGMENT}"
        ),
        description="Crate root or module index",
    )


def version_shape() -> UrlShape:
    """`/VERSION[/|/index.html][#FRAGMENT]`."""
    return UrlShape(
        name="version",
        pattern=re.compile(rf"/(?P<version>{_SEGMENT}){_INDEX}{_FRAGMENT}"),
        description="Versioned package landing page",
    )


def package_shape() -> UrlShape:
    """`[/][#FRAGMENT]`."""
    return UrlShape(
        name="package",
        pattern=re.compile(rf"(?P<index>/)?{_FRAGMENT}"),
        description="Unversioned package landing page",
    )


ALL_SHAPES = [
    item_shape,
    module_shape,
    version_shape,
    package_shape,
]
"""All built-in shape factory functions, in match order."""


def default_registry() -> ShapeRegistry:
    """Create a registry holding every built-in shape."""
    return ShapeRegistry([factory() for factory in ALL_SHAPES])
