"""URL shape registry: routes docs.rs URLs to the first matching shape."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pydantic import ValidationError

from rustdocify.core.models import ItemKind, ItemRef, LinkTarget, MemberKind, MemberRef

logger = logging.getLogger(__name__)

DOCS_RS = "https://docs.rs/"

# Member anchor inside an item page: `method.new`, `variant.Bar`, ...
_MEMBER_PATTERN = re.compile(r"^(method|tymethod|variant)\.(.+)$")


@dataclass(frozen=True)
class UrlShape:
    """One recognised docs.rs URL layout.

    `pattern` is matched against the part of the URL that follows
    `https://docs.rs/PACKAGE`. Named groups it may define: `version`,
    `crate`, `modules` (a `/`-prefixed path), `index`, `kind`, `name`
    and `fragment`.
    """

    name: str
    pattern: re.Pattern[str]
    description: str = ""

    def parse(self, package: str, remainder: str) -> LinkTarget | None:
        """Parse `remainder` into a LinkTarget, or None if it does not fit."""
        match = self.pattern.fullmatch(remainder)
        if match is None:
            return None

        groups = match.groupdict()
        fragment = groups.get("fragment")
        modules = groups.get("modules") or ""
        item = None
        member = None

        try:
            if groups.get("kind"):
                item = ItemRef(kind=ItemKind(groups["kind"]), name=groups["name"])
                member_match = _MEMBER_PATTERN.match(fragment or "")
                if member_match is not None:
                    member = MemberRef(
                        kind=MemberKind(member_match.group(1)),
                        name=member_match.group(2),
                    )
                    fragment = None

            return LinkTarget(
                package=package,
                version=groups.get("version"),
                crate=groups.get("crate"),
                modules=[m for m in modules.split("/") if m],
                item=item,
                member=member,
                fragment=fragment,
                index=bool(groups.get("index")),
            )
        except ValidationError as e:
            # e.g. struct.Foo.html#variant.Bar: structs have no variants
            logger.debug("Shape %s rejected %r: %s", self.name, remainder, e)
            return None


class ShapeRegistry:
    """Ordered list of URL shapes; the first shape that parses a URL wins."""

    def __init__(self, shapes: list[UrlShape] | None = None) -> None:
        self._shapes: list[UrlShape] = list(shapes) if shapes else []

    @property
    def shapes(self) -> list[UrlShape]:
        """Registered shapes, in match order."""
        return list(self._shapes)

    def register(self, shape: UrlShape) -> None:
        """Register a shape after all existing ones."""
        self._shapes.append(shape)

    def match(self, url: str, package: str) -> LinkTarget | None:
        """Parse a docs.rs URL for `package`.

        Returns None when the URL is not a docs.rs link for this package,
        or when no registered shape recognises it. Use `is_package_url`
        to tell those two cases apart.
        """
        remainder = package_remainder(url, package)
        if remainder is None:
            return None
        for shape in self._shapes:
            target = shape.parse(package, remainder)
            if target is not None:
                logger.debug("URL %s matched shape %s", url, shape.name)
                return target
        return None


def package_remainder(url: str, package: str) -> str | None:
    """Return what follows `https://docs.rs/PACKAGE` in `url`.

    None if `url` is not a docs.rs link for exactly this package; the
    package segment must be followed by the end of the URL, `/` or `#`.
    """
    prefix = DOCS_RS + package
    if not url.startswith(prefix):
        return None
    remainder = url[len(prefix) :]
    if remainder and remainder[0] not in "/#":
        return None
    return remainder


def is_package_url(url: str, package: str) -> bool:
    """True if `url` points at docs.rs pages of `package`."""
    return package_remainder(url, package) is not None
