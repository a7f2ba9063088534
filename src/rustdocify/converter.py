"""README to rustdoc conversion: one pass over the lines of a README."""

from __future__ import annotations

import logging
import re

from rustdocify.core.errors import NonFirstTopLevelHeaderError
from rustdocify.markdown.fences import FenceTracker
from rustdocify.markdown.headers import demote_header, header_depth
from rustdocify.markdown.links import LinkRewriter
from rustdocify.shapes.registry import ShapeRegistry

logger = logging.getLogger(__name__)

# A line with its ending, or a final line without one
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class Converter:
    """Converts README markdown into a rustdoc crate-level fragment.

    - Drops the top-level header and the blank line right after it.
    - Demotes every other header by one level.
    - Rewrites docs.rs links of `package_name` into intra-doc links.
    - Leaves fenced code blocks untouched.
    - Checks link versions and crate names against the expected values,
      when those are given.

    With `strict`, unrecognised docs.rs URLs of the package, links lacking
    an expected version and repeated top-level headers are errors too.
    """

    def __init__(
        self,
        package_name: str,
        expected_version: str | None = None,
        expected_crate_name: str | None = None,
        *,
        strict: bool = False,
        registry: ShapeRegistry | None = None,
    ) -> None:
        self.strict = strict
        self._links = LinkRewriter(
            package_name,
            expected_version=expected_version,
            expected_crate_name=expected_crate_name,
            strict=strict,
            registry=registry,
        )

    def convert(self, content: str) -> str:
        """Convert a whole README.

        Either the complete converted text is returned or a
        ConversionError is raised; there is no partial output.
        """
        fences = FenceTracker()
        seen_header = False
        skip_blank = False
        output: list[str] = []

        for line_number, raw in enumerate(_LINE.findall(content), start=1):
            line, ending = _split_ending(raw)

            if fences.verbatim(line):
                skip_blank = False
                output.append(raw)
                continue

            if skip_blank:
                skip_blank = False
                if not line.strip():
                    continue

            if header_depth(line):
                demoted = demote_header(line)
                if demoted is None:
                    if seen_header and self.strict:
                        raise NonFirstTopLevelHeaderError(line_number, line)
                    logger.debug("Line %d: dropping top-level header %r", line_number, line)
                    skip_blank = True
                else:
                    output.append(demoted + ending)
                seen_header = True
                continue

            output.append(self._links.rewrite(line, line_number) + ending)

        return "".join(output)


def rustdocify(
    content: str,
    package_name: str,
    expected_version: str | None = None,
    expected_crate_name: str | None = None,
    *,
    strict: bool = False,
) -> str:
    """Convert README `content` for embedding in the rustdoc of `package_name`.

    Args:
        content: README markdown.
        package_name: Package whose docs.rs links are rewritten.
        expected_version: If given, links with a version segment must carry
            exactly this version.
        expected_crate_name: If given, links with a crate segment must name
            exactly this crate.
        strict: Also reject unrecognised links, missing versions and
            repeated top-level headers.

    Returns:
        The converted markdown.

    Raises:
        ConversionError: If a link fails validation.
    """
    converter = Converter(
        package_name,
        expected_version,
        expected_crate_name,
        strict=strict,
    )
    return converter.convert(content)


def _split_ending(raw: str) -> tuple[str, str]:
    """Split a raw line into its content and its line ending."""
    if raw.endswith("\r\n"):
        return raw[:-2], "\r\n"
    if raw.endswith("\n"):
        return raw[:-1], "\n"
    return raw, ""
