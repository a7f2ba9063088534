"""ATX header demotion."""

from __future__ import annotations

import re

# 1-6 '#' followed by whitespace or end of line
_HEADER_PATTERN = re.compile(r"^(#{1,6})(\s.*)?$")


def header_depth(line: str) -> int:
    """Depth of the ATX header on `line`, or 0 if it is not a header."""
    match = _HEADER_PATTERN.match(line)
    if match is None:
        return 0
    return len(match.group(1))


def demote_header(line: str) -> str | None:
    """Demote a header line by one level.

    Returns the line with one leading '#' removed, None for a top-level
    header (which is dropped), or the line unchanged if it is not a header.
    """
    depth = header_depth(line)
    if depth == 0:
        return line
    if depth == 1:
        return None
    return line[1:]
