"""Fenced code block tracking."""

from __future__ import annotations

_FENCE = "```"


def is_fence(line: str) -> bool:
    """True if `line` opens or closes a fenced code block.

    Any run of three or more backticks counts, with or without an info
    string. Run lengths are not compared between the opening and the
    closing fence.
    """
    return line.strip().startswith(_FENCE)


class FenceTracker:
    """Tracks whether the current line is inside a fenced code block."""

    def __init__(self) -> None:
        self.in_code_block = False

    def verbatim(self, line: str) -> bool:
        """Advance past `line` and report whether to emit it untouched.

        Fence lines and everything between them are verbatim. An
        unterminated block simply runs to the end of the input.
        """
        if is_fence(line):
            self.in_code_block = not self.in_code_block
            return True
        return self.in_code_block
