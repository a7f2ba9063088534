"""Error hierarchy for rustdocify."""

from __future__ import annotations


class RustdocifyError(Exception):
    """Base exception for all rustdocify errors."""

    pass


class ConfigError(RustdocifyError):
    """Configuration loading or validation error."""

    pass


class ConversionError(RustdocifyError):
    """A README could not be converted.

    Attributes:
        line_number: 1-based number of the offending line.
        line: The offending line, without its line ending.
    """

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line}")
        self.line_number = line_number
        self.line = line


class _LinkMismatchError(ConversionError):
    """A link segment differs from the value the caller expected."""

    field = "value"

    def __init__(self, line_number: int, line: str, url: str, expected: str, found: str) -> None:
        super().__init__(
            f"{self.field} mismatch in {url}: expected {expected!r}, found {found!r}",
            line_number,
            line,
        )
        self.url = url
        self.expected = expected
        self.found = found


class VersionMismatchError(_LinkMismatchError):
    """URL version segment differs from the expected version."""

    field = "version"


class CrateNameMismatchError(_LinkMismatchError):
    """URL crate segment differs from the expected crate name."""

    field = "crate name"


class MissingVersionError(ConversionError):
    """Strict mode: a version is expected but the URL has none."""

    def __init__(self, line_number: int, line: str, url: str, expected: str) -> None:
        super().__init__(f"missing version in {url}: expected {expected!r}", line_number, line)
        self.url = url
        self.expected = expected


class UnrecognizedUrlError(ConversionError):
    """Strict mode: a docs.rs URL for the package matches no known shape."""

    def __init__(self, line_number: int, line: str, url: str) -> None:
        super().__init__(f"unrecognized url {url}", line_number, line)
        self.url = url


class NonFirstTopLevelHeaderError(ConversionError):
    """Strict mode: a top-level header appears after another header."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("non-first top level header", line_number, line)
