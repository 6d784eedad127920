from __future__ import annotations

from pathlib import Path


class DictionaryError(RuntimeError):
    """Base class for every failure surfaced by a dictionary load."""


class PathResolutionError(DictionaryError):
    """Raised when a relative dictionary name cannot be made absolute."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Cannot resolve dictionary path {name!r}: {cause}")
        self.name = name
        self.cause = cause


class ResourceOpenError(DictionaryError):
    """Raised when the dictionary file cannot be opened for reading."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Cannot open dictionary {path}: {cause}")
        self.path = path
        self.cause = cause


class MalformedLineError(DictionaryError):
    """Raised when a matched frequency field is not a usable number."""

    def __init__(
        self, line: str, cause: BaseException, line_number: int | None = None
    ) -> None:
        super().__init__(line, cause, line_number)
        self.line = line
        self.cause = cause
        self.line_number = line_number

    def __str__(self) -> str:
        where = f"line {self.line_number}" if self.line_number else "line"
        return f"Malformed frequency in {where} ({self.line!r}): {self.cause}"


class StreamReadError(DictionaryError):
    """Raised when the underlying stream fails mid-read."""

    def __init__(self, cause: BaseException, line_number: int | None = None) -> None:
        super().__init__(cause, line_number)
        self.cause = cause
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number:
            return f"Failed reading dictionary at line {self.line_number}: {self.cause}"
        return f"Failed reading dictionary: {self.cause}"
