"""
Exception hierarchy for grow summary.

- SummaryError: Base exception
- MalformedRowError: A sensor or event row could not be parsed
- SourceIOError: An input could not be read or the report could not be written

Every run is all-or-nothing: none of these are recovered from inside the
pipeline, they propagate to the CLI which turns them into an exit code.
"""

from __future__ import annotations

from collections.abc import Sequence


class SummaryError(Exception):
    """Base exception for grow summary."""


class MalformedRowError(SummaryError, ValueError):
    """
    A CSV row holds an unparsable date, an unparsable number, or too few columns.

    Attributes:
        line: 1-based line number in the source file (header is line 1)
        row: The raw cell values of the offending row
        reason: What was wrong with it
    """

    def __init__(self, line: int, row: Sequence[str], reason: str) -> None:
        self.line = line
        self.row = [str(cell) for cell in row]
        self.reason = reason
        super().__init__(f"line {line}: {reason} (row: {','.join(self.row)})")


class SourceIOError(SummaryError, OSError):
    """
    A file could not be opened for reading or writing.

    Attributes:
        path: The path that failed
    """

    def __init__(self, path: object, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
