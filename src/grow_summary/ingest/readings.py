"""Sensor readings CSV -> Reading models.

Columns are positional: ``timestamp`` followed by one column per tracked
field, in ``FULL_FIELDS`` order (or ``REDUCED_FIELDS`` for the two-column
loggers). The header row is required but its names are not used.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from grow_summary.exceptions import MalformedRowError, SourceIOError
from grow_summary.schemas import FULL_FIELDS, FieldName, Reading

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# Line numbers reported in errors count the header as line 1
_FIRST_DATA_LINE = 2

# Plain decimal or exponent notation; no inf, nan or digit separators
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

# (line number, cells) for one non-blank CSV row
NumberedRow = tuple[int, list[str]]


def parse_date(text: str) -> date:
    """Parse ``YYYY-MM-DD`` with an optional trailing `` HH:MM[:SS]`` that is dropped.

    Raises:
        ValueError: If the date part is not a valid calendar date.
    """
    date_part = text.strip().split(" ")[0]
    return datetime.strptime(date_part, "%Y-%m-%d").date()


def parse_value(text: str) -> float:
    if not _NUMBER.fullmatch(text.strip()):
        msg = f"not a number: {text!r}"
        raise ValueError(msg)
    return float(text)


def parse_reading(
    row: Sequence[str],
    fields: tuple[FieldName, ...] = FULL_FIELDS,
    line: int = _FIRST_DATA_LINE,
) -> Reading:
    """Build a Reading from the raw cells of one CSV row.

    Args:
        row: Cell strings, timestamp first.
        fields: Field names for the cells after the timestamp.
        line: Source line number, for error messages.

    Raises:
        MalformedRowError: If a cell is missing or cannot be parsed.
    """
    if len(row) < len(fields) + 1:
        raise MalformedRowError(line, row, f"expected {len(fields) + 1} columns, got {len(row)}")

    try:
        day = parse_date(row[0])
    except ValueError:
        raise MalformedRowError(line, row, f"invalid date {row[0]!r}") from None

    measurements: dict[FieldName, float] = {}
    for name, cell in zip(fields, row[1:], strict=False):
        try:
            measurements[name] = parse_value(cell)
        except ValueError:
            raise MalformedRowError(line, row, f"invalid {name} value {cell!r}") from None

    return Reading(date=day, measurements=measurements)


def read_rows(path: Path) -> list[NumberedRow]:
    """Read a CSV file as raw strings, header excluded.

    Each row comes with its line number in the file (the header is line 1).
    Blank lines are skipped but still counted. A zero-byte file and a
    header-only file both give an empty list.

    Raises:
        SourceIOError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        frame = pd.read_csv(
            path,
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError:
        return []
    except FileNotFoundError:
        raise SourceIOError(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceIOError(path, f"cannot read file ({exc})") from exc
    except pd.errors.ParserError as exc:
        raise MalformedRowError(_FIRST_DATA_LINE, [], f"cannot parse CSV ({exc})") from exc

    # Blank lines come back as all-NaN rows; short rows are NaN-padded
    blank = frame.isna().all(axis=1).tolist()
    frame = frame.fillna("")
    return [
        (_FIRST_DATA_LINE + offset, list(row))
        for offset, row in enumerate(frame.itertuples(index=False, name=None))
        if not blank[offset]
    ]


def iter_readings(path: Path, fields: tuple[FieldName, ...] = FULL_FIELDS) -> Iterator[Reading]:
    """Yield Readings in file order; stops at the first malformed row."""
    for line, row in read_rows(path):
        yield parse_reading(row, fields, line=line)


def load_readings(path: Path, fields: tuple[FieldName, ...] = FULL_FIELDS) -> list[Reading]:
    """Load every Reading from a sensor CSV.

    Args:
        path: CSV file with a header row.
        fields: Field set the columns map to.

    Returns:
        Readings in file order.

    Raises:
        SourceIOError: If the file cannot be read.
        MalformedRowError: On the first row that cannot be parsed.
    """
    return list(iter_readings(path, fields))
