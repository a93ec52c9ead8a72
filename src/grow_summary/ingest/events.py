"""Events CSV -> date-keyed label lookup.

Columns: ``timestamp, event_label``. Timestamps follow the readings rule (the
time of day is dropped), so several events on one date collapse to the last
one in the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from grow_summary.exceptions import MalformedRowError
from grow_summary.ingest.readings import parse_date, read_rows

if TYPE_CHECKING:
    from collections.abc import Iterable

    from grow_summary.ingest.readings import NumberedRow

# ISO date string -> event label
EventIndex = dict[str, str]


def build_event_index(rows: Iterable[NumberedRow]) -> EventIndex:
    """Build the lookup from numbered event rows, as returned by ``read_rows``.

    Raises:
        MalformedRowError: If a row lacks a label or has an invalid date.
    """
    index: EventIndex = {}
    for line, row in rows:
        if len(row) < 2:
            raise MalformedRowError(line, row, "expected timestamp and event label")
        try:
            day = parse_date(row[0])
        except ValueError:
            raise MalformedRowError(line, row, f"invalid date {row[0]!r}") from None
        index[day.isoformat()] = row[1]
    return index


def load_events(path: Path | None) -> EventIndex:
    """Load the event lookup, or an empty one when no events file is configured."""
    if path is None:
        return {}
    return build_event_index(read_rows(Path(path)))
