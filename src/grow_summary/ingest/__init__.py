"""CSV ingest: raw sensor and event files -> domain models.

    ingest/
    ├── readings.py   # parse_date, parse_reading, read_rows, iter_readings, load_readings
    └── events.py     # EventIndex, build_event_index, load_events

Parsing is strict: the first bad row raises MalformedRowError and nothing is
skipped. Missing or unreadable files raise SourceIOError.
"""

from grow_summary.ingest.events import EventIndex, build_event_index, load_events
from grow_summary.ingest.readings import (
    iter_readings,
    load_readings,
    parse_date,
    parse_reading,
    read_rows,
)

__all__ = [
    "EventIndex",
    "build_event_index",
    "iter_readings",
    "load_events",
    "load_readings",
    "parse_date",
    "parse_reading",
    "read_rows",
]
