"""Daily report: DayLedger + EventIndex -> CSV rows.

One row per ledger day, in ledger order. The ``gdd`` column is the running
total of per-day GDD across all rows emitted so far, not the day's own value.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pandas as pd

from grow_summary.exceptions import SourceIOError
from grow_summary.schemas import FieldName

if TYPE_CHECKING:
    from grow_summary.ingest.events import EventIndex
    from grow_summary.stats.day import DaySummary
    from grow_summary.stats.ledger import DayLedger

REPORT_COLUMNS = [
    "date",
    "avg temp",
    "max temp",
    "min temp",
    "avg humidity",
    "max humidity",
    "min humidity",
    "avg dewpoint",
    "avg vpd",
    "gdd",
    "event",
]

# (field, statistic attribute) for every numeric column between date and gdd
_STAT_COLUMNS: list[tuple[FieldName, str]] = [
    (FieldName.TEMPERATURE, "mean"),
    (FieldName.TEMPERATURE, "maximum"),
    (FieldName.TEMPERATURE, "minimum"),
    (FieldName.HUMIDITY, "mean"),
    (FieldName.HUMIDITY, "maximum"),
    (FieldName.HUMIDITY, "minimum"),
    (FieldName.DEW_POINT, "mean"),
    (FieldName.VPD, "mean"),
]


def _stat_cells(day: DaySummary) -> list[Any]:
    # Fields the ledger does not track (reduced schema) stay blank
    cells: list[Any] = []
    for name, attr in _STAT_COLUMNS:
        stat = day.stats.get(name)
        cells.append(getattr(stat, attr) if stat is not None else "")
    return cells


def build_report_rows(ledger: DayLedger, events: EventIndex | None = None) -> list[list[Any]]:
    """Build report rows (without the header).

    Args:
        ledger: Finished ledger.
        events: Optional date -> label lookup.

    Returns:
        One list of cells per day, matching ``REPORT_COLUMNS``.
    """
    events = events or {}
    rows: list[list[Any]] = []
    total_gdd = 0.0
    for day in ledger:
        key = day.date.isoformat()
        total_gdd += day.gdd
        rows.append([key, *_stat_cells(day), total_gdd, events.get(key, "")])
    return rows


def build_report_frame(ledger: DayLedger, events: EventIndex | None = None) -> pd.DataFrame:
    return pd.DataFrame(build_report_rows(ledger, events), columns=REPORT_COLUMNS)


def write_report(ledger: DayLedger, events: EventIndex | None, path: Path) -> Path:
    """Write the report CSV, header row included, creating parent directories.

    Raises:
        SourceIOError: If the output path cannot be written.
    """
    path = Path(path)
    frame = build_report_frame(ledger, events)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(path, index=False)
    except OSError as exc:
        raise SourceIOError(path, f"cannot write report ({exc})") from exc
    return path
