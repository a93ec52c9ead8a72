"""Ordered sequence of day summaries built from a time-ordered reading stream.

Day boundaries are detected by comparing each reading against the most
recently appended day only. This is valid because input is required to be
sorted by timestamp. If it is not, a date that reappears after a later date
opens a second summary for that date instead of merging into the first one;
``duplicate_dates()`` reports such fragments so callers can warn about them.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grow_summary.schemas import FULL_FIELDS, FieldName
from grow_summary.stats.day import DEFAULT_GDD_THRESHOLD_F, DaySummary, check_fields

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import date

    from grow_summary.schemas import Reading


@dataclass
class DayLedger:
    """Append-only collection of DaySummary, in arrival order."""

    fields: tuple[FieldName, ...] = FULL_FIELDS
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F
    days: list[DaySummary] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fields = check_fields(self.fields)

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DaySummary]:
        return iter(self.days)

    def __str__(self) -> str:
        return self.render()

    @property
    def first(self) -> DaySummary | None:
        return self.days[0] if self.days else None

    @property
    def last(self) -> DaySummary | None:
        return self.days[-1] if self.days else None

    def add_reading(self, reading: Reading) -> DaySummary:
        """Route a reading to the current day or open a new one.

        Args:
            reading: Next reading in timestamp order.

        Returns:
            The summary the reading was folded into.
        """
        last = self.last
        if last is not None and last.date == reading.date:
            last.absorb(reading)
            return last

        summary = DaySummary.from_first_reading(reading, self.fields, self.gdd_threshold)
        self.days.append(summary)
        return summary

    def extend(self, readings: Iterable[Reading]) -> int:
        """Add readings in order. Returns how many were added."""
        count = 0
        for reading in readings:
            self.add_reading(reading)
            count += 1
        return count

    def duplicate_dates(self) -> list[date]:
        """Dates that ended up split across more than one summary."""
        counts = Counter(day.date for day in self.days)
        return [d for d, n in counts.items() if n > 1]

    def render(self) -> str:
        """One-line description of the ledger's extent."""
        first, last = self.first, self.last
        if first is None or last is None:
            return f"length: {len(self.days)}, date range: <na> - <na>"
        return f"{len(self.days)} records for date range {first.date} - {last.date}"
