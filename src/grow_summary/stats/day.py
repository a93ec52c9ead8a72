"""Per-day aggregate: one RunningStat per tracked field plus growing degree days.

GDD here is the single 24-hour-average approximation::

    GDD_day = mean(temperature readings for the day) - threshold

It is not clamped at zero, so cold days contribute negative GDD to the
cumulative report column.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from grow_summary.schemas import FULL_FIELDS, FieldName
from grow_summary.stats.running import RunningStat

if TYPE_CHECKING:
    from datetime import date

    from grow_summary.schemas import Reading

# Base temperature for GDD, same units as the temperature column (deg F)
DEFAULT_GDD_THRESHOLD_F = 65.0

# Labels used by the human-readable dump
FIELD_LABELS: dict[FieldName, str] = {
    FieldName.TEMPERATURE: "temp",
    FieldName.HUMIDITY: "humidity",
    FieldName.DEW_POINT: "dew_point",
    FieldName.VPD: "vpd",
}


def check_fields(fields: tuple[FieldName, ...]) -> tuple[FieldName, ...]:
    """Validate a tracked field set.

    Raises:
        ValueError: If the set is empty, repeats a field, or lacks temperature.
    """
    if FieldName.TEMPERATURE not in fields:
        msg = "Tracked fields must include temperature (GDD is derived from it)"
        raise ValueError(msg)
    if len(set(fields)) != len(fields):
        msg = f"Tracked fields contain duplicates: {[str(f) for f in fields]}"
        raise ValueError(msg)
    return tuple(fields)


@dataclass
class DaySummary:
    """Statistics for one calendar day."""

    date: date
    stats: dict[FieldName, RunningStat] = field(default_factory=dict)
    gdd: float = 0.0
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F

    @classmethod
    def from_first_reading(
        cls,
        reading: Reading,
        fields: tuple[FieldName, ...] = FULL_FIELDS,
        gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F,
    ) -> DaySummary:
        """Open a new day, seeding every tracked field from ``reading``.

        Args:
            reading: The first reading logged for this date.
            fields: Fields to track; extra fields on the reading are ignored.
            gdd_threshold: GDD base temperature.

        Returns:
            A summary whose statistics all equal the reading's values.
        """
        stats = {name: RunningStat.seed(reading.value(name)) for name in fields}
        return cls(
            date=reading.date,
            stats=stats,
            gdd=reading.temperature - gdd_threshold,
            gdd_threshold=gdd_threshold,
        )

    @property
    def fields(self) -> tuple[FieldName, ...]:
        return tuple(self.stats)

    @property
    def temperature(self) -> RunningStat:
        return self.stats[FieldName.TEMPERATURE]

    def absorb(self, reading: Reading) -> None:
        """Fold another reading for the same date into this summary.

        The caller guarantees ``reading.date == self.date``; it is not checked.
        """
        for name, stat in self.stats.items():
            stat.observe(reading.value(name))
        self.gdd = self.temperature.mean - self.gdd_threshold

    def describe(self) -> str:
        lines = [self.date.isoformat()]
        lines.extend(stat.describe(FIELD_LABELS[name]) for name, stat in self.stats.items())
        lines.append(f"gdd: {self.gdd}")
        return "\n".join(lines) + "\n"
