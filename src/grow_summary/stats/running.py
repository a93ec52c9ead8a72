"""Running descriptive statistics for one measured field within one day."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RunningStat:
    """Accumulator recomputed on every observed value.

    ``median`` is positional: it is the entry at index ``len // 2`` in
    insertion order, which only equals the statistical median when values
    arrive sorted. Readings arrive in time order, so in practice it is the
    value logged closest to the middle of the day's sampling window.
    """

    entries: list[float] = field(default_factory=list)
    total: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0
    mean: float = 0.0
    median: float = 0.0

    @classmethod
    def seed(cls, value: float) -> RunningStat:
        """Start a new accumulator from a single value."""
        return cls(
            entries=[value],
            total=value,
            maximum=value,
            minimum=value,
            mean=value,
            median=value,
        )

    @property
    def count(self) -> int:
        return len(self.entries)

    def observe(self, value: float) -> None:
        """Append a value and recompute every statistic."""
        self.total += value
        self.entries.append(value)

        self.maximum = max(self.entries)
        self.minimum = min(self.entries)
        self.median = self.entries[len(self.entries) // 2]
        self.mean = self.total / len(self.entries)

    def describe(self, label: str) -> str:
        return f"{label}: mean: {self.mean} max: {self.maximum} min: {self.minimum}"
