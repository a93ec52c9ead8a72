"""JSON serialization helpers for ledger data structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from grow_summary.stats.day import DaySummary
    from grow_summary.stats.ledger import DayLedger
    from grow_summary.stats.running import RunningStat


def running_stat_to_dict(stat: RunningStat, digits: int = 2) -> dict[str, Any]:
    """Serialize a RunningStat's outputs (entries are omitted, only the count)."""
    return {
        "count": stat.count,
        "sum": round(stat.total, digits),
        "max": round(stat.maximum, digits),
        "min": round(stat.minimum, digits),
        "mean": round(stat.mean, digits),
        "median": round(stat.median, digits),
    }


def day_summary_to_dict(day: DaySummary, digits: int = 2) -> dict[str, Any]:
    return {
        "date": day.date.isoformat(),
        "gdd": round(day.gdd, digits),
        "stats": {str(name): running_stat_to_dict(stat, digits) for name, stat in day.stats.items()},
    }


def ledger_to_dict(ledger: DayLedger, digits: int = 2) -> dict[str, Any]:
    """Serialize a DayLedger to a JSON-compatible dict.

    Args:
        ledger: The ledger to serialize.
        digits: Decimal places kept for every float.

    Returns:
        Dict with the tracked fields, GDD threshold, summary line and days.
    """
    return {
        "fields": [str(name) for name in ledger.fields],
        "gdd_threshold": ledger.gdd_threshold,
        "summary": ledger.render(),
        "days": [day_summary_to_dict(day, digits) for day in ledger],
    }
