"""Incremental per-day statistics engine.

Readings are folded one at a time, in timestamp order, into a DayLedger. The
ledger opens a DaySummary whenever the date changes; each summary keeps one
RunningStat per tracked field and the day's growing degree days.

Public API:
  - running: RunningStat
  - day: DaySummary, DEFAULT_GDD_THRESHOLD_F
  - ledger: DayLedger
  - serialization: running_stat_to_dict, day_summary_to_dict, ledger_to_dict
"""

from grow_summary.stats.day import DEFAULT_GDD_THRESHOLD_F, DaySummary
from grow_summary.stats.ledger import DayLedger
from grow_summary.stats.running import RunningStat
from grow_summary.stats.serialization import (
    day_summary_to_dict,
    ledger_to_dict,
    running_stat_to_dict,
)

__all__ = [
    "DEFAULT_GDD_THRESHOLD_F",
    "DayLedger",
    "DaySummary",
    "RunningStat",
    "day_summary_to_dict",
    "ledger_to_dict",
    "running_stat_to_dict",
]
