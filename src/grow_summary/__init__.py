"""Grow Summary - daily statistics and growing degree days from sensor logs.

Architecture::

    schemas.py     Reading, FieldName, Result (pydantic)
    stats/         RunningStat -> DaySummary -> DayLedger (the statistics engine)
    ingest/        Readings and events CSV parsing (pandas)
    report/        Ledger -> daily report CSV with cumulative GDD
    renderers/     Ledger -> text dump / HTML table (jinja2)
    flows/         Prefect orchestration (ingest -> ledger -> report)
    core.py        Flow calls wrapped in a Result for the CLI

Data flow: readings CSV -> Reading -> DayLedger.add_reading -> report CSV
"""

__version__ = "0.1.0"

from grow_summary.config import Settings
from grow_summary.schemas import Reading

__all__ = ["Reading", "Settings", "__version__"]
