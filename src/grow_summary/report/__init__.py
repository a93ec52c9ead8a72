"""Report writers for a finished DayLedger.

Public API:
  - csv_report: REPORT_COLUMNS, build_report_rows, build_report_frame, write_report
"""

from grow_summary.report.csv_report import (
    REPORT_COLUMNS,
    build_report_frame,
    build_report_rows,
    write_report,
)

__all__ = [
    "REPORT_COLUMNS",
    "build_report_frame",
    "build_report_rows",
    "write_report",
]
