"""HTML rendering of the daily report table."""

from __future__ import annotations

from typing import Any

from grow_summary.renderers import render_template
from grow_summary.report.csv_report import REPORT_COLUMNS


def _cell(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def build_report_html(rows: list[list[Any]], title: str = "Daily sensor summary") -> str:
    """Build a standalone HTML page holding the report table.

    Args:
        rows: Report rows as returned by ``build_report_rows``.
        title: Page heading.

    Returns:
        Rendered HTML document.
    """
    formatted = [[_cell(value) for value in row] for row in rows]
    final_gdd = formatted[-1][REPORT_COLUMNS.index("gdd")] if formatted else None
    return render_template(
        "report.html.j2",
        title=title,
        columns=REPORT_COLUMNS,
        rows=formatted,
        final_gdd=final_gdd,
    )
