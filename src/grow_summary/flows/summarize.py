"""
Prefect flow turning a sensor log into the daily report.

readings CSV -> DayLedger -> report CSV (joined with the events CSV), plus an
optional HTML copy of the report.

Run locally:
    python -m grow_summary.flows.summarize
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from grow_summary.config import get_settings
from grow_summary.exceptions import SourceIOError
from grow_summary.ingest import iter_readings, load_events
from grow_summary.renderers.html import build_report_html
from grow_summary.report import build_report_rows, write_report
from grow_summary.schemas import FieldName, fields_for_schema
from grow_summary.stats import DEFAULT_GDD_THRESHOLD_F, DayLedger

# =============================================================================
# Tasks
# =============================================================================


@task(name="load-events")
def load_event_index(events_path: Path | None) -> dict[str, str]:
    """Load the date -> event label lookup."""
    return load_events(events_path)


@task(name="build-ledger")
def build_ledger(
    readings_path: Path,
    fields: tuple[FieldName, ...],
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F,
) -> DayLedger:
    """Fold every reading of the sensor log into a DayLedger, in file order."""
    ledger = DayLedger(fields=fields, gdd_threshold=gdd_threshold)
    ledger.extend(iter_readings(readings_path, fields))
    return ledger


@task(name="write-csv-report")
def write_csv_report(ledger: DayLedger, events: dict[str, str], output_path: Path) -> Path:
    """Write the daily report CSV."""
    return write_report(ledger, events, output_path)


@task(name="render-html-report")
def render_html_report(ledger: DayLedger, events: dict[str, str]) -> str:
    """Render the daily report as a standalone HTML page."""
    return build_report_html(build_report_rows(ledger, events))


@task(name="write-html-report")
def write_html_report(html: str, html_path: Path) -> Path:
    """Write a rendered HTML report.

    Raises:
        SourceIOError: If the page cannot be written.
    """
    try:
        html_path.parent.mkdir(parents=True, exist_ok=True)
        with html_path.open("w") as f:
            f.write(html)
    except OSError as exc:
        raise SourceIOError(html_path, f"cannot write report ({exc})") from exc
    return html_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="summarize-sensor-log", log_prints=True)
def summarize_all(
    readings_path: Path,
    events_path: Path | None,
    output_path: Path,
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F,
    schema_name: str = "full",
    html_path: Path | None = None,
) -> dict[str, Any]:
    """
    Build the daily report for one sensor log.

    All-or-nothing: a malformed row or an unreadable file aborts the run
    before the report is written, and a failed HTML write removes the CSV
    written by the same run.
    """
    fields = fields_for_schema(schema_name)

    print(f"Loading events from {events_path}...")
    events = load_event_index(events_path)
    print(f"Loaded {len(events)} events")

    print(f"Summarizing {readings_path} ({schema_name} schema, GDD base {gdd_threshold})...")
    ledger = build_ledger(readings_path, fields, gdd_threshold)
    print(f"day summaries: {ledger}")

    duplicates = ledger.duplicate_dates()
    if duplicates:
        dates = ", ".join(d.isoformat() for d in duplicates)
        print(f"Warning: readings are out of order, dates split across rows: {dates}")

    html = render_html_report(ledger, events) if html_path is not None else None

    print("Writing report...")
    output = write_csv_report(ledger, events, output_path)
    print(f"Report written: {output}")

    result: dict[str, Any] = {
        "days": len(ledger),
        "readings": sum(day.temperature.count for day in ledger),
        "output": str(output),
        "fragmented_dates": [d.isoformat() for d in duplicates],
    }

    if html is not None:
        try:
            html_output = write_html_report(html, Path(html_path))
        except SourceIOError:
            # No partial output
            output.unlink(missing_ok=True)
            raise
        print(f"HTML report written: {html_output}")
        result["html_output"] = str(html_output)

    return result


if __name__ == "__main__":
    settings = get_settings()
    result = summarize_all(
        readings_path=settings.readings_path,
        events_path=settings.events_path,
        output_path=settings.output_path,
        gdd_threshold=settings.gdd_threshold,
        schema_name=settings.schema_name,
    )
    print(f"Flow complete: {result}")
