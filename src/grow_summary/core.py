"""
Entry-point operations wrapping the pipeline in a Result.

The CLI calls these; they never raise for expected failures (bad rows,
missing files), they report them in the returned Result instead.
"""

from __future__ import annotations

import json
from pathlib import Path

from grow_summary.exceptions import MalformedRowError, SourceIOError
from grow_summary.flows.summarize import summarize_all
from grow_summary.ingest import iter_readings
from grow_summary.renderers.summary import build_summary_text
from grow_summary.schemas import Result, fields_for_schema
from grow_summary.stats import DEFAULT_GDD_THRESHOLD_F, DayLedger, ledger_to_dict

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_IO = 2


def _failure(exc: MalformedRowError | SourceIOError) -> Result:
    if isinstance(exc, MalformedRowError):
        error, code = f"malformed row, {exc}", EXIT_MALFORMED
    else:
        error, code = f"I/O failure, {exc}", EXIT_IO
    return Result(success=False, message="", error=error, exit_code=code)


def process_log(
    readings_path: Path,
    events_path: Path | None,
    output_path: Path,
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F,
    schema: str = "full",
    html_path: Path | None = None,
) -> Result:
    """Run the summarize flow and report the outcome."""
    try:
        data = summarize_all(
            readings_path=readings_path,
            events_path=events_path,
            output_path=output_path,
            gdd_threshold=gdd_threshold,
            schema_name=schema,
            html_path=html_path,
        )
    except (MalformedRowError, SourceIOError) as exc:
        return _failure(exc)

    return Result(
        success=True,
        message=f"{data['days']} days written to {data['output']}",
        data=data,
    )


def describe_log(
    readings_path: Path,
    gdd_threshold: float = DEFAULT_GDD_THRESHOLD_F,
    schema: str = "full",
    as_json: bool = False,
) -> Result:
    """Summarize a sensor log without writing a report.

    The message holds the rendered text dump, or a JSON document when
    ``as_json`` is set.
    """
    fields = fields_for_schema(schema)
    ledger = DayLedger(fields=fields, gdd_threshold=gdd_threshold)
    try:
        ledger.extend(iter_readings(readings_path, fields))
    except (MalformedRowError, SourceIOError) as exc:
        return _failure(exc)

    payload = ledger_to_dict(ledger)
    message = json.dumps(payload, indent=2) if as_json else build_summary_text(ledger)
    return Result(success=True, message=message, data=payload)
