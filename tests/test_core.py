"""Tests for the Result-returning entry operations."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from grow_summary.core import EXIT_IO, EXIT_MALFORMED, describe_log, process_log
from grow_summary.exceptions import MalformedRowError, SourceIOError
from grow_summary.flows import summarize

READINGS = (
    "timestamp,temperature,humidity,dew_point,vpd\n"
    "2021-06-01,70,50,55,1.0\n"
    "2021-06-01,80,60,58,1.2\n"
    "2021-06-02,75,55,56,1.1\n"
)


class TestProcessLog:
    """Tests for process_log."""

    def test_success(self) -> None:
        with patch("grow_summary.core.summarize_all") as mock_flow:
            mock_flow.return_value = {"days": 2, "output": "out.csv"}
            result = process_log(Path("in.csv"), None, Path("out.csv"))

        assert result.success is True
        assert result.message == "2 days written to out.csv"
        assert result.exit_code == 0
        mock_flow.assert_called_once_with(
            readings_path=Path("in.csv"),
            events_path=None,
            output_path=Path("out.csv"),
            gdd_threshold=65.0,
            schema_name="full",
            html_path=None,
        )

    def test_malformed_row(self) -> None:
        with patch("grow_summary.core.summarize_all") as mock_flow:
            mock_flow.side_effect = MalformedRowError(4, ["x", "1"], "invalid date 'x'")
            result = process_log(Path("in.csv"), None, Path("out.csv"))

        assert result.success is False
        assert result.exit_code == EXIT_MALFORMED
        assert "line 4" in (result.error or "")

    def test_io_failure(self) -> None:
        with patch("grow_summary.core.summarize_all") as mock_flow:
            mock_flow.side_effect = SourceIOError("in.csv", "file not found")
            result = process_log(Path("in.csv"), None, Path("out.csv"))

        assert result.success is False
        assert result.exit_code == EXIT_IO
        assert "in.csv: file not found" in (result.error or "")

    def test_unwritable_html_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A failed HTML write is an I/O failure and no CSV report is left."""
        for name in (
            "load_event_index",
            "build_ledger",
            "write_csv_report",
            "render_html_report",
            "write_html_report",
        ):
            monkeypatch.setattr(summarize, name, getattr(summarize, name).fn)
        readings = tmp_path / "example.csv"
        readings.write_text(READINGS)
        blocker = tmp_path / "taken"
        blocker.write_text("")
        output = tmp_path / "report.csv"

        with patch("grow_summary.core.summarize_all", summarize.summarize_all.fn):
            result = process_log(readings, None, output, html_path=blocker / "report.html")

        assert result.success is False
        assert result.exit_code == EXIT_IO
        assert "cannot write report" in (result.error or "")
        assert not output.exists()


class TestDescribeLog:
    """Tests for describe_log against real files."""

    def test_text(self, tmp_path: Path) -> None:
        path = tmp_path / "example.csv"
        path.write_text(READINGS)
        result = describe_log(path)
        assert result.success is True
        assert "2 records for date range 2021-06-01 - 2021-06-02" in result.message
        assert result.data is not None
        assert len(result.data["days"]) == 2

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "example.csv"
        path.write_text(READINGS)
        result = describe_log(path, gdd_threshold=70.0, as_json=True)
        payload = json.loads(result.message)
        assert payload["gdd_threshold"] == 70.0
        assert payload["days"][0]["gdd"] == 5.0
        assert payload["days"][0]["stats"]["temperature"]["median"] == 80.0

    def test_missing_file(self, tmp_path: Path) -> None:
        result = describe_log(tmp_path / "missing.csv")
        assert result.success is False
        assert result.exit_code == EXIT_IO

    def test_bad_row(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("timestamp,temperature,humidity\n2021-06-01,70,\n")
        result = describe_log(path, schema="reduced")
        assert result.success is False
        assert result.exit_code == EXIT_MALFORMED
