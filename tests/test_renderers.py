"""Tests for the text and HTML renderers."""

from __future__ import annotations

from datetime import date

from grow_summary.renderers import render_template
from grow_summary.renderers.html import build_report_html
from grow_summary.renderers.summary import build_summary_text
from grow_summary.report import build_report_rows
from grow_summary.schemas import FieldName, Reading
from grow_summary.stats import DayLedger


def make_ledger() -> DayLedger:
    ledger = DayLedger()
    for day, temp in ((date(2021, 6, 1), 70.0), (date(2021, 6, 1), 80.0), (date(2021, 6, 2), 75.0)):
        ledger.add_reading(
            Reading(
                date=day,
                measurements={
                    FieldName.TEMPERATURE: temp,
                    FieldName.HUMIDITY: 50.0,
                    FieldName.DEW_POINT: 55.0,
                    FieldName.VPD: 1.0,
                },
            )
        )
    return ledger


class TestSummaryText:
    """Tests for the console dump."""

    def test_header_and_blocks(self):
        text = build_summary_text(make_ledger())
        assert text.startswith("day summaries: 2 records for date range 2021-06-01 - 2021-06-02")
        assert "2021-06-01\ntemp: mean: 75.0 max: 80.0 min: 70.0" in text
        assert "2021-06-02\ntemp: mean: 75.0" in text
        assert text.count("gdd: 10.0") == 2

    def test_empty_ledger_not_escaped(self):
        text = build_summary_text(DayLedger())
        assert "length: 0, date range: <na> - <na>" in text


class TestReportHtml:
    """Tests for the HTML table."""

    def test_contains_columns_and_rows(self):
        ledger = make_ledger()
        html = build_report_html(build_report_rows(ledger, {"2021-06-02": "flowering"}))
        assert "<th>avg temp</th>" in html
        assert "<td>2021-06-01</td>" in html
        assert "<td>75.00</td>" in html
        assert "flowering" in html
        assert "accumulated GDD 20.00" in html

    def test_event_labels_are_escaped(self):
        html = build_report_html(build_report_rows(make_ledger(), {"2021-06-01": "<b>frost</b>"}))
        assert "&lt;b&gt;frost&lt;/b&gt;" in html
        assert "<b>frost</b>" not in html

    def test_empty_rows(self):
        html = build_report_html([])
        assert "No readings." in html

    def test_render_template_html(self):
        html = render_template("report.html.j2", title="T", columns=[], rows=[], final_gdd=None)
        assert "<title>T</title>" in html
