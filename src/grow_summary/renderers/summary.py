"""Console dump of a ledger: the extent line followed by one block per day."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grow_summary.renderers import render_template

if TYPE_CHECKING:
    from grow_summary.stats.ledger import DayLedger


def build_summary_text(ledger: DayLedger) -> str:
    """Render the ledger header and each day's statistics block."""
    return render_template(
        "summary.txt.j2",
        header=ledger.render(),
        blocks=[day.describe() for day in ledger],
    )
