"""Pure rendering functions: ledger data -> text or HTML strings.

All renderers follow the same pattern:
  - Input: DayLedger or report rows
  - Output: str
  - No side effects, no I/O, no Prefect decorators

Used by flows/summarize.py and the ``summary`` CLI command.

Public API:
  - summary: build_summary_text
  - html: build_report_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers; only HTML templates are escaped
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(enabled_extensions=("html.j2",)),
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
