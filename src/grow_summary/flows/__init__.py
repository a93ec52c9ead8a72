"""
Prefect flows for the summary pipeline.

Flows:
- summarize: readings CSV + events CSV -> daily report CSV (and optional HTML)

Usage (local):
    python -m grow_summary.flows.summarize

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m grow_summary.flows.summarize
"""
