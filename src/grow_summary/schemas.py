"""
Domain models for grow summary.

Pydantic models for parsed sensor input and for operation results.
The statistics engine in ``stats/`` consumes these; ingest normalizes raw CSV
rows into them.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Measured fields
# =============================================================================


class FieldName(StrEnum):
    """Measured quantities a sensor row can carry."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    DEW_POINT = "dew_point"
    VPD = "vpd"


# Column order of the readings CSV after the timestamp
FULL_FIELDS: tuple[FieldName, ...] = (
    FieldName.TEMPERATURE,
    FieldName.HUMIDITY,
    FieldName.DEW_POINT,
    FieldName.VPD,
)
REDUCED_FIELDS: tuple[FieldName, ...] = (FieldName.TEMPERATURE, FieldName.HUMIDITY)

FIELD_SETS: dict[str, tuple[FieldName, ...]] = {
    "full": FULL_FIELDS,
    "reduced": REDUCED_FIELDS,
}


def fields_for_schema(schema: str) -> tuple[FieldName, ...]:
    """Return the tracked field set for a schema name ("full" or "reduced")."""
    try:
        return FIELD_SETS[schema]
    except KeyError:
        msg = f"Unknown schema {schema!r}, expected one of {sorted(FIELD_SETS)}"
        raise ValueError(msg) from None


# =============================================================================
# Readings
# =============================================================================


class Reading(BaseModel):
    """One parsed sensor row: a calendar date and its measured values."""

    model_config = {"frozen": True}

    date: date
    measurements: dict[FieldName, float] = Field(default_factory=dict)

    @property
    def temperature(self) -> float:
        return self.measurements[FieldName.TEMPERATURE]

    def value(self, name: FieldName) -> float:
        return self.measurements[name]


# =============================================================================
# Results
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None
    exit_code: int = 0
