"""Report structures handed to the PDF renderer.

Values are already formatted strings: the renderer only lays them out.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ReportKind(str, Enum):
    """Which calculator produced the report."""

    ITA = "ita"
    IPP = "ipp"
    DEATH = "pensao_morte"


class ReportRow(BaseModel):
    """One label/value line; highlighted rows are totals."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    highlight: bool = False
    note: bool = False  # small grey line, value ignored


class ReportSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    rows: tuple[ReportRow, ...]


class Report(BaseModel):
    """A calculator's inputs and results ready for export."""

    model_config = ConfigDict(frozen=True)

    kind: ReportKind
    title: str
    filename: str
    generated_at: datetime
    worker_name: str | None = None
    sections: tuple[ReportSection, ...]
