"""Angolan (pt-AO) formatting for reports.

Currency is shown in whole kwanza with space-grouped thousands:
130000 -> "130 000 Kz".
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SUFFIX = "Kz"


def format_currency(value: Decimal | float | int | None) -> str:
    """Format as kwanza without decimals: 1234567.5 -> "1 234 568 Kz"."""
    if value is None:
        return "-"
    whole = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    # Group with commas, then swap to spaces for pt-AO
    formatted = f"{whole:,.0f}".replace(",", " ")
    return f"{formatted} {CURRENCY_SUFFIX}"


def format_date(value: date | None) -> str:
    """Format as DD/MM/YYYY."""
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime | None) -> str:
    """Format as DD/MM/YYYY HH:MM."""
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y %H:%M")


def format_percentage(value: float | Decimal | None) -> str:
    """Format a fraction as a percentage: 0.75 -> "75,0%"."""
    if value is None:
        return "-"
    pct = float(value) * 100
    formatted = f"{pct:.1f}".replace(".", ",")
    return f"{formatted}%"


def format_rate_label(value: Decimal) -> str:
    """Short whole-percent label for share rows: 0.4 -> "40%"."""
    pct = (Decimal(str(value)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{pct}%"


def format_days(value: int) -> str:
    return f"{value} dias"


def format_yes_no(value: bool) -> str:
    return "Sim" if value else "Não"
