"""Input-editing boundary: clamps and light parsing for form values.

Out-of-range values are clamped silently, never reported as errors.
Everything downstream (schemas, calculators) trusts what comes out of here.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from compensacoes.schemas.calculators import (
    DeathBeneficiaries,
    IppInput,
    PeriodInput,
    ReferenceSalaryInput,
)
from compensacoes.schemas.factors import INTEGER_FACTORS, resolve_factor_key

MIN_PAYMENTS_PER_YEAR = 12
MAX_PAYMENTS_PER_YEAR = 14
MAX_IPP_POINTS = 100

_NON_DIGITS = re.compile(r"[^\d]")
_DIGITS = re.compile(r"[0-9]")


def _decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value))
        except InvalidOperation:
            return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


def clamp_rate(value: Decimal | int | float | str) -> Decimal:
    """Clamp a rate to [0, 1]."""
    return min(Decimal("1"), max(Decimal("0"), _decimal(value)))


def clamp_non_negative(value: Decimal | int | float | str) -> Decimal:
    """Clamp an amount to ≥ 0."""
    return max(Decimal("0"), _decimal(value))


def clamp_payments_per_year(value: int | float | str) -> int:
    """Clamp the number of annual salary payments to [12, 14]."""
    return min(MAX_PAYMENTS_PER_YEAR, max(MIN_PAYMENTS_PER_YEAR, int(_decimal(value))))


def clamp_points(value: Decimal | int | float | str) -> Decimal:
    """Clamp an IPP value expressed in points out of 100 to [0, 100]."""
    return min(Decimal(MAX_IPP_POINTS), max(Decimal("0"), _decimal(value)))


def clamp_factor(key: str, value: Decimal | int | float | str) -> Decimal | int:
    """Clamp an admin-edited factor to its semantic domain.

    Rates go to [0, 1]; day limits, divisors and multipliers to whole
    numbers ≥ 0.

    Raises:
        UnknownFactorError: If the key is not a calculation factor.
    """
    name = resolve_factor_key(key)
    if name in INTEGER_FACTORS:
        return max(0, int(_decimal(value)))
    return clamp_rate(value)


def parse_amount(text: str) -> Decimal:
    """Parse a typed amount, keeping digits only ("1 250 000 Kz" → 1250000)."""
    digits = _NON_DIGITS.sub("", text or "")
    return Decimal(digits) if digits else Decimal("0")


def sanitize_name(text: str) -> str:
    """Injured worker's name with any digits removed."""
    return _DIGITS.sub("", text or "")


def parse_date(text: str | None) -> date | None:
    """Parse an ISO date (YYYY-MM-DD); empty input means no date."""
    if not text:
        return None
    return date.fromisoformat(text)


def build_salary_input(
    base_salary: Decimal | int | float | str,
    fixed_allowance: Decimal | int | float | str = 0,
    payments_per_year: int | float | str = 13,
) -> ReferenceSalaryInput:
    """Clamp salary form values into a ReferenceSalaryInput."""
    return ReferenceSalaryInput(
        base_salary_monthly=clamp_non_negative(base_salary),
        fixed_allowance_monthly=clamp_non_negative(fixed_allowance),
        payments_per_year=clamp_payments_per_year(payments_per_year),
    )


def build_period(start: str | date | None, end: str | date | None) -> PeriodInput:
    """Build a period from ISO strings or dates (either may be empty)."""
    return PeriodInput(
        start=start if isinstance(start, date) or start is None else parse_date(start),
        end=end if isinstance(end, date) or end is None else parse_date(end),
    )


def build_ipp_input(
    medical_points: Decimal | int | float | str,
    decreto_factor: Decimal | int | float | str,
) -> IppInput:
    """Build an IppInput from a 0–100 medical IPP value and a decree rate."""
    return IppInput(
        decreto_factor=clamp_rate(decreto_factor),
        medical_ipp=clamp_points(medical_points) / MAX_IPP_POINTS,
    )


def build_beneficiaries(**values: object) -> DeathBeneficiaries:
    """Build DeathBeneficiaries, clamping the number of children to ≥ 0."""
    children = values.get("number_of_children", 0)
    values["number_of_children"] = max(0, int(children))  # type: ignore[call-overload]
    return DeathBeneficiaries(**values)  # type: ignore[arg-type]
