"""Annual reference remuneration.

Ref = ((salário base + subsídio fixo) × nº salários/ano) ÷ 12

Pure and total: negative amounts are not rejected here, clamping happens
where the values are entered.
"""

from __future__ import annotations

from decimal import Decimal

from compensacoes.schemas.calculators import ReferenceSalaryInput


def _as_decimal(value: Decimal | int | float) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def calculate_reference_annual(
    base_salary: Decimal | int | float,
    fixed_allowance: Decimal | int | float,
    payments_per_year: int,
) -> Decimal:
    """Annual reference remuneration, unrounded.

    Args:
        base_salary: Monthly base salary.
        fixed_allowance: Monthly fixed allowance (subsídio fixo).
        payments_per_year: Number of salary payments per year (12–14).

    Returns:
        ((base_salary + fixed_allowance) * payments_per_year) / 12
    """
    return ((_as_decimal(base_salary) + _as_decimal(fixed_allowance)) * payments_per_year) / 12


def reference_annual(salary: ReferenceSalaryInput) -> Decimal:
    """Reference remuneration for a salary input record."""
    return calculate_reference_annual(
        salary.base_salary_monthly,
        salary.fixed_allowance_monthly,
        salary.payments_per_year,
    )
