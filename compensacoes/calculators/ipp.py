"""Partial permanent incapacity (IPP, incapacidade permanente parcial) calculator.

Pensão mensal IPP = referência anual × fator decreto × IPP médico

The decree factor is a configurable rate (statutory default 0.7). Both
rates are fractions; 0–100 point values are normalized at entry.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from compensacoes.calculators.reference import reference_annual
from compensacoes.schemas.calculators import IppInput, IppResult, ReferenceSalaryInput


def _to_kwanza(value: Decimal) -> Decimal:
    """Round to 2 decimal places."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calculate_ipp(salary: ReferenceSalaryInput, ipp: IppInput) -> IppResult:
    """Calculate the monthly IPP pension.

    Args:
        salary: Monthly salary data for the reference remuneration.
        ipp: Decree factor and medical IPP rate.

    Returns:
        IppResult with the reference remuneration, both rates and the pension.
    """
    ref = reference_annual(salary)
    pension = ref * ipp.decreto_factor * ipp.medical_ipp
    return IppResult(
        reference_annual=_to_kwanza(ref),
        decreto_factor=ipp.decreto_factor,
        medical_ipp=ipp.medical_ipp,
        monthly_pension=_to_kwanza(pension),
    )
