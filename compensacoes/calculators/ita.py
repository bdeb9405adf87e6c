"""Temporary incapacity (ITA, incapacidade temporária absoluta) calculator.

Pure Python, Decimal arithmetic. Implements:
- Daily remuneration = reference remuneration / divisor (default 30)
- Hospitalization (internamento), tiered:
    days ≤ limit → daily × days × rate100           (default 100%)
    days > limit → daily × limit × rate100
                   + daily × (days − limit) × rate_apos_30   (default 75%)
- Outpatient (ambulatório): daily × days × rate (default 65%)

A period whose end date precedes its start blocks the whole calculation.
Intermediate values keep full precision; only the result fields are
rounded to cents.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from compensacoes.calculators.reference import reference_annual
from compensacoes.schemas.calculators import (
    ItaCalculation,
    ItaResult,
    PeriodInput,
    ReferenceSalaryInput,
)
from compensacoes.schemas.factors import CalculationFactors

logger = logging.getLogger(__name__)


def _to_kwanza(value: Decimal) -> Decimal:
    """Round to 2 decimal places."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def hospitalization_indemnity(
    daily_remuneration: Decimal,
    days: int,
    factors: CalculationFactors,
) -> Decimal:
    """Tiered hospitalization indemnity, unrounded."""
    limit = factors.ita_limite_dias_internamento
    if days <= limit:
        return daily_remuneration * days * factors.ita_internamento_100
    return (
        daily_remuneration * limit * factors.ita_internamento_100
        + daily_remuneration * (days - limit) * factors.ita_internamento_apos_30
    )


def calculate_ita(
    salary: ReferenceSalaryInput,
    hospitalization: PeriodInput,
    outpatient: PeriodInput,
    factors: CalculationFactors,
) -> ItaCalculation:
    """Calculate the ITA indemnity for a hospitalization and an outpatient period.

    Args:
        salary: Monthly salary data for the reference remuneration.
        hospitalization: Internamento period (dates optional).
        outpatient: Ambulatório period (dates optional).
        factors: Current calculation factors.

    Returns:
        ItaCalculation with per-period error flags. ``result`` is None when
        either period has its end before its start.
    """
    if hospitalization.invalid or outpatient.invalid:
        logger.debug(
            "ITA blocked: hospitalization_invalid=%s outpatient_invalid=%s",
            hospitalization.invalid,
            outpatient.invalid,
        )
        return ItaCalculation(
            hospitalization_invalid=hospitalization.invalid,
            outpatient_invalid=outpatient.invalid,
        )

    ref = reference_annual(salary)
    divisor = factors.ita_divisor_remuneracao_diaria
    # A zero divisor can only come from an admin edit; treat it as no daily pay
    daily = ref / divisor if divisor else Decimal("0")

    hospital_days = max(0, hospitalization.day_count)
    outpatient_days = max(0, outpatient.day_count)

    hospital_amount = hospitalization_indemnity(daily, hospital_days, factors)
    outpatient_amount = daily * outpatient_days * factors.ita_ambulatorio

    return ItaCalculation(
        result=ItaResult(
            reference_annual=_to_kwanza(ref),
            daily_remuneration=_to_kwanza(daily),
            hospitalization_days=hospital_days,
            hospitalization_indemnity=_to_kwanza(hospital_amount),
            outpatient_days=outpatient_days,
            outpatient_indemnity=_to_kwanza(outpatient_amount),
            total_days=hospital_days + outpatient_days,
            total_indemnity=_to_kwanza(hospital_amount + outpatient_amount),
        ),
    )
