"""Death pension (pensão por morte) calculator.

Pure Python, Decimal arithmetic. Each beneficiary category is computed
independently and summed, with no overall cap:
- Cônjuge: 40% at retirement age, otherwise 30%
- Ex-cônjuge: same rule, independent of the current spouse
- Filhos: single tier by count: 1 → 20%, 2 → 40%, 3+ → 60%
- Pai / Mãe: 10% each
- Subsídio por morte: reference × multiplier (6 or 7)
- Subsídio de funeral: reference × multiplier (2, 4 or 5)
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from compensacoes.calculators.reference import reference_annual
from compensacoes.schemas.calculators import DeathBeneficiaries, DeathResult, ReferenceSalaryInput
from compensacoes.schemas.factors import CalculationFactors


def _to_kwanza(value: Decimal) -> Decimal:
    """Round to 2 decimal places."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _spouse_rate(present: bool, at_retirement_age: bool, factors: CalculationFactors) -> Decimal:
    if not present:
        return Decimal("0")
    if at_retirement_age:
        return factors.pensao_conjuge_reforma
    return factors.pensao_conjuge_normal


def children_rate(number_of_children: int, factors: CalculationFactors) -> Decimal:
    """Rate for the whole group of children (not cumulative per child)."""
    if number_of_children <= 0:
        return Decimal("0")
    if number_of_children == 1:
        return factors.pensao_filho_1
    if number_of_children == 2:
        return factors.pensao_filhos_2
    return factors.pensao_filhos_3_mais


def calculate_death_pension(
    salary: ReferenceSalaryInput,
    beneficiaries: DeathBeneficiaries,
    factors: CalculationFactors,
) -> DeathResult:
    """Calculate death pension shares, subsidies and total indemnity.

    Args:
        salary: Monthly salary data of the deceased worker.
        beneficiaries: Surviving beneficiaries and chosen subsidy multipliers.
        factors: Current calculation factors (rates and default multipliers).

    Returns:
        DeathResult with every share, the pension total, both subsidies and
        the total indemnity.
    """
    ref = reference_annual(salary)

    spouse = _spouse_rate(beneficiaries.has_spouse, beneficiaries.spouse_at_retirement_age, factors) * ref
    former_spouse = _spouse_rate(
        beneficiaries.has_former_spouse,
        beneficiaries.former_spouse_at_retirement_age,
        factors,
    ) * ref
    children = children_rate(beneficiaries.number_of_children, factors) * ref
    father = factors.pensao_pais * ref if beneficiaries.has_father else Decimal("0")
    mother = factors.pensao_pais * ref if beneficiaries.has_mother else Decimal("0")

    pension_total = spouse + former_spouse + children + father + mother

    death_multiplier = beneficiaries.death_subsidy_multiplier
    if death_multiplier is None:
        death_multiplier = factors.subsidio_morte_multiplicador
    funeral_multiplier = beneficiaries.funeral_subsidy_multiplier
    if funeral_multiplier is None:
        funeral_multiplier = factors.subsidio_funeral_multiplicador

    death_subsidy = ref * death_multiplier
    funeral_subsidy = ref * funeral_multiplier

    return DeathResult(
        reference_annual=_to_kwanza(ref),
        spouse_share=_to_kwanza(spouse),
        former_spouse_share=_to_kwanza(former_spouse),
        children_share=_to_kwanza(children),
        father_share=_to_kwanza(father),
        mother_share=_to_kwanza(mother),
        monthly_pension_total=_to_kwanza(pension_total),
        death_subsidy_multiplier=death_multiplier,
        death_subsidy=_to_kwanza(death_subsidy),
        funeral_subsidy_multiplier=funeral_multiplier,
        funeral_subsidy=_to_kwanza(funeral_subsidy),
        total_indemnity=_to_kwanza(pension_total + death_subsidy + funeral_subsidy),
    )
