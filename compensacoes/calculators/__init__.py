"""Compensation calculators: reference salary, ITA, IPP, death pension."""

from compensacoes.calculators.death import calculate_death_pension
from compensacoes.calculators.ipp import calculate_ipp
from compensacoes.calculators.ita import calculate_ita
from compensacoes.calculators.reference import calculate_reference_annual, reference_annual

__all__ = [
    "calculate_death_pension",
    "calculate_ipp",
    "calculate_ita",
    "calculate_reference_annual",
    "reference_annual",
]
