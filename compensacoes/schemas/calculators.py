"""Pydantic schemas for calculator inputs and results.

Pure data classes — no business logic beyond derived read-only values.
Inputs are validated once at the boundary (see compensacoes.inputs for the
clamps) and then passed immutably into the calculators.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict

from compensacoes.schemas.factors import CalculationFactors

# Day-count sentinel for a period whose end date precedes its start date
INVALID_PERIOD = -1

DeathSubsidyMultiplier = Literal[6, 7]
FuneralSubsidyMultiplier = Literal[2, 4, 5]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class ReferenceSalaryInput(BaseModel):
    """Monthly salary data used to derive the annual reference remuneration."""

    model_config = ConfigDict(frozen=True)

    base_salary_monthly: Decimal = Decimal("0")
    fixed_allowance_monthly: Decimal = Decimal("0")
    payments_per_year: int = 13


class PeriodInput(BaseModel):
    """Hospitalization or outpatient period, both ends inclusive."""

    model_config = ConfigDict(frozen=True)

    start: date | None = None
    end: date | None = None

    @property
    def day_count(self) -> int:
        """Inclusive day count; 0 when a date is missing, -1 when end < start."""
        if self.start is None or self.end is None:
            return 0
        if self.end < self.start:
            return INVALID_PERIOD
        return (self.end - self.start).days + 1

    @property
    def invalid(self) -> bool:
        return self.day_count == INVALID_PERIOD


class DeathBeneficiaries(BaseModel):
    """Surviving beneficiaries and the subsidy multipliers chosen on the form.

    Multipliers left as None fall back to the configured defaults.
    """

    model_config = ConfigDict(frozen=True)

    has_spouse: bool = False
    spouse_at_retirement_age: bool = False
    has_former_spouse: bool = False
    former_spouse_at_retirement_age: bool = False
    number_of_children: int = 0
    has_father: bool = False
    has_mother: bool = False
    death_subsidy_multiplier: DeathSubsidyMultiplier | None = None
    funeral_subsidy_multiplier: FuneralSubsidyMultiplier | None = None


class IppInput(BaseModel):
    """Decree factor and medically assessed incapacity, both fractions."""

    model_config = ConfigDict(frozen=True)

    decreto_factor: Decimal = Decimal("0.7")
    medical_ipp: Decimal = Decimal("0.5")

    @classmethod
    def from_factors(
        cls,
        factors: CalculationFactors,
        medical_ipp: Decimal | None = None,
    ) -> IppInput:
        """Build an input using the configured decree factor (and medical default)."""
        return cls(
            decreto_factor=factors.ipp_decreto_default,
            medical_ipp=factors.ipp_medico_default if medical_ipp is None else medical_ipp,
        )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class ItaResult(BaseModel):
    """Temporary incapacity (ITA) indemnity breakdown."""

    model_config = ConfigDict(frozen=True)

    reference_annual: Decimal
    daily_remuneration: Decimal
    hospitalization_days: int
    hospitalization_indemnity: Decimal
    outpatient_days: int
    outpatient_indemnity: Decimal
    total_days: int
    total_indemnity: Decimal


class ItaCalculation(BaseModel):
    """ITA outcome: per-period validation flags plus the result when allowed.

    ``result`` is None whenever either period is invalid.
    """

    model_config = ConfigDict(frozen=True)

    hospitalization_invalid: bool = False
    outpatient_invalid: bool = False
    result: ItaResult | None = None

    @property
    def can_calculate(self) -> bool:
        return not (self.hospitalization_invalid or self.outpatient_invalid)


class IppResult(BaseModel):
    """Partial permanent incapacity (IPP) pension."""

    model_config = ConfigDict(frozen=True)

    reference_annual: Decimal
    decreto_factor: Decimal
    medical_ipp: Decimal
    monthly_pension: Decimal


class DeathResult(BaseModel):
    """Death pension shares, subsidies and total indemnity."""

    model_config = ConfigDict(frozen=True)

    reference_annual: Decimal
    spouse_share: Decimal
    former_spouse_share: Decimal
    children_share: Decimal
    father_share: Decimal
    mother_share: Decimal
    monthly_pension_total: Decimal
    death_subsidy_multiplier: int
    death_subsidy: Decimal
    funeral_subsidy_multiplier: int
    funeral_subsidy: Decimal
    total_indemnity: Decimal
