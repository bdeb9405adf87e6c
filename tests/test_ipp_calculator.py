"""Tests for the IPP (partial permanent incapacity) calculator."""

from __future__ import annotations

from decimal import Decimal

from compensacoes.calculators.ipp import calculate_ipp
from compensacoes.inputs import build_ipp_input
from compensacoes.schemas.calculators import IppInput, ReferenceSalaryInput
from compensacoes.schemas.factors import CalculationFactors

SALARY = ReferenceSalaryInput(
    base_salary_monthly=Decimal("100000"),
    fixed_allowance_monthly=Decimal("20000"),
    payments_per_year=13,
)


class TestIppCalculator:
    def test_statutory_decree(self) -> None:
        """130 000 × 0.7 × 0.5 = 45 500."""
        result = calculate_ipp(SALARY, IppInput(decreto_factor=Decimal("0.7"), medical_ipp=Decimal("0.5")))
        assert result.reference_annual == Decimal("130000.00")
        assert result.monthly_pension == Decimal("45500.00")

    def test_points_input_matches_fraction(self) -> None:
        """50 points out of 100 is the same as a 0.5 rate."""
        from_points = calculate_ipp(SALARY, build_ipp_input(50, Decimal("0.7")))
        assert from_points.medical_ipp == Decimal("0.5")
        assert from_points.monthly_pension == Decimal("45500.00")

    def test_adjustable_decree(self) -> None:
        result = calculate_ipp(SALARY, IppInput(decreto_factor=Decimal("0.8"), medical_ipp=Decimal("0.25")))
        assert result.monthly_pension == Decimal("26000.00")

    def test_zero_incapacity(self) -> None:
        result = calculate_ipp(SALARY, IppInput(decreto_factor=Decimal("0.7"), medical_ipp=Decimal("0")))
        assert result.monthly_pension == Decimal("0.00")

    def test_rates_echoed_in_result(self) -> None:
        ipp = IppInput(decreto_factor=Decimal("0.7"), medical_ipp=Decimal("0.35"))
        result = calculate_ipp(SALARY, ipp)
        assert result.decreto_factor == Decimal("0.7")
        assert result.medical_ipp == Decimal("0.35")


class TestIppInputFromFactors:
    def test_defaults(self) -> None:
        ipp = IppInput.from_factors(CalculationFactors())
        assert ipp.decreto_factor == Decimal("0.7")
        assert ipp.medical_ipp == Decimal("0.5")

    def test_admin_override(self) -> None:
        factors = CalculationFactors(ipp_decreto_default=Decimal("0.6"))
        ipp = IppInput.from_factors(factors, medical_ipp=Decimal("0.2"))
        assert ipp.decreto_factor == Decimal("0.6")
        assert ipp.medical_ipp == Decimal("0.2")
