"""Tests for the input-editing boundary clamps."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from compensacoes.inputs import (
    build_beneficiaries,
    build_ipp_input,
    build_period,
    build_salary_input,
    clamp_factor,
    clamp_non_negative,
    clamp_payments_per_year,
    clamp_points,
    clamp_rate,
    parse_amount,
    sanitize_name,
)


class TestClamps:
    @pytest.mark.parametrize(("raw", "expected"), [(5, 12), (12, 12), (13, 13), (14, 14), (20, 14), ("13", 13)])
    def test_payments_per_year(self, raw: int | str, expected: int) -> None:
        assert clamp_payments_per_year(raw) == expected

    def test_rate(self) -> None:
        assert clamp_rate(Decimal("-0.1")) == Decimal("0")
        assert clamp_rate(1.2) == Decimal("1")
        assert clamp_rate("0.35") == Decimal("0.35")

    def test_garbage_is_zero(self) -> None:
        assert clamp_rate("abc") == Decimal("0")
        assert clamp_rate("nan") == Decimal("0")
        assert clamp_rate(Decimal("NaN")) == Decimal("0")
        assert clamp_rate(Decimal("Infinity")) == Decimal("0")
        assert clamp_non_negative(Decimal("-Infinity")) == Decimal("0")
        assert clamp_points(Decimal("NaN")) == Decimal("0")
        assert clamp_factor("itaDivisorRemuneracaoDiaria", Decimal("Infinity")) == 0

    def test_points(self) -> None:
        assert clamp_points(150) == Decimal("100")
        assert clamp_points(-5) == Decimal("0")

    def test_non_negative(self) -> None:
        assert clamp_non_negative(-100) == Decimal("0")

    def test_factor(self) -> None:
        assert clamp_factor("pensaoPais", 3) == Decimal("1")
        assert clamp_factor("itaDivisorRemuneracaoDiaria", -1) == 0


class TestParsing:
    def test_amount_keeps_digits(self) -> None:
        assert parse_amount("1 250 000 Kz") == Decimal("1250000")

    def test_empty_amount(self) -> None:
        assert parse_amount("") == Decimal("0")

    def test_name_without_digits(self) -> None:
        assert sanitize_name("Jo4ão Silva 2") == "João Silva "


class TestBuilders:
    def test_salary_input(self) -> None:
        salary = build_salary_input("-50", 1000, 16)
        assert salary.base_salary_monthly == Decimal("0")
        assert salary.fixed_allowance_monthly == Decimal("1000")
        assert salary.payments_per_year == 14

    def test_period_from_strings(self) -> None:
        period = build_period("2024-01-01", "")
        assert period.start == date(2024, 1, 1)
        assert period.end is None
        assert period.day_count == 0

    def test_period_from_dates(self) -> None:
        assert build_period(date(2024, 1, 1), date(2024, 1, 10)).day_count == 10

    def test_ipp_from_points(self) -> None:
        ipp = build_ipp_input(120, "0.7")
        assert ipp.medical_ipp == Decimal("1")
        assert ipp.decreto_factor == Decimal("0.7")

    def test_beneficiaries_children_clamped(self) -> None:
        beneficiaries = build_beneficiaries(has_spouse=True, number_of_children=-2)
        assert beneficiaries.number_of_children == 0
        assert beneficiaries.has_spouse is True
