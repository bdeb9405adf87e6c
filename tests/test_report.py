"""Tests for report formatting, building and PDF rendering."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from compensacoes.calculators.death import calculate_death_pension
from compensacoes.calculators.ipp import calculate_ipp
from compensacoes.calculators.ita import calculate_ita
from compensacoes.config import BrandingSettings
from compensacoes.report.builder import build_death_report, build_ipp_report, build_ita_report
from compensacoes.report.formatters import (
    format_currency,
    format_date,
    format_datetime,
    format_percentage,
    format_rate_label,
)
from compensacoes.report.pdf import NEW_PAGE_START_Y, ReportPDF, render_pdf
from compensacoes.schemas.calculators import DeathBeneficiaries, IppInput, PeriodInput, ReferenceSalaryInput
from compensacoes.schemas.factors import CalculationFactors
from compensacoes.schemas.report import Report, ReportKind, ReportRow, ReportSection

SALARY = ReferenceSalaryInput(
    base_salary_monthly=Decimal("100000"),
    fixed_allowance_monthly=Decimal("20000"),
    payments_per_year=13,
)
FACTORS = CalculationFactors()
WHEN = datetime(2026, 3, 2, 9, 5, tzinfo=UTC)


def _labels(report: Report, section: int) -> list[str]:
    return [row.label for row in report.sections[section].rows]


def _value(report: Report, label: str) -> str:
    for section in report.sections:
        for row in section.rows:
            if row.label == label:
                return row.value
    raise AssertionError(f"row {label!r} not found")


# ── Formatters ───────────────────────────────────────────────────────


class TestFormatCurrency:
    def test_grouping(self) -> None:
        assert format_currency(130000) == "130 000 Kz"

    def test_rounds_to_whole_kwanza(self) -> None:
        assert format_currency(Decimal("4333.33")) == "4 333 Kz"
        assert format_currency(Decimal("0.5")) == "1 Kz"

    def test_millions(self) -> None:
        assert format_currency(Decimal("1234567.89")) == "1 234 568 Kz"

    def test_zero(self) -> None:
        assert format_currency(0) == "0 Kz"

    def test_none(self) -> None:
        assert format_currency(None) == "-"


class TestOtherFormatters:
    def test_date(self) -> None:
        assert format_date(date(2024, 2, 1)) == "01/02/2024"
        assert format_date(None) == "-"

    def test_datetime(self) -> None:
        assert format_datetime(WHEN) == "02/03/2026 09:05"

    def test_percentage(self) -> None:
        assert format_percentage(Decimal("0.75")) == "75,0%"
        assert format_percentage(None) == "-"

    @pytest.mark.parametrize(("rate", "label"), [
        (Decimal("0.4"), "40%"),
        (Decimal("1.0"), "100%"),
        (Decimal("0.65"), "65%"),
    ])
    def test_rate_label(self, rate: Decimal, label: str) -> None:
        assert format_rate_label(rate) == label


# ── Builder ──────────────────────────────────────────────────────────


class TestItaReport:
    def _report(self, outpatient: PeriodInput) -> Report:
        hosp = PeriodInput(start=date(2024, 1, 1), end=date(2024, 1, 30))
        result = calculate_ita(SALARY, hosp, outpatient, FACTORS).result
        assert result is not None
        return build_ita_report(SALARY, hosp, outpatient, result, FACTORS, generated_at=WHEN)

    def test_rows(self) -> None:
        report = self._report(PeriodInput(start=date(2024, 2, 1), end=date(2024, 2, 10)))
        assert report.kind == ReportKind.ITA
        assert report.filename == "ita-nossa-seguros.pdf"
        assert _value(report, "Período Internamento") == "01/01/2024 a 30/01/2024"
        assert _value(report, "Remuneração Diária") == "4 333 Kz"
        assert _value(report, "Indemnização Ambulatório (65%)") == "28 167 Kz"
        assert _value(report, "Total de Dias") == "40 dias"
        assert _value(report, "Total Indemnização ITA") == "158 167 Kz"

    def test_empty_outpatient_omitted(self) -> None:
        report = self._report(PeriodInput())
        assert "Período Ambulatório" not in _labels(report, 0)
        assert "Dias de Ambulatório" not in _labels(report, 1)


class TestIppReport:
    def test_rows(self) -> None:
        ipp = IppInput(decreto_factor=Decimal("0.7"), medical_ipp=Decimal("0.5"))
        report = build_ipp_report(SALARY, ipp, calculate_ipp(SALARY, ipp), worker_name="Ana", generated_at=WHEN)
        assert _value(report, "Nome do Sinistrado") == "Ana"
        assert _value(report, "Fator Decreto") == "70,0%"
        assert _value(report, "Pensão Mensal por IPP") == "45 500 Kz"
        notes = [row for row in report.sections[1].rows if row.note]
        assert notes[0].label == "Fórmula: 130 000 Kz × 0.7 × 0.5"


    def test_worker_name_digits_removed(self) -> None:
        ipp = IppInput()
        report = build_ipp_report(SALARY, ipp, calculate_ipp(SALARY, ipp), worker_name=" Ana 2 ", generated_at=WHEN)
        assert report.worker_name == "Ana"
        assert _value(report, "Nome do Sinistrado") == "Ana"

    def test_digits_only_name_dropped(self) -> None:
        ipp = IppInput()
        report = build_ipp_report(SALARY, ipp, calculate_ipp(SALARY, ipp), worker_name="123")
        assert report.worker_name is None
        assert "Nome do Sinistrado" not in _labels(report, 0)

    def test_default_timestamp_is_local_time(self) -> None:
        ipp = IppInput()
        before = datetime.now().astimezone()
        report = build_ipp_report(SALARY, ipp, calculate_ipp(SALARY, ipp))
        assert report.generated_at.utcoffset() == before.utcoffset()
        assert report.generated_at >= before


class TestDeathReport:
    def test_zero_shares_omitted(self) -> None:
        beneficiaries = DeathBeneficiaries(has_spouse=True, spouse_at_retirement_age=True, has_mother=True)
        result = calculate_death_pension(SALARY, beneficiaries, FACTORS)
        report = build_death_report(SALARY, beneficiaries, result, FACTORS, generated_at=WHEN)
        labels = _labels(report, 1)
        assert "Cônjuge (40%)" in labels
        assert "Mãe (10%)" in labels
        assert not any(label.startswith("Pai") for label in labels)
        assert not any(label.startswith("Filhos") for label in labels)
        assert _value(report, "Cônjuge") == "Sim (Idade Reforma)"
        assert _value(report, "Subsídio por Morte (×6)") == "780 000 Kz"
        assert report.worker_name is None


# ── PDF ──────────────────────────────────────────────────────────────


class TestRenderPdf:
    def test_renders_pdf_bytes(self) -> None:
        beneficiaries = DeathBeneficiaries(has_spouse=True, number_of_children=2)
        result = calculate_death_pension(SALARY, beneficiaries, FACTORS)
        report = build_death_report(SALARY, beneficiaries, result, FACTORS, worker_name="João", generated_at=WHEN)
        data = render_pdf(report, BrandingSettings())
        assert data.startswith(b"%PDF")

    def test_long_report_paginates(self) -> None:
        rows = tuple(ReportRow(label=f"Linha {i}", value=str(i)) for i in range(60))
        report = Report(
            kind=ReportKind.ITA,
            title="Teste",
            filename="teste.pdf",
            generated_at=WHEN,
            sections=(ReportSection(title="Muitas linhas", rows=rows),),
        )
        assert render_pdf(report, BrandingSettings()).startswith(b"%PDF")

    def test_page_break_above_footer(self) -> None:
        pdf = ReportPDF(BrandingSettings())
        pdf.add_page()
        assert pdf.ensure_space(100) == 100
        assert pdf.ensure_space(pdf.max_content_y - 5, 12) == NEW_PAGE_START_Y
        assert pdf.page == 2

    def test_non_latin_text_does_not_fail(self) -> None:
        rows = (ReportRow(label="Taxa ≤ 30 dias", value="→ 100%"),)
        report = Report(
            kind=ReportKind.IPP,
            title="Teste",
            filename="teste.pdf",
            generated_at=WHEN,
            sections=(ReportSection(title="Secção", rows=rows),),
        )
        assert render_pdf(report, BrandingSettings()).startswith(b"%PDF")
