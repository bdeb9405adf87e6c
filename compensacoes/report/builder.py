"""Report builder — turns a calculator's (inputs, result) pair into a Report.

Only formatting and row selection happen here. Share rows show the rates
from the factors used for the calculation, and zero-valued shares are left
out as on screen.
"""

from __future__ import annotations

from datetime import datetime

from compensacoes.inputs import sanitize_name
from compensacoes.report.formatters import (
    format_currency,
    format_date,
    format_days,
    format_percentage,
    format_rate_label,
    format_yes_no,
)
from compensacoes.schemas.calculators import (
    DeathBeneficiaries,
    DeathResult,
    IppInput,
    IppResult,
    ItaResult,
    PeriodInput,
    ReferenceSalaryInput,
)
from compensacoes.schemas.factors import CalculationFactors
from compensacoes.schemas.report import Report, ReportKind, ReportRow, ReportSection

INPUT_SECTION = "Dados de Entrada"
RESULT_SECTION = "Resultados"


def _clean_name(worker_name: str | None) -> str | None:
    if not worker_name:
        return None
    return sanitize_name(worker_name).strip() or None


def _salary_rows(salary: ReferenceSalaryInput, worker_name: str | None) -> list[ReportRow]:
    rows = []
    if worker_name:
        rows.append(ReportRow(label="Nome do Sinistrado", value=worker_name))
    rows.extend([
        ReportRow(label="Salário Base Mensal", value=format_currency(salary.base_salary_monthly)),
        ReportRow(label="Subsídio Fixo Mensal", value=format_currency(salary.fixed_allowance_monthly)),
        ReportRow(label="Nº Salários/Ano", value=str(salary.payments_per_year)),
    ])
    return rows


def _period_value(period: PeriodInput) -> str:
    return f"{format_date(period.start)} a {format_date(period.end)}"


def _spouse_value(present: bool, at_retirement_age: bool) -> str:
    if not present:
        return "Não"
    return "Sim (Idade Reforma)" if at_retirement_age else "Sim"


def _now(generated_at: datetime | None) -> datetime:
    # Local wall-clock time, as printed on the report
    return generated_at if generated_at is not None else datetime.now().astimezone()


def build_ita_report(
    salary: ReferenceSalaryInput,
    hospitalization: PeriodInput,
    outpatient: PeriodInput,
    result: ItaResult,
    factors: CalculationFactors,
    worker_name: str | None = None,
    generated_at: datetime | None = None,
) -> Report:
    """Report for a temporary incapacity calculation."""
    worker_name = _clean_name(worker_name)
    inputs = _salary_rows(salary, worker_name)
    if hospitalization.start is not None:
        inputs.append(ReportRow(label="Período Internamento", value=_period_value(hospitalization)))
    if outpatient.start is not None:
        inputs.append(ReportRow(label="Período Ambulatório", value=_period_value(outpatient)))

    results = [
        ReportRow(label="Remuneração de Referência", value=format_currency(result.reference_annual), highlight=True),
        ReportRow(label="Remuneração Diária", value=format_currency(result.daily_remuneration)),
    ]
    if result.hospitalization_days > 0:
        results.append(ReportRow(label="Dias de Internamento", value=format_days(result.hospitalization_days)))
        results.append(ReportRow(
            label="Indemnização Internamento",
            value=format_currency(result.hospitalization_indemnity),
        ))
    if result.outpatient_days > 0:
        results.append(ReportRow(label="Dias de Ambulatório", value=format_days(result.outpatient_days)))
        results.append(ReportRow(
            label=f"Indemnização Ambulatório ({format_rate_label(factors.ita_ambulatorio)})",
            value=format_currency(result.outpatient_indemnity),
        ))
    results.append(ReportRow(label="Total de Dias", value=format_days(result.total_days), highlight=True))
    results.append(ReportRow(
        label="Total Indemnização ITA",
        value=format_currency(result.total_indemnity),
        highlight=True,
    ))

    return Report(
        kind=ReportKind.ITA,
        title="ITA - Incapacidade Temporária Absoluta",
        filename="ita-nossa-seguros.pdf",
        generated_at=_now(generated_at),
        worker_name=worker_name,
        sections=(
            ReportSection(title=INPUT_SECTION, rows=tuple(inputs)),
            ReportSection(title=RESULT_SECTION, rows=tuple(results)),
        ),
    )


def build_ipp_report(
    salary: ReferenceSalaryInput,
    ipp: IppInput,
    result: IppResult,
    worker_name: str | None = None,
    generated_at: datetime | None = None,
) -> Report:
    """Report for a partial permanent incapacity calculation."""
    worker_name = _clean_name(worker_name)
    inputs = _salary_rows(salary, worker_name)
    inputs.append(ReportRow(label="Fator Decreto", value=format_percentage(ipp.decreto_factor)))
    inputs.append(ReportRow(label="IPP Médico", value=format_percentage(ipp.medical_ipp)))

    formula = (
        f"Fórmula: {format_currency(result.reference_annual)} × "
        f"{result.decreto_factor.normalize()} × {result.medical_ipp.normalize()}"
    )
    results = (
        ReportRow(label="Remuneração de Referência", value=format_currency(result.reference_annual), highlight=True),
        ReportRow(label=formula, value="", note=True),
        ReportRow(label="Pensão Mensal por IPP", value=format_currency(result.monthly_pension), highlight=True),
    )

    return Report(
        kind=ReportKind.IPP,
        title="Pensão por IPP - Incapacidade Permanente Parcial",
        filename="pensao-ipp-nossa-seguros.pdf",
        generated_at=_now(generated_at),
        worker_name=worker_name,
        sections=(
            ReportSection(title=INPUT_SECTION, rows=tuple(inputs)),
            ReportSection(title=RESULT_SECTION, rows=results),
        ),
    )


def build_death_report(
    salary: ReferenceSalaryInput,
    beneficiaries: DeathBeneficiaries,
    result: DeathResult,
    factors: CalculationFactors,
    worker_name: str | None = None,
    generated_at: datetime | None = None,
) -> Report:
    """Report for a death pension calculation."""
    worker_name = _clean_name(worker_name)
    b = beneficiaries
    inputs = _salary_rows(salary, worker_name)
    inputs.extend([
        ReportRow(label="Cônjuge", value=_spouse_value(b.has_spouse, b.spouse_at_retirement_age)),
        ReportRow(label="Ex-Cônjuge", value=_spouse_value(b.has_former_spouse, b.former_spouse_at_retirement_age)),
        ReportRow(label="Número de Filhos", value=str(b.number_of_children)),
        ReportRow(label="Pai", value=format_yes_no(b.has_father)),
        ReportRow(label="Mãe", value=format_yes_no(b.has_mother)),
        ReportRow(label="Multiplicador Subsídio Morte", value=f"×{result.death_subsidy_multiplier}"),
        ReportRow(label="Multiplicador Funeral", value=f"×{result.funeral_subsidy_multiplier}"),
    ])

    def spouse_rate(at_retirement_age: bool) -> str:
        rate = factors.pensao_conjuge_reforma if at_retirement_age else factors.pensao_conjuge_normal
        return format_rate_label(rate)

    parent_rate = format_rate_label(factors.pensao_pais)
    results = [
        ReportRow(label="Remuneração de Referência", value=format_currency(result.reference_annual), highlight=True),
    ]
    if result.spouse_share > 0:
        results.append(ReportRow(
            label=f"Cônjuge ({spouse_rate(b.spouse_at_retirement_age)})",
            value=format_currency(result.spouse_share),
        ))
    if result.former_spouse_share > 0:
        results.append(ReportRow(
            label=f"Ex-Cônjuge ({spouse_rate(b.former_spouse_at_retirement_age)})",
            value=format_currency(result.former_spouse_share),
        ))
    if result.children_share > 0:
        results.append(ReportRow(
            label=f"Filhos ({b.number_of_children})",
            value=format_currency(result.children_share),
        ))
    if result.father_share > 0:
        results.append(ReportRow(label=f"Pai ({parent_rate})", value=format_currency(result.father_share)))
    if result.mother_share > 0:
        results.append(ReportRow(label=f"Mãe ({parent_rate})", value=format_currency(result.mother_share)))
    results.extend([
        ReportRow(label="Pensão Mensal Total", value=format_currency(result.monthly_pension_total), highlight=True),
        ReportRow(
            label=f"Subsídio por Morte (×{result.death_subsidy_multiplier})",
            value=format_currency(result.death_subsidy),
        ),
        ReportRow(
            label=f"Subsídio Funeral (×{result.funeral_subsidy_multiplier})",
            value=format_currency(result.funeral_subsidy),
        ),
        ReportRow(label="Total Indemnização", value=format_currency(result.total_indemnity), highlight=True),
    ])

    return Report(
        kind=ReportKind.DEATH,
        title="Pensão por Morte",
        filename="pensao-morte-nossa-seguros.pdf",
        generated_at=_now(generated_at),
        worker_name=worker_name,
        sections=(
            ReportSection(title=INPUT_SECTION, rows=tuple(inputs)),
            ReportSection(title=RESULT_SECTION, rows=tuple(results)),
        ),
    )
