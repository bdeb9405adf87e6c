"""Simulator facade — wires settings, factor store, admin overlay and export.

Usage:
    from compensacoes.simulator import create_simulator

    sim = create_simulator()
    outcome = sim.calculate_ita(salary, hospitalization, outpatient)
    filename, pdf_bytes = sim.export_ita_pdf(salary, hospitalization, outpatient)

Every calculation reads the live factors once and passes them explicitly
to the pure calculator functions.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from compensacoes.admin.auth import AdminSession
from compensacoes.admin.panel import AdminPanel
from compensacoes.admin.store import FactorStore
from compensacoes.calculators.death import calculate_death_pension
from compensacoes.calculators.ipp import calculate_ipp
from compensacoes.calculators.ita import calculate_ita
from compensacoes.config import Settings, settings as default_settings
from compensacoes.log_setup import configure_logging
from compensacoes.report.builder import build_death_report, build_ipp_report, build_ita_report
from compensacoes.report.pdf import render_pdf
from compensacoes.schemas.calculators import (
    DeathBeneficiaries,
    DeathResult,
    IppInput,
    IppResult,
    ItaCalculation,
    PeriodInput,
    ReferenceSalaryInput,
)
from compensacoes.schemas.factors import CalculationFactors
from compensacoes.schemas.report import Report
from compensacoes.storage.repository import FactorRepository, build_repository

logger = logging.getLogger(__name__)


class Simulator:
    """One user session: live factors, admin overlay, three calculators."""

    def __init__(self, settings: Settings, repository: FactorRepository) -> None:
        self.settings = settings
        self.store = FactorStore(repository)
        self.admin = AdminPanel(AdminSession(settings.security.admin_password), self.store)

    @property
    def factors(self) -> CalculationFactors:
        return self.store.get()

    # ── Calculators ──────────────────────────────────────────────────

    def calculate_ita(
        self,
        salary: ReferenceSalaryInput,
        hospitalization: PeriodInput,
        outpatient: PeriodInput,
    ) -> ItaCalculation:
        return calculate_ita(salary, hospitalization, outpatient, self.factors)

    def default_ipp_input(self, medical_ipp: Decimal | None = None) -> IppInput:
        """IPP input seeded with the configured decree factor."""
        return IppInput.from_factors(self.factors, medical_ipp)

    def calculate_ipp(self, salary: ReferenceSalaryInput, ipp: IppInput | None = None) -> IppResult:
        return calculate_ipp(salary, ipp if ipp is not None else self.default_ipp_input())

    def calculate_death(self, salary: ReferenceSalaryInput, beneficiaries: DeathBeneficiaries) -> DeathResult:
        return calculate_death_pension(salary, beneficiaries, self.factors)

    # ── Export ───────────────────────────────────────────────────────

    def _render(self, report: Report) -> tuple[str, bytes]:
        return report.filename, render_pdf(report, self.settings.branding)

    def export_ita_pdf(
        self,
        salary: ReferenceSalaryInput,
        hospitalization: PeriodInput,
        outpatient: PeriodInput,
        worker_name: str | None = None,
    ) -> tuple[str, bytes] | None:
        """ITA report, or None while a period is invalid."""
        factors = self.factors
        outcome = calculate_ita(salary, hospitalization, outpatient, factors)
        if outcome.result is None:
            logger.info("ITA export skipped: invalid period")
            return None
        report = build_ita_report(salary, hospitalization, outpatient, outcome.result, factors, worker_name)
        return self._render(report)

    def export_ipp_pdf(
        self,
        salary: ReferenceSalaryInput,
        ipp: IppInput | None = None,
        worker_name: str | None = None,
    ) -> tuple[str, bytes]:
        ipp = ipp if ipp is not None else self.default_ipp_input()
        result = calculate_ipp(salary, ipp)
        return self._render(build_ipp_report(salary, ipp, result, worker_name))

    def export_death_pdf(
        self,
        salary: ReferenceSalaryInput,
        beneficiaries: DeathBeneficiaries,
        worker_name: str | None = None,
    ) -> tuple[str, bytes]:
        factors = self.factors
        result = calculate_death_pension(salary, beneficiaries, factors)
        return self._render(build_death_report(salary, beneficiaries, result, factors, worker_name))


def create_simulator(
    settings: Settings | None = None,
    repository: FactorRepository | None = None,
    *,
    setup_logging: bool = True,
) -> Simulator:
    """Build a Simulator from settings (module singleton by default)."""
    settings = settings or default_settings
    if setup_logging:
        configure_logging(settings.log_level)
    if repository is None:
        repository = build_repository(settings.storage)
    logger.info("Starting simulator (env=%s)", settings.environment)
    return Simulator(settings, repository)
