"""Report export: pt-AO formatters, report builder, PDF renderer."""

from compensacoes.report.builder import build_death_report, build_ipp_report, build_ita_report
from compensacoes.report.pdf import render_pdf

__all__ = ["build_death_report", "build_ipp_report", "build_ita_report", "render_pdf"]
