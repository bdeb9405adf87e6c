"""PDF rendering of calculation reports with fpdf2.

A4 portrait, millimetres. Layout:
  header band (first page) → title + timestamp → sections of label/value rows
  → footer band with contact details and disclaimer (every page).
Rows never run into the footer: a new page is started instead.
"""

from __future__ import annotations

import logging

from fpdf import FPDF

from compensacoes.config import BrandingSettings
from compensacoes.report.formatters import format_datetime
from compensacoes.schemas.report import Report, ReportRow

logger = logging.getLogger(__name__)

BRAND_BLUE = (30, 58, 95)
BRAND_GREEN = (165, 201, 0)
HIGHLIGHT_FILL = (245, 250, 235)
GREY_TEXT = (100, 100, 100)
WHITE = (255, 255, 255)

PAGE_WIDTH = 210
HEADER_HEIGHT = 40
FOOTER_HEIGHT = 35
FOOTER_BAND = 30
CONTENT_START_Y = 75
NEW_PAGE_START_Y = 50
LEFT = 20
RIGHT = 190
VALUE_RIGHT = 170


def _pdf_safe(text: str) -> str:
    """Core fonts only cover latin-1; replace anything else."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class ReportPDF(FPDF):
    """FPDF with the branded footer drawn on every page."""

    def __init__(self, branding: BrandingSettings) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.branding = branding
        self.set_auto_page_break(auto=False)

    def footer(self) -> None:
        page_height = self.h
        self.set_fill_color(*BRAND_GREEN)
        self.rect(0, page_height - FOOTER_BAND, PAGE_WIDTH, FOOTER_BAND, style="F")

        self.set_text_color(*WHITE)
        self.set_font("helvetica", "B", 9)
        self.text(50, page_height - 20, "Contact Center")
        self.text(130, page_height - 20, "E-mail")
        self.set_font("helvetica", "", 9)
        self.text(50, page_height - 14, _pdf_safe(self.branding.contact_phone))
        self.text(130, page_height - 14, _pdf_safe(self.branding.contact_email))

        self.set_font("helvetica", "", 7)
        disclaimer = _pdf_safe(self.branding.disclaimer)
        self.text((PAGE_WIDTH - self.get_string_width(disclaimer)) / 2, page_height - 6, disclaimer)

    def text_right(self, x_right: float, y: float, text: str) -> None:
        text = _pdf_safe(text)
        self.text(x_right - self.get_string_width(text), y, text)

    @property
    def max_content_y(self) -> float:
        return self.h - FOOTER_HEIGHT

    def ensure_space(self, y: float, needed: float = 15) -> float:
        """Start a new page when ``needed`` mm would cross into the footer."""
        if y + needed > self.max_content_y:
            self.add_page()
            return NEW_PAGE_START_Y
        return y


def _draw_header(pdf: ReportPDF, report: Report) -> None:
    branding = pdf.branding
    pdf.set_fill_color(*BRAND_BLUE)
    pdf.rect(0, 0, PAGE_WIDTH, HEADER_HEIGHT, style="F")

    pdf.set_text_color(*WHITE)
    pdf.set_font("helvetica", "B", 20)
    pdf.text(LEFT, 22, _pdf_safe(branding.company_name))

    pdf.set_font("helvetica", "", 11)
    pdf.text_right(RIGHT, 18, branding.app_title)
    pdf.set_font("helvetica", "B", 11)
    pdf.text_right(RIGHT, 26, branding.app_subtitle)

    pdf.set_text_color(*BRAND_BLUE)
    pdf.set_font("helvetica", "B", 16)
    pdf.text(LEFT, 55, _pdf_safe(report.title))

    pdf.set_text_color(*GREY_TEXT)
    pdf.set_font("helvetica", "", 10)
    pdf.text(LEFT, 63, f"Data/Hora: {format_datetime(report.generated_at)}")


def _draw_section_title(pdf: ReportPDF, title: str, y: float) -> float:
    y = pdf.ensure_space(y, 25)
    pdf.set_fill_color(*BRAND_GREEN)
    pdf.rect(LEFT, y, 4, 8, style="F")
    pdf.set_text_color(*BRAND_BLUE)
    pdf.set_font("helvetica", "B", 12)
    pdf.text(LEFT + 8, y + 6, _pdf_safe(title))
    return y + 14


def _draw_row(pdf: ReportPDF, row: ReportRow, y: float) -> float:
    y = pdf.ensure_space(y, 12)
    if row.note:
        pdf.set_text_color(*GREY_TEXT)
        pdf.set_font("helvetica", "", 9)
        pdf.text(LEFT + 5, y, _pdf_safe(row.label))
        return y + 10

    if row.highlight:
        pdf.set_fill_color(*HIGHLIGHT_FILL)
        pdf.rect(LEFT, y - 4, RIGHT - LEFT, 10, style="F")

    pdf.set_text_color(*GREY_TEXT)
    pdf.set_font("helvetica", "", 10)
    pdf.text(LEFT + 5, y, _pdf_safe(row.label))

    pdf.set_text_color(*BRAND_BLUE)
    pdf.set_font("helvetica", "B", 10)
    pdf.text_right(VALUE_RIGHT, y, row.value)
    return y + 10


def render_pdf(report: Report, branding: BrandingSettings) -> bytes:
    """Render a Report to PDF bytes.

    Args:
        report: Sections and rows produced by the report builder.
        branding: Company name, contact details and disclaimer.

    Returns:
        The PDF document as bytes.
    """
    pdf = ReportPDF(branding)
    pdf.set_title(report.title)
    pdf.set_author(branding.company_name)
    pdf.add_page()
    _draw_header(pdf, report)

    y: float = CONTENT_START_Y
    for index, section in enumerate(report.sections):
        if index:
            y += 5
        y = _draw_section_title(pdf, section.title, y)
        for row in section.rows:
            y = _draw_row(pdf, row, y)

    data = bytes(pdf.output())
    logger.info("Rendered %s report (%d pages, %d bytes)", report.kind.value, pdf.pages_count, len(data))
    return data
