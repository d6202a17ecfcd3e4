"""PDF report export built on reportlab."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.doctemplate import LayoutError

from realsave.core.engine import ProjectionResult
from realsave.utils.exceptions import ExportError
from realsave.utils.money import format_currency

logger = logging.getLogger(__name__)

REPORT_TITLE = "Real Savings Projection"
BRAND_BLUE = colors.Color(61 / 255, 87 / 255, 1.0)
STRIPE_GREY = colors.Color(245 / 255, 246 / 255, 250 / 255)

TABLE_HEADER: list[str] = ["Year", "Invested Capital", "Nominal Value", "Real Value"]


def parameter_lines(result: ProjectionResult) -> list[tuple[str, str]]:
    """Labelled inputs shown at the top of the report."""
    p = result.params
    return [
        ("Initial capital", format_currency(p.initial_capital)),
        ("Monthly contribution", format_currency(p.monthly_contribution)),
        ("Annual interest rate", f"{p.annual_interest_rate_pct:g}%"),
        ("Annual inflation", f"{p.annual_inflation_rate_pct:g}%"),
        ("Period", f"{p.horizon_years} year{'' if p.horizon_years == 1 else 's'}"),
    ]


def summary_lines(result: ProjectionResult) -> list[tuple[str, str]]:
    """Labelled final-year results."""
    s = result.summary
    return [
        ("Nominal value", format_currency(s.nominal)),
        ("Real value (inflation-adjusted)", format_currency(s.real)),
        ("Total contributed", format_currency(s.invested_total)),
        ("Interest earned", format_currency(s.interest_earned)),
    ]


def table_rows(result: ProjectionResult) -> list[list[str]]:
    """Header plus one currency-formatted row per year, ascending."""
    data = [list(TABLE_HEADER)]
    for row in result.rows:
        data.append(
            [
                str(row.year),
                format_currency(row.invested_capital),
                format_currency(row.nominal_value),
                format_currency(row.real_value),
            ]
        )
    return data


def _results_table(data: list[list[str]]) -> Table:
    tbl = Table(data, repeatRows=1)
    tbl.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), BRAND_BLUE),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE_GREY]),
                ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ]
        )
    )
    return tbl


def render_pdf_report(result: ProjectionResult) -> bytes:
    """Render the projection as a PDF document.

    Layout: title, parameter block, results block, then the year-by-year
    table in the same order as the CSV export.

    Raises:
        ExportError: If reportlab cannot lay out the document.
    """
    styles = getSampleStyleSheet()
    story = [Paragraph(REPORT_TITLE, styles["Title"]), Spacer(1, 6)]

    for label, value in parameter_lines(result):
        story.append(Paragraph(f"{label}: {value}", styles["Normal"]))
    story.append(Spacer(1, 12))

    story.append(Paragraph("Final results", styles["Heading2"]))
    for label, value in summary_lines(result):
        story.append(Paragraph(f"{label}: {value}", styles["Normal"]))
    story.append(Spacer(1, 12))

    story.append(_results_table(table_rows(result)))

    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        title=REPORT_TITLE,
        leftMargin=36,
        rightMargin=36,
        topMargin=36,
        bottomMargin=36,
    )
    try:
        doc.build(story)
    except (LayoutError, ValueError) as exc:
        raise ExportError(f"failed to render PDF report: {exc}") from exc
    return buf.getvalue()


def write_pdf_report(result: ProjectionResult, path: Path) -> Path:
    """Render the report and write it to ``path``.

    Raises:
        ExportError: If rendering or writing fails.
    """
    pdf = render_pdf_report(result)
    try:
        path.write_bytes(pdf)
    except OSError as exc:
        raise ExportError(f"cannot write PDF to {path}: {exc}") from exc
    logger.info("wrote %d-byte PDF report to %s", len(pdf), path)
    return path
