"""PDF trade report renderer (reportlab platypus).

Same content as the Word report. The events table repeats its header row and
splits across pages; paragraphs move to a new page when they no longer fit.
The brand header is drawn on the first page only.
"""

from __future__ import annotations

import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import LongTable, Paragraph, SimpleDocTemplate, Spacer, TableStyle

from config.defaults import (
    BRAND_COLOR_HEX,
    COMPANY_LINKEDIN,
    COMPANY_NAME,
    COMPANY_PHONE,
    COMPANY_WEBSITE,
    REPORT_TITLE,
)
from tradescout.io.report_content import ReportContent
from tradescout.utils.text import clean_markdown, is_heading_line

logger = logging.getLogger(__name__)

_MARGIN = 20 * mm
_BRAND = colors.HexColor(f"#{BRAND_COLOR_HEX}")
_TABLE_COLUMNS = ("Event Name", "Date", "Location", "Type")
# Fractions of the usable width per column
_COLUMN_SHARES = (0.34, 0.18, 0.30, 0.18)


def _styles() -> dict:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ReportTitle", parent=base["Title"], fontName="Helvetica-Bold",
            fontSize=22, leading=26, textColor=_BRAND, alignment=0, spaceAfter=10 * mm,
        ),
        "section": ParagraphStyle(
            "ReportSection", parent=base["Heading2"], fontName="Helvetica-Bold",
            fontSize=16, leading=20, spaceBefore=6 * mm, spaceAfter=3 * mm,
        ),
        "body": ParagraphStyle(
            "ReportBody", parent=base["Normal"], fontName="Helvetica",
            fontSize=11, leading=15, spaceAfter=4,
        ),
        "body_bold": ParagraphStyle(
            "ReportBodyBold", parent=base["Normal"], fontName="Helvetica-Bold",
            fontSize=11, leading=15, spaceAfter=4,
        ),
        "cell": ParagraphStyle(
            "ReportCell", parent=base["Normal"], fontName="Helvetica", fontSize=9, leading=11,
        ),
        "head_cell": ParagraphStyle(
            "ReportHeadCell", parent=base["Normal"], fontName="Helvetica-Bold",
            fontSize=9, leading=11, textColor=colors.white,
        ),
    }


def _draw_brand_header(canvas, doc) -> None:
    width, height = doc.pagesize
    right = width - _MARGIN
    canvas.saveState()
    canvas.setFont("Helvetica-Bold", 14)
    canvas.setFillColor(_BRAND)
    canvas.drawRightString(right, height - 15 * mm, COMPANY_NAME)
    canvas.setFont("Helvetica", 9)
    canvas.setFillColorRGB(100 / 255, 100 / 255, 100 / 255)
    canvas.drawRightString(right, height - 20 * mm, COMPANY_LINKEDIN)
    canvas.drawRightString(right, height - 25 * mm, f"{COMPANY_WEBSITE} | {COMPANY_PHONE}")
    canvas.restoreState()


def render_pdf_report(content: ReportContent) -> bytes:
    """Render the trade report as a paginated PDF.

    Args:
        content: Resolved report content.

    Returns:
        The PDF as bytes.
    """
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=_MARGIN,
        rightMargin=_MARGIN,
        topMargin=35 * mm,
        bottomMargin=_MARGIN,
        title=REPORT_TITLE,
    )
    styles = _styles()
    story = [
        Paragraph(escape(REPORT_TITLE), styles["title"]),
        Paragraph(escape(f"Generated On: {content.generated_on}"), styles["body"]),
        Paragraph(escape(f"Product/Service: {content.product}"), styles["body"]),
        Paragraph(escape(f"Identified EPC: {content.identified_epc}"), styles["body"]),
        Spacer(1, 8 * mm),
    ]

    if content.events:
        story.append(Paragraph("Upcoming Event Calendar", styles["section"]))
        story.append(_events_table(content, doc.width, styles))
        story.append(Spacer(1, 10 * mm))

    story.append(Paragraph(escape("Strategic Analysis & Calendar Plan"), styles["section"]))
    story.extend(_markdown_paragraphs(content.analysis_text, styles))
    story.append(Spacer(1, 8 * mm))

    story.append(Paragraph("Event Details (Descriptive)", styles["section"]))
    story.extend(_markdown_paragraphs(content.narrative_text, styles))

    doc.build(story, onFirstPage=_draw_brand_header)
    data = buf.getvalue()
    logger.debug("Rendered PDF report (%d bytes, %d events)", len(data), len(content.events))
    return data


def _events_table(content: ReportContent, width: float, styles: dict) -> LongTable:
    rows = [[Paragraph(label, styles["head_cell"]) for label in _TABLE_COLUMNS]]
    for event in content.events:
        rows.append([
            Paragraph(escape(value), styles["cell"])
            for value in (event.event_name, event.date, event.location, event.type)
        ])

    table = LongTable(rows, colWidths=[width * share for share in _COLUMN_SHARES], repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), _BRAND),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]))
    return table


def _markdown_paragraphs(text: str, styles: dict) -> list:
    paragraphs = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        clean = clean_markdown(line)
        if not clean:
            continue
        style = styles["body_bold"] if is_heading_line(line) else styles["body"]
        paragraphs.append(Paragraph(escape(clean), style))
    return paragraphs
