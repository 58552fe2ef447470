"""Word (.docx) trade report renderer.

Rendering only: all content is resolved in ReportContent beforehand.
Markdown markers are stripped, not rendered; "##" lines become headings.
"""

from __future__ import annotations

import io
import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

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

_TABLE_COLUMNS = ("Event Name", "Date", "Location", "Type")
_HEADER_FILL = "E0E0E0"
_MUTED = RGBColor(0x55, 0x55, 0x55)


def render_docx_report(content: ReportContent) -> bytes:
    """Render the trade report as a .docx document.

    Args:
        content: Resolved report content.

    Returns:
        The document as bytes.
    """
    doc = Document()

    _add_brand_header(doc)

    title = doc.add_heading(REPORT_TITLE, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    _add_labelled_line(doc, "Generated On: ", content.generated_on)
    _add_labelled_line(doc, "Product/Service: ", content.product)
    _add_labelled_line(doc, "Identified EPC: ", content.identified_epc)

    doc.add_heading("Upcoming Event Calendar", level=1)
    if content.events:
        _add_events_table(doc, content)
    else:
        doc.add_paragraph("No structured event data found.")

    doc.add_heading("Strategic Analysis & Calendar Plan", level=1)
    _add_markdown_lines(doc, content.analysis_text)

    doc.add_heading("Event Details (Descriptive)", level=1)
    _add_markdown_lines(doc, content.narrative_text)

    buf = io.BytesIO()
    doc.save(buf)
    data = buf.getvalue()
    logger.debug("Rendered DOCX report (%d bytes, %d events)", len(data), len(content.events))
    return data


def _add_brand_header(doc) -> None:
    company = doc.add_paragraph()
    company.alignment = WD_ALIGN_PARAGRAPH.RIGHT
    run = company.add_run(COMPANY_NAME)
    run.bold = True
    run.font.size = Pt(14)
    run.font.color.rgb = RGBColor.from_string(BRAND_COLOR_HEX)

    for line in (COMPANY_LINKEDIN, f"{COMPANY_WEBSITE} | {COMPANY_PHONE}"):
        para = doc.add_paragraph()
        para.alignment = WD_ALIGN_PARAGRAPH.RIGHT
        contact = para.add_run(line)
        contact.font.size = Pt(8)
        contact.font.color.rgb = _MUTED


def _add_labelled_line(doc, label: str, value: str) -> None:
    para = doc.add_paragraph()
    para.add_run(label).bold = True
    para.add_run(value)


def _add_events_table(doc, content: ReportContent) -> None:
    table = doc.add_table(rows=1, cols=len(_TABLE_COLUMNS))
    table.style = "Table Grid"

    for cell, label in zip(table.rows[0].cells, _TABLE_COLUMNS):
        cell.text = ""
        cell.paragraphs[0].add_run(label).bold = True
        _shade_cell(cell, _HEADER_FILL)

    for event in content.events:
        row = table.add_row().cells
        row[0].text = event.event_name
        row[1].text = event.date
        row[2].text = event.location
        row[3].text = event.type


def _shade_cell(cell, fill: str) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    tc_pr.append(shd)


def _add_markdown_lines(doc, text: str) -> None:
    for line in text.split("\n"):
        clean = clean_markdown(line)
        if not clean:
            doc.add_paragraph()
        elif is_heading_line(line):
            doc.add_heading(clean, level=2)
        else:
            para = doc.add_paragraph()
            para.add_run(clean).font.size = Pt(12)
