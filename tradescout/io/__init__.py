"""Trade Scout report rendering and export I/O."""

from tradescout.io.exporters import file_checksum, report_filename, save_bytes
from tradescout.io.report_content import ReportContent, compose_report_content
from tradescout.io.report_docx import render_docx_report
from tradescout.io.report_pdf import render_pdf_report

__all__ = [
    "ReportContent",
    "compose_report_content",
    "render_docx_report",
    "render_pdf_report",
    "report_filename",
    "save_bytes",
    "file_checksum",
]
