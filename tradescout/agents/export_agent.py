"""ExportAgent: render and write the trade report documents.

Output: one file per requested format in the export directory, named
``Kinetick_Trade_Report_<product>_<epoch-ms>.<ext>``:
  - .docx  title block, events table, analysis, descriptive section
  - .pdf   same content, paginated table

Individual format failures are logged and skipped: the agent continues to
export whatever it can. The run fails only when nothing was written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence

from config.defaults import EXPORT_FORMATS
from tradescout.agents.base import AgentStatus, BaseAgent
from tradescout.io.exporters import file_checksum, report_filename, save_bytes
from tradescout.io.report_content import ReportContent, compose_report_content
from tradescout.io.report_docx import render_docx_report
from tradescout.io.report_pdf import render_pdf_report
from tradescout.models.export import ArtifactRecord, ExportResult

logger = logging.getLogger(__name__)

_RENDERERS: Dict[str, Callable[[ReportContent], bytes]] = {
    "docx": render_docx_report,
    "pdf": render_pdf_report,
}


class ExportAgent(BaseAgent):
    """Export the current search (and analysis, if any) as report documents."""

    name = "ExportAgent"
    version = "1.0.0"

    def run(
        self,
        context: Any,
        formats: Sequence[str] = EXPORT_FORMATS,
        output_dir: Optional[str | Path] = None,
    ) -> ExportResult:
        """Render and write the requested report formats.

        Args:
            context: TradeScoutSession holding a SearchOutcome.
            formats: Formats to produce ("docx", "pdf").
            output_dir: Destination directory; defaults to config.export_dir.

        Returns:
            ExportResult with artifact records and per-format paths.

        Raises:
            ValueError: If the session has no search outcome or a format is unknown.
            RuntimeError: If no format could be exported.
        """
        search = context.search_slot.result
        if search is None:
            raise ValueError("Nothing to export: no search outcome in this session")

        unknown = [fmt for fmt in formats if fmt not in _RENDERERS]
        if unknown:
            raise ValueError(f"Unsupported export format(s): {', '.join(unknown)}")

        output_dir = Path(output_dir or context.config.export_dir)
        analysis = context.analysis_slot.result
        content = compose_report_content(
            product=context.product_query,
            narrative_text=search.narrative_text,
            events=search.events,
            analysis_text=analysis.narrative_text if analysis else None,
        )

        result = ExportResult()
        for fmt in formats:
            try:
                data = _RENDERERS[fmt](content)
                path = save_bytes(data, output_dir / report_filename(content.product, fmt))
                result.artifacts.append(
                    ArtifactRecord(
                        filename=path.name,
                        path=str(path),
                        format=fmt,
                        size_bytes=len(data),
                        checksum=file_checksum(path),
                    )
                )
                result.exported_paths[fmt] = str(path)
            except Exception as exc:
                logger.error("ExportAgent: %s export failed: %s", fmt, exc)
                result.warnings.append(f"{fmt} export failed: {exc}")

        if not result.artifacts:
            raise RuntimeError("; ".join(result.warnings) or "No report was exported")
        if result.warnings:
            result.status = AgentStatus.PARTIAL

        logger.info(
            "ExportAgent: %d artifact(s) written to %s (status=%s)",
            len(result.artifacts),
            output_dir,
            result.status,
        )
        return result
