"""Trade Scout utility functions."""

from tradescout.utils.date_utils import epoch_millis, format_long_date
from tradescout.utils.text import (
    clean_markdown,
    extract_likely_event_names,
    extract_relevant_epc,
    is_heading_line,
    sanitize_filename_component,
    strip_control_chars,
)

__all__ = [
    "clean_markdown",
    "extract_likely_event_names",
    "extract_relevant_epc",
    "is_heading_line",
    "sanitize_filename_component",
    "strip_control_chars",
    "epoch_millis",
    "format_long_date",
]
