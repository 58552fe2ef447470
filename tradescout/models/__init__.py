"""Trade Scout data models package.

All agent input/output schemas are defined here as typed dataclasses.
"""

from tradescout.models.epc import EPCCategory, match_epc_category
from tradescout.models.events import (
    CitationChunk,
    EventRecord,
    MapCitation,
    ReviewSnippet,
    WebCitation,
)
from tradescout.models.export import ArtifactRecord, ExportResult
from tradescout.models.outcomes import (
    AnalysisOutcome,
    RequestStatus,
    ResultSlot,
    SearchOutcome,
    VenueOutcome,
)

__all__ = [
    # events
    "EventRecord",
    "CitationChunk",
    "WebCitation",
    "MapCitation",
    "ReviewSnippet",
    # outcomes
    "SearchOutcome",
    "AnalysisOutcome",
    "VenueOutcome",
    "RequestStatus",
    "ResultSlot",
    # epc
    "EPCCategory",
    "match_epc_category",
    # export
    "ArtifactRecord",
    "ExportResult",
]
