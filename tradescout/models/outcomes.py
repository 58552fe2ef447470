"""Result envelope and request-slot models for Trade Scout.

Each user action owns one ResultSlot. Outcomes are replaced wholesale on every
new request; nothing is merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from tradescout.models.events import CitationChunk, EventRecord

T = TypeVar("T")


class RequestStatus(str, Enum):
    """Lifecycle of a single request/response slot."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class SearchOutcome:
    """Narrative, structured events and web citations from one event search."""

    narrative_text: str
    events: List[EventRecord] = field(default_factory=list)
    citations: List[CitationChunk] = field(default_factory=list)


@dataclass
class AnalysisOutcome:
    """Strategic attendance plan generated from a prior search narrative."""

    narrative_text: str


@dataclass
class VenueOutcome:
    """Venue description and map citations for one named event."""

    event_name: str
    narrative_text: str
    citations: List[CitationChunk] = field(default_factory=list)


@dataclass
class ResultSlot(Generic[T]):
    """Independently-lifecycled holder for one request type."""

    status: RequestStatus = RequestStatus.IDLE
    result: Optional[T] = None
    error: Optional[str] = None

    def start(self) -> None:
        self.status = RequestStatus.LOADING
        self.result = None
        self.error = None

    def succeed(self, result: T) -> None:
        self.status = RequestStatus.SUCCESS
        self.result = result
        self.error = None

    def fail(self, error: str) -> None:
        self.status = RequestStatus.ERROR
        self.result = None
        self.error = error

    def clear(self) -> None:
        self.status = RequestStatus.IDLE
        self.result = None
        self.error = None
