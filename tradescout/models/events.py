"""Trade event and citation data models for Trade Scout.

Defines the typed records extracted from a model's search reply and the
grounding citations returned alongside generated text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class EventRecord:
    """A single upcoming trade event parsed from the structured payload."""

    event_name: str
    date: str              # free text, e.g. "March 3-5, 2027"
    location: str
    type: str              # free-text category, e.g. "Exhibition"
    description: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the model payload."""
        data: Dict[str, Any] = {
            "eventName": self.event_name,
            "date": self.date,
            "location": self.location,
            "type": self.type,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.url is not None:
            data["url"] = self.url
        return data


@dataclass
class ReviewSnippet:
    """A review excerpt attached to a map citation."""

    review_text: str = ""
    source_uri: str = ""


@dataclass
class WebCitation:
    """A web page used to ground a search reply."""

    uri: str
    title: str = ""
    kind: str = field(default="web", init=False)


@dataclass
class MapCitation:
    """A map place used to ground a venue reply."""

    uri: str
    title: str = ""
    review_snippets: List[ReviewSnippet] = field(default_factory=list)
    kind: str = field(default="map", init=False)


CitationChunk = Union[WebCitation, MapCitation]
