"""Export data models for Trade Scout.

Defines the artifact record schema produced by the ExportAgent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ArtifactRecord:
    """Metadata record for a single exported report file."""

    filename: str
    path: str
    format: str       # "docx" or "pdf"
    size_bytes: int = 0
    checksum: str = ""   # SHA-256 hex digest


@dataclass
class ExportResult:
    """Complete output from the ExportAgent."""

    artifacts: List[ArtifactRecord] = field(default_factory=list)
    exported_paths: Dict[str, str] = field(default_factory=dict)   # format -> path
    warnings: List[str] = field(default_factory=list)
    status: str = "OK"   # "OK" or "PARTIAL"

    def artifact_by_format(self, fmt: str) -> List[ArtifactRecord]:
        """Return all artifacts matching the given format string."""
        return [a for a in self.artifacts if a.format == fmt]
