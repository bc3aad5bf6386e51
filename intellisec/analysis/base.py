"""Base classes for text analyzers.

The scan endpoint depends only on the TextAnalyzer interface defined here, so
a real analysis engine can be plugged in without touching the web layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Finding:
    """A single issue reported by an analyzer."""

    rule: str
    message: str
    severity: str = "info"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule,
            "message": self.message,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class ScanResult:
    """Result of analyzing a piece of text."""

    summary: str
    findings: List[Finding] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "summary": self.summary,
            "findings": [f.to_dict() for f in self.findings],
        }


class TextAnalyzer(ABC):
    """Base class for all text analyzers.

    Each analyzer should:
    1. Inherit from this class
    2. Provide a unique ``name`` and a ``description``
    3. Implement ``analyze`` returning a ScanResult

    ``analyze`` must be deterministic for a given input and free of shared
    mutable state; it is called concurrently from request handlers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this analyzer (e.g., 'length')."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of this analyzer."""
        pass

    @abstractmethod
    def analyze(self, text: str) -> ScanResult:
        """Analyze text.

        Args:
            text: Text to analyze; an absent request field arrives as ""

        Returns:
            ScanResult with summary and findings

        Raises:
            AnalysisError: If the text cannot be analyzed
        """
        pass
