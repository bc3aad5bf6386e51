"""Text analysis - pluggable analyzers behind the scan endpoint."""

from intellisec.analysis.base import Finding, ScanResult, TextAnalyzer
from intellisec.analysis.analyzers import LengthAnalyzer
from intellisec.analysis.registry import (
    get_analyzer,
    list_analyzers,
    register_analyzer,
    unregister_analyzer,
)

__all__ = [
    "Finding",
    "ScanResult",
    "TextAnalyzer",
    "LengthAnalyzer",
    "get_analyzer",
    "list_analyzers",
    "register_analyzer",
    "unregister_analyzer",
]
