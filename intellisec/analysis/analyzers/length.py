"""Placeholder analyzer that reports only the length of the input."""

from intellisec.analysis.base import ScanResult, TextAnalyzer
from intellisec.logger.decorators import log_execution_time

SUMMARY_PREFIX = "Scanned text length="


class LengthAnalyzer(TextAnalyzer):
    """Reports the text length in Unicode code points and no findings."""

    @property
    def name(self) -> str:
        return "length"

    @property
    def description(self) -> str:
        return "Placeholder scan reporting the input length in code points"

    @log_execution_time
    def analyze(self, text: str) -> ScanResult:
        return ScanResult(summary=f"{SUMMARY_PREFIX}{len(text)}", findings=[])
