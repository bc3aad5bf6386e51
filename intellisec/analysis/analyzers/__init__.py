"""Built-in text analyzers."""

from intellisec.analysis.analyzers.length import LengthAnalyzer, SUMMARY_PREFIX

__all__ = ["LengthAnalyzer", "SUMMARY_PREFIX"]
