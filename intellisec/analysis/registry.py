"""Analyzer registry.

Maps analyzer names to factories so the analyzer used by the scan endpoint
can be selected by configuration.
"""

from __future__ import annotations

from typing import Callable, Dict

from intellisec.analysis.analyzers import LengthAnalyzer
from intellisec.analysis.base import TextAnalyzer
from intellisec.exceptions import ConfigurationError
from intellisec.logger import session_logger as logger

AnalyzerFactory = Callable[[], TextAnalyzer]

_factories: Dict[str, AnalyzerFactory] = {}


def register_analyzer(name: str, factory: AnalyzerFactory) -> None:
    """Register an analyzer factory under ``name``, replacing any existing one."""
    if name in _factories:
        logger.warning("Replacing registered analyzer", analyzer=name)
    _factories[name] = factory


def unregister_analyzer(name: str) -> None:
    _factories.pop(name, None)


def list_analyzers() -> Dict[str, str]:
    """List registered analyzers with their descriptions."""
    return {name: factory().description for name, factory in _factories.items()}


def get_analyzer(name: str) -> TextAnalyzer:
    """Create the analyzer registered under ``name``.

    Raises:
        ConfigurationError: If no analyzer is registered under ``name``
    """
    factory = _factories.get(name)
    if factory is None:
        raise ConfigurationError(
            f"Unknown analyzer '{name}'",
            details={"analyzer": name, "available": sorted(_factories)},
        )
    analyzer = factory()
    logger.info("Analyzer initialized", analyzer=analyzer.name)
    return analyzer


register_analyzer("length", LengthAnalyzer)
