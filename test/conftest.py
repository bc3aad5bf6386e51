"""Pytest configuration and fixtures

Provides shared fixtures for all tests: frozen settings, a web server built
from them, and an in-process HTTP client.
"""

import sys
from pathlib import Path

import pytest
from starlette.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from intellisec.analysis import ScanResult, TextAnalyzer  # noqa: E402 - after sys.path setup
from intellisec.config import InfoPayload, ServiceSettings  # noqa: E402 - after sys.path setup
from intellisec.web_server.web_server import IntelliSecWebServer  # noqa: E402 - after sys.path setup


# ============================================================================
# SETTINGS
# ============================================================================

TEST_SERVICE_NAME = "intellisec-backend-test"
TEST_MAX_BODY_BYTES = 4096


@pytest.fixture(scope="function")
def settings():
    """
    Settings used by web tests.

    A small body limit keeps the oversized-payload tests cheap.
    """
    return ServiceSettings(
        port=4000,
        service_name=TEST_SERVICE_NAME,
        info=InfoPayload(),
        max_body_bytes=TEST_MAX_BODY_BYTES,
    )


# ============================================================================
# WEB SERVER
# ============================================================================


@pytest.fixture(scope="function")
def server(settings):
    """IntelliSecWebServer with the default (length) analyzer."""
    return IntelliSecWebServer(settings=settings)


@pytest.fixture(scope="function")
def client(server):
    """
    In-process HTTP client bound to the server fixture.

    Usage:
        def test_something(client):
            response = client.get("/health")
    """
    with TestClient(server.get_app()) as test_client:
        yield test_client


class RecordingAnalyzer(TextAnalyzer):
    """Analyzer double that records every text it was asked to analyze."""

    def __init__(self):
        self.calls = []

    @property
    def name(self) -> str:
        return "recording"

    @property
    def description(self) -> str:
        return "Test analyzer recording its inputs"

    def analyze(self, text: str) -> ScanResult:
        self.calls.append(text)
        return ScanResult(summary=f"recorded {text!r}", findings=[])


@pytest.fixture(scope="function")
def recording_analyzer():
    return RecordingAnalyzer()
