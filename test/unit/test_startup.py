"""Tests for startup validation and command line resolution."""

import pytest

from intellisec.config import InfoPayload, ServiceSettings
from intellisec.exceptions import ConfigurationError
from intellisec.logger import session_logger
from intellisec.main_web import main, resolve_settings
from intellisec.startup.validation import validate_settings


class TestValidateSettings:

    def test_defaults_are_valid(self):
        validate_settings(ServiceSettings(), session_logger)

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_port_range(self, port):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings(ServiceSettings(port=port), session_logger)

        assert "port" in exc_info.value.details["problems"][0]

    def test_collects_all_problems(self):
        settings = ServiceSettings(
            port=0,
            max_body_bytes=0,
            service_name=" ",
            info=InfoPayload(name="", version="", description=""),
            cors_allow_origins=(),
        )

        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings(settings, session_logger)

        assert len(exc_info.value.details["problems"]) == 7


class TestResolveSettings:

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("INTELLISEC_PORT", "5000")
        monkeypatch.setenv("INTELLISEC_HOST", "10.0.0.1")

        settings = resolve_settings(["--port", "6000", "--max-body-bytes", "100"])

        assert settings.port == 6000
        assert settings.host == "10.0.0.1"
        assert settings.max_body_bytes == 100

    def test_env_only(self, monkeypatch):
        monkeypatch.delenv("INTELLISEC_PORT", raising=False)
        monkeypatch.setenv("PORT", "7000")

        assert resolve_settings([]).port == 7000


class TestMain:

    def test_unknown_analyzer_exits_nonzero(self, monkeypatch):
        monkeypatch.delenv("INTELLISEC_PORT", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        assert main(["--analyzer", "does-not-exist"]) == 1

    def test_invalid_port_exits_nonzero(self):
        assert main(["--port", "70000"]) == 1

    def test_runs_uvicorn_with_settings(self, monkeypatch):
        calls = {}

        def fake_run(app, host, port, log_level):
            calls.update(app=app, host=host, port=port)

        monkeypatch.setattr("intellisec.main_web.uvicorn.run", fake_run)
        monkeypatch.delenv("INTELLISEC_HOST", raising=False)

        assert main(["--port", "4100"]) == 0
        assert calls["port"] == 4100
        assert calls["host"] == "0.0.0.0"
