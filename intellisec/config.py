"""Application configuration

Settings are read once at startup from ``INTELLISEC_*`` environment variables
(with ``PORT`` honoured as a fallback for the listening port), optionally
overridden by command line arguments, and frozen. The resulting
``ServiceSettings`` is handed to the web server explicitly.
"""

from dataclasses import dataclass, field, replace
import os
from typing import Any, Mapping, Optional, Tuple

from intellisec.exceptions import ConfigurationError

# Project-specific prefix
_ENV_PREFIX = "INTELLISEC"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_SERVICE_NAME = "intellisec-backend"
DEFAULT_MAX_BODY_BYTES = 1024 * 1024
DEFAULT_ANALYZER = "length"


@dataclass(frozen=True)
class InfoPayload:
    """Static descriptive record returned by ``GET /api/info``."""

    name: str = "IntelliSec"
    version: str = "0.1.0"
    description: str = "AI-driven Security Platform - backend"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
        }


@dataclass(frozen=True)
class ServiceSettings:
    """Immutable process-wide configuration."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    service_name: str = DEFAULT_SERVICE_NAME
    info: InfoPayload = field(default_factory=InfoPayload)
    cors_allow_origins: Tuple[str, ...] = ("*",)
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    analyzer: str = DEFAULT_ANALYZER

    def with_overrides(self, **overrides: Any) -> "ServiceSettings":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def _env_key(name: str) -> str:
    return f"{_ENV_PREFIX}_{name}"


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(
            f"{key} must be an integer, got {raw!r}",
            details={"variable": key, "value": raw},
        ) from e


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings(env: Optional[Mapping[str, str]] = None) -> ServiceSettings:
    """Build ServiceSettings from environment variables.

    Args:
        env: Mapping to read from (default ``os.environ``)

    Returns:
        Frozen ServiceSettings

    Raises:
        ConfigurationError: If a numeric variable cannot be parsed
    """
    env_map = os.environ if env is None else env
    defaults = ServiceSettings()

    port_key = _env_key("PORT")
    if port_key in env_map:
        port = _parse_int(port_key, env_map[port_key])
    elif "PORT" in env_map:
        port = _parse_int("PORT", env_map["PORT"])
    else:
        port = defaults.port

    body_key = _env_key("MAX_BODY_BYTES")
    max_body_bytes = (
        _parse_int(body_key, env_map[body_key])
        if body_key in env_map
        else defaults.max_body_bytes
    )

    info = InfoPayload(
        name=env_map.get(_env_key("INFO_NAME"), defaults.info.name),
        version=env_map.get(_env_key("INFO_VERSION"), defaults.info.version),
        description=env_map.get(_env_key("INFO_DESCRIPTION"), defaults.info.description),
    )

    origins_key = _env_key("CORS_ORIGINS")
    origins = (
        _parse_origins(env_map[origins_key])
        if origins_key in env_map
        else defaults.cors_allow_origins
    )

    return ServiceSettings(
        host=env_map.get(_env_key("HOST"), defaults.host),
        port=port,
        service_name=env_map.get(_env_key("SERVICE_NAME"), defaults.service_name),
        info=info,
        cors_allow_origins=origins,
        max_body_bytes=max_body_bytes,
        analyzer=env_map.get(_env_key("ANALYZER"), defaults.analyzer),
    )


__all__ = [
    "InfoPayload",
    "ServiceSettings",
    "load_settings",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_ANALYZER",
]
