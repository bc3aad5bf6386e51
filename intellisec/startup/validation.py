"""Server startup validation utilities."""

from typing import List

from intellisec.config import ServiceSettings
from intellisec.exceptions import ConfigurationError
from intellisec.logger import Logger


def validate_settings(settings: ServiceSettings, logger: Logger) -> None:
    """
    Validate startup settings before the server binds its port.

    Args:
        settings: Settings to validate
        logger: Logger instance for reporting status

    Raises:
        ConfigurationError: Listing every problem found
    """
    problems: List[str] = []

    if not 0 < settings.port < 65536:
        problems.append(f"port must be between 1 and 65535, got {settings.port}")

    if settings.max_body_bytes <= 0:
        problems.append(f"max_body_bytes must be positive, got {settings.max_body_bytes}")

    if not settings.service_name.strip():
        problems.append("service_name must not be empty")

    for field_name, value in settings.info.to_dict().items():
        if not value.strip():
            problems.append(f"info.{field_name} must not be empty")

    if not settings.cors_allow_origins:
        problems.append("cors_allow_origins must list at least one origin")

    if problems:
        error_msg = (
            "Invalid server configuration:\n"
            + "\n".join(f"  - {p}" for p in problems)
        )
        raise ConfigurationError(error_msg, details={"problems": problems})

    logger.info(
        "Configuration validated successfully",
        port=settings.port,
        service=settings.service_name,
        analyzer=settings.analyzer,
    )
