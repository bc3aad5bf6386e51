"""IntelliSec Web Server entry point."""

import argparse
import sys
from typing import List, Optional

import uvicorn

from intellisec.analysis import get_analyzer
from intellisec.config import ServiceSettings, load_settings
from intellisec.exceptions import ConfigurationError
from intellisec.logger import Logger, session_logger
from intellisec.startup.validation import validate_settings
from intellisec.web_server.web_server import IntelliSecWebServer

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="IntelliSec backend - JSON API server")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: 0.0.0.0, or INTELLISEC_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: 4000, or INTELLISEC_PORT / PORT env var)",
    )
    parser.add_argument(
        "--max-body-bytes",
        type=int,
        default=None,
        help="Maximum accepted request body size (default: 1048576)",
    )
    parser.add_argument(
        "--analyzer",
        type=str,
        default=None,
        help="Name of the text analyzer behind /api/llm/scan (default: length)",
    )
    return parser


def resolve_settings(argv: Optional[List[str]] = None) -> ServiceSettings:
    """Combine environment settings with command line overrides."""
    args = build_parser().parse_args(argv)
    return load_settings().with_overrides(
        host=args.host,
        port=args.port,
        max_body_bytes=args.max_body_bytes,
        analyzer=args.analyzer,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = resolve_settings(argv)
        validate_settings(settings, logger)
        server = IntelliSecWebServer(
            settings=settings,
            analyzer=get_analyzer(settings.analyzer),
            logger=logger,
        )
    except ConfigurationError as e:
        logger.error("FATAL: Configuration invalid", error=e.message, details=e.details)
        return 1

    try:
        logger.info("=" * 70)
        logger.info("STARTING INTELLISEC WEB SERVER")
        logger.info("=" * 70)
        logger.info(
            "Configuration",
            host=settings.host,
            port=settings.port,
            service=settings.service_name,
            analyzer=server.analyzer.name,
            cors_origins=",".join(settings.cors_allow_origins),
        )
        logger.info("=" * 70)
        logger.info(f"Health check: http://{settings.host}:{settings.port}/health")
        logger.info(f"Info: http://{settings.host}:{settings.port}/api/info")
        logger.info(f"Scan: http://{settings.host}:{settings.port}/api/llm/scan")
        logger.info("=" * 70)
        uvicorn.run(server.app, host=settings.host, port=settings.port, log_level="info")
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
