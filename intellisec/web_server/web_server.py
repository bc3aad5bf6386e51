"""IntelliSec Web Server - JSON API over Starlette."""

import json
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.types import ASGIApp

from intellisec.analysis import TextAnalyzer, get_analyzer
from intellisec.config import ServiceSettings
from intellisec.errors import get_http_status_for_error, map_error_for_web
from intellisec.exceptions import (
    IntelliSecError,
    MalformedRequestError,
    MethodNotAllowedError,
    PayloadTooLargeError,
    RouteNotFoundError,
)
from intellisec.logger import Logger, session_logger
from intellisec.web_server.middleware import RequestLoggingMiddleware
from intellisec.web_server.models import ScanRequest


class IntelliSecWebServer:
    """Web server for IntelliSec - health, info and scan endpoints.

    All configuration arrives through ``settings``; the scan behaviour comes
    from ``analyzer`` (or the analyzer named in ``settings.analyzer``).
    """

    def __init__(
        self,
        settings: Optional[ServiceSettings] = None,
        analyzer: Optional[TextAnalyzer] = None,
        logger: Logger = session_logger,
    ):
        self.settings = settings or ServiceSettings()
        self.analyzer = analyzer or get_analyzer(self.settings.analyzer)
        self.logger = logger
        self.app = self._create_app()

    def _create_app(self) -> ASGIApp:
        """Create the Starlette application wrapped in CORS handling."""
        routes = [
            Route("/health", endpoint=self.health, methods=["GET"]),
            Route("/api/info", endpoint=self.info, methods=["GET"]),
            Route("/api/llm/scan", endpoint=self.scan, methods=["POST"]),
        ]

        middleware = [Middleware(RequestLoggingMiddleware, logger=self.logger)]

        exception_handlers: Dict[Any, Any] = {
            HTTPException: self._handle_http_exception,
            IntelliSecError: self._handle_error,
            PydanticValidationError: self._handle_error,
            Exception: self._handle_unexpected,
        }

        app = Starlette(
            debug=False,
            routes=routes,
            middleware=middleware,
            exception_handlers=exception_handlers,
        )

        # Outside ServerErrorMiddleware so 500 responses also carry CORS headers
        return CORSMiddleware(
            app,
            allow_origins=list(self.settings.cors_allow_origins),
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    async def health(self, request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({"status": "ok", "service": self.settings.service_name})

    async def info(self, request: Request) -> JSONResponse:
        """Static service information."""
        return JSONResponse(self.settings.info.to_dict())

    async def scan(self, request: Request) -> JSONResponse:
        """Run the configured analyzer over the request's ``text`` field.

        A missing body, ``{}`` or ``{"text": null}`` scans the empty string.
        """
        payload = await self._read_json_body(request)
        scan_request = ScanRequest.model_validate(payload)
        text = scan_request.text or ""

        result = self.analyzer.analyze(text)
        return JSONResponse(result.to_dict())

    async def _read_json_body(self, request: Request) -> Dict[str, Any]:
        """Read and parse the request body, enforcing the size limit."""
        limit = self.settings.max_body_bytes

        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > limit:
            raise PayloadTooLargeError(limit=limit, received=int(declared))

        chunks = []
        size = 0
        async for chunk in request.stream():
            size += len(chunk)
            if size > limit:
                raise PayloadTooLargeError(limit=limit, received=size)
            chunks.append(chunk)
        body = b"".join(chunks)

        if not body.strip():
            return {}

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise MalformedRequestError(
                "Request body is not valid JSON",
                details={"reason": str(e)},
            ) from e

        if not isinstance(payload, dict):
            raise MalformedRequestError(
                "Request body must be a JSON object",
                details={"received_type": type(payload).__name__},
            )
        return payload

    def _error_response(self, error: Exception) -> JSONResponse:
        return JSONResponse(
            map_error_for_web(error),
            status_code=get_http_status_for_error(error),
        )

    async def _handle_error(self, request: Request, exc: Exception) -> JSONResponse:
        response = self._error_response(exc)
        self.logger.warning(
            "Request failed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            error_type=type(exc).__name__,
        )
        return response

    async def _handle_http_exception(self, request: Request, exc: HTTPException) -> JSONResponse:
        error: Exception
        if exc.status_code == 404:
            error = RouteNotFoundError(request.method, request.url.path)
        elif exc.status_code == 405:
            error = MethodNotAllowedError(request.method, request.url.path)
        else:
            error = IntelliSecError(code="HTTP_ERROR", message=str(exc.detail))

        return JSONResponse(
            map_error_for_web(error),
            status_code=exc.status_code,
            headers=exc.headers,
        )

    async def _handle_unexpected(self, request: Request, exc: Exception) -> JSONResponse:
        self.logger.error(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return self._error_response(exc)

    def get_app(self) -> ASGIApp:
        """Return the ASGI application."""
        return self.app


def create_app(
    settings: Optional[ServiceSettings] = None,
    analyzer: Optional[TextAnalyzer] = None,
) -> ASGIApp:
    """Build the ASGI application (usable as a uvicorn ``--factory``)."""
    return IntelliSecWebServer(settings=settings, analyzer=analyzer).get_app()
