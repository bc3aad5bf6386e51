"""ASGI middleware for request logging."""

import time
from typing import Any

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from intellisec.logger import Logger


class RequestLoggingMiddleware:
    """Logs method, path, status and duration of every HTTP request."""

    def __init__(self, app: ASGIApp, logger: Logger):
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        status: Any = None

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            self.logger.info(
                "Request handled",
                method=scope["method"],
                path=scope["path"],
                status=status if status is not None else 500,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
