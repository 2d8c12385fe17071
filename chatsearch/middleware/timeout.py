"""Request timeout middleware.

Bounds the whole request, including every search pass, with
asyncio.wait_for. On expiry the handler is cancelled and a 504 JSON body
is sent, unless the response had already started. Raw ASGI.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def _timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": f"Request timed out after {timeout_seconds} seconds",
            "details": {"timeout_seconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds and answer 504."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def tracking_send(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, tracking_send), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            await send(
                {
                    "type": "http.response.start",
                    "status": 504,
                    "headers": [(b"content-type", b"application/json")],
                }
            )
            await send({"type": "http.response.body", "body": _timeout_body(timeout_seconds)})

    return asgi_app
