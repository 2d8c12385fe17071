"""Correlation ID middleware.

Propagates X-Correlation-ID across services: the client's value when
given, else the request id, else a new UUID4. Raw ASGI.
"""

import uuid
from typing import Callable

from chatsearch.middleware._asgi import header_value, scope_state, with_response_headers
from chatsearch.middleware.request_id import sanitize_request_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Set request.state.correlation_id and echo it on the response."""
    header_b = header_name.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope_state(scope)
        raw = header_value(scope, header_name)
        correlation_id = (
            sanitize_request_id(raw) if raw else state.get("request_id")
        ) or str(uuid.uuid4())
        state["correlation_id"] = correlation_id
        await app(
            scope,
            receive,
            with_response_headers(send, [(header_b, correlation_id.encode())]),
        )

    return asgi_app
