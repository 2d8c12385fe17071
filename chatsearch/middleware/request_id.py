"""Request ID middleware.

Forwards a client X-Request-ID when it is safe to log, otherwise mints a
UUID4. The value is stored on request.state.request_id and echoed on the
response. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from chatsearch.middleware._asgi import header_value, scope_state, with_response_headers

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,%d}" % REQUEST_ID_MAX_LENGTH)


def sanitize_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it is a safe id; a fresh UUID otherwise."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id header on each request and response."""
    header_b = header_name.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(header_value(scope, header_name))
        scope_state(scope)["request_id"] = request_id
        await app(
            scope,
            receive,
            with_response_headers(send, [(header_b, request_id.encode())]),
        )

    return asgi_app
