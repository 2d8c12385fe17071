"""Security headers middleware for a JSON-only API. Raw ASGI."""

from typing import Callable

from chatsearch.middleware._asgi import with_response_headers

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    # Search results are per-user; never cache them in shared caches.
    "Cache-Control": "no-store",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Add security headers to every HTTP response unless the app set them."""
    resolved = DEFAULT_HEADERS if headers is None else headers
    extra = [(k.encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        await app(scope, receive, with_response_headers(send, extra, overwrite=False))

    return asgi_app
