"""Small helpers shared by the raw ASGI middleware."""

from typing import Callable

Header = tuple[bytes, bytes]


def header_value(scope: dict, name: str) -> str | None:
    """First request header value for name, case-insensitive; None if absent."""
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def scope_state(scope: dict) -> dict:
    """Per-request state dict (request.state reads from it)."""
    return scope.setdefault("state", {})


def with_response_headers(
    send: Callable, extra: list[Header], *, overwrite: bool = True
) -> Callable:
    """Wrap send so http.response.start carries extra headers.

    With overwrite=False, a header the app already set is left alone.
    """

    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            present = {k.lower() for k, _ in headers}
            for key, value in extra:
                if overwrite or key.lower() not in present:
                    headers.append((key, value))
                    present.add(key.lower())
            message["headers"] = headers
        await send(message)

    return send_wrapper
