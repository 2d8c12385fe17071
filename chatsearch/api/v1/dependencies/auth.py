"""Auth dependencies (composition root).

The owner id comes from the bearer token's sub claim. Requests without
a valid token never reach the search use case.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chatsearch.domain.exceptions import AuthenticationException
from chatsearch.infrastructure.security.jwt import owner_id_from_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str | None:
    """Return the owner id from the JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        return owner_id_from_token(credentials.credentials)
    except ValueError:
        return None


async def get_current_user_id(
    user_id: Annotated[str | None, Depends(get_current_user_id_optional)],
) -> str:
    """Return the owner id from the JWT; raise AuthenticationException (401) if absent."""
    if user_id is None:
        raise AuthenticationException()
    return user_id
