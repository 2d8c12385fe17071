"""Bearer tokens naming the chat owner.

The auth service signs tokens with the shared SECRET_KEY and puts the
owner id in `sub`. This service only reads them; minting is here for dev
scripts and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import cast

from jose import JWTError, jwt

from chatsearch.core.config import get_settings


def create_access_token(owner_id: str, expires_delta: timedelta | None = None) -> str:
    """Sign a token for owner_id, valid for expires_delta or the configured TTL."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims = {"sub": owner_id, "exp": datetime.now(UTC) + expires_delta}
    return cast(
        str,
        jwt.encode(claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm),
    )


def owner_id_from_token(token: str) -> str:
    """Owner id carried by a valid, unexpired token.

    Raises:
        ValueError: Bad signature, expired, no exp, or blank sub.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    owner_id = claims.get("sub")
    if not isinstance(owner_id, str) or not owner_id.strip():
        raise ValueError("Token has no owner (sub)")
    return owner_id
