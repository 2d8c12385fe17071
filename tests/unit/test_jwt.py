"""Bearer token minting and owner extraction."""

from datetime import timedelta

import pytest
from jose import jwt

from chatsearch.core.config import get_settings
from chatsearch.infrastructure.security.jwt import create_access_token, owner_id_from_token


def _sign(claims: dict, key: str | None = None) -> str:
    settings = get_settings()
    return jwt.encode(
        claims, key or settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def test_token_carries_owner_id() -> None:
    token = create_access_token("user-1")

    assert owner_id_from_token(token) == "user-1"
    assert "exp" in jwt.get_unverified_claims(token)


def test_expired_token_rejected() -> None:
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError, match="Invalid token"):
        owner_id_from_token(token)


def test_token_signed_with_other_key_rejected() -> None:
    with pytest.raises(ValueError):
        owner_id_from_token(_sign({"sub": "user-1", "exp": 9999999999}, key="other-key"))


def test_token_without_expiry_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid token"):
        owner_id_from_token(_sign({"sub": "user-1"}))


def test_blank_sub_rejected() -> None:
    with pytest.raises(ValueError, match="sub"):
        owner_id_from_token(_sign({"sub": "  ", "exp": 9999999999}))
