"""Security: JWT verification."""

from chatsearch.infrastructure.security.jwt import create_access_token, owner_id_from_token

__all__ = ["create_access_token", "owner_id_from_token"]
