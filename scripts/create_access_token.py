"""Mint a bearer token for a user id (local testing only).

Usage:
    python -m scripts.create_access_token <user_id> [minutes]
Uses SECRET_KEY and ALGORITHM from the environment or .env.
"""

import sys
from datetime import timedelta

from chatsearch.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a signed JWT whose sub is the given user id."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_access_token <user_id> [minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    expires = timedelta(minutes=int(sys.argv[2])) if len(sys.argv) > 2 else None
    print(create_access_token(user_id, expires_delta=expires))


if __name__ == "__main__":
    main()
