"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from chatsearch.domain.enums import ChatVisibility, DocumentKind, MatchType
from chatsearch.domain.exceptions import (
    AuthenticationException,
    ChatSearchException,
    SearchFailedException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    # Enums
    "ChatVisibility",
    "DocumentKind",
    "MatchType",
    # Exceptions
    "AuthenticationException",
    "ChatSearchException",
    "SearchFailedException",
    "StoreUnavailableException",
    "ValidationException",
]
