"""Persistence repositories. Re-exports for dependency injection."""

from chatsearch.infrastructure.persistence.repositories.chat_search_repo import (
    ChatSearchRepository,
)

__all__ = ["ChatSearchRepository"]
