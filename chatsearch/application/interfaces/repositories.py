"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chatsearch.application.dtos.chat import ChatResult
    from chatsearch.application.dtos.search import TitleMessageMatch


class IChatSearchRepository(Protocol):
    """Protocol for owner-scoped full-text queries over chats, messages and documents.

    Implementations raise StoreUnavailableException on any store failure.
    """

    async def find_conversations_by_title_or_message_match(
        self, owner_id: str, query: str
    ) -> list[TitleMessageMatch]:
        """Return owner's chats whose title or any message matches, flagged per side (one round-trip)."""

    async def find_documents_by_text_match(
        self, owner_id: str, query: str
    ) -> list[str]:
        """Return distinct ids of owner's documents whose title+content matches."""

    async def find_conversations_referencing_documents(
        self, owner_id: str, document_ids: list[str]
    ) -> list[ChatResult]:
        """Return owner's chats with a message whose content contains any of the ids as a substring."""

    async def list_conversations_by_owner(self, owner_id: str) -> list[ChatResult]:
        """Return all of owner's chats, newest first."""
