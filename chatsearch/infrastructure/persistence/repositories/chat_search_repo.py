"""Chat search repository. PostgreSQL full-text search on chat, message and document.

Each of chat, message and document carries a search_tsv projection
(maintained by triggers) with a GIN index. Matching uses
search_tsv @@ plainto_tsquery(<config>, :q).

Every method opens its own short-lived session from the process-wide
session factory, so the resolver may run independent passes
concurrently. Each query sees its own snapshot; nothing is assumed
consistent across queries.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import ColumnElement, Text, cast, func, literal, or_, select
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chatsearch.application.dtos.chat import ChatResult
from chatsearch.application.dtos.search import TitleMessageMatch
from chatsearch.domain.exceptions import StoreUnavailableException
from chatsearch.infrastructure.persistence.models.chat import Chat
from chatsearch.infrastructure.persistence.models.document import Document
from chatsearch.infrastructure.persistence.models.message import Message
from chatsearch.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _chat_to_result(c: Chat) -> ChatResult:
    """Map ORM Chat to application ChatResult."""
    return ChatResult(
        id=c.id,
        user_id=c.user_id,
        title=c.title,
        created_at=ensure_utc(c.created_at),
        visibility=c.visibility,
    )


class ChatSearchRepository:
    """Owner-scoped full-text queries over chats, messages and documents."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        text_search_config: str = "english",
    ) -> None:
        self._session_factory = session_factory
        self.text_search_config = text_search_config

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Yield a read session; wrap driver and connection errors as StoreUnavailableException."""
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error("Chat store query %s failed: %s", operation, type(e).__name__)
            raise StoreUnavailableException(operation, e) from e

    def _tsquery(self, query: str) -> ColumnElement:
        """plainto_tsquery(<config>::regconfig, :q)."""
        return func.plainto_tsquery(
            cast(literal(self.text_search_config), REGCONFIG), query
        )

    def title_or_message_match_statement(self, owner_id: str, query: str):
        """Build the single-round-trip title/message query (EXISTS for the message side)."""
        tsq = self._tsquery(query)
        title_match = Chat.search_tsv.bool_op("@@")(tsq)
        message_match = (
            select(Message.id)
            .where(
                Message.chat_id == Chat.id,
                Message.search_tsv.bool_op("@@")(tsq),
            )
            .exists()
        )
        return (
            select(
                Chat,
                title_match.label("title_matched"),
                message_match.label("message_matched"),
            )
            .where(Chat.user_id == owner_id, or_(title_match, message_match))
            .order_by(Chat.created_at.desc())
        )

    def document_match_statement(self, owner_id: str, query: str):
        """Build the document discovery query (distinct ids; versions share an id)."""
        return (
            select(Document.id)
            .where(
                Document.user_id == owner_id,
                Document.search_tsv.bool_op("@@")(self._tsquery(query)),
            )
            .distinct()
        )

    @staticmethod
    def referencing_documents_statement(owner_id: str, document_ids: list[str]):
        """Build the document-reference query.

        A chat qualifies when any of its messages' content, rendered as
        text, contains one of the document ids as a substring.
        """
        content_text = cast(Message.content, Text)
        references = or_(
            *(func.strpos(content_text, doc_id) > 0 for doc_id in document_ids)
        )
        has_reference = (
            select(Message.id)
            .where(Message.chat_id == Chat.id, references)
            .exists()
        )
        return (
            select(Chat)
            .where(Chat.user_id == owner_id, has_reference)
            .order_by(Chat.created_at.desc())
        )

    @staticmethod
    def list_by_owner_statement(owner_id: str):
        """Build the owner listing query, newest first."""
        return (
            select(Chat)
            .where(Chat.user_id == owner_id)
            .order_by(Chat.created_at.desc())
        )

    async def find_conversations_by_title_or_message_match(
        self, owner_id: str, query: str
    ) -> list[TitleMessageMatch]:
        """Return owner's chats whose title or any message matches, flagged per side."""
        stmt = self.title_or_message_match_statement(owner_id, query)
        async with self._session("find_conversations_by_title_or_message_match") as session:
            rows = (await session.execute(stmt)).all()
        return [
            TitleMessageMatch(
                chat=_chat_to_result(row.Chat),
                title_matched=bool(row.title_matched),
                message_matched=bool(row.message_matched),
            )
            for row in rows
        ]

    async def find_documents_by_text_match(
        self, owner_id: str, query: str
    ) -> list[str]:
        """Return distinct ids of owner's documents whose title+content matches."""
        stmt = self.document_match_statement(owner_id, query)
        async with self._session("find_documents_by_text_match") as session:
            return list((await session.execute(stmt)).scalars().all())

    async def find_conversations_referencing_documents(
        self, owner_id: str, document_ids: list[str]
    ) -> list[ChatResult]:
        """Return owner's chats with a message containing any of document_ids."""
        if not document_ids:
            return []
        stmt = self.referencing_documents_statement(owner_id, document_ids)
        async with self._session("find_conversations_referencing_documents") as session:
            chats = (await session.execute(stmt)).scalars().all()
        return [_chat_to_result(c) for c in chats]

    async def list_conversations_by_owner(self, owner_id: str) -> list[ChatResult]:
        """Return all of owner's chats, newest first."""
        stmt = self.list_by_owner_statement(owner_id)
        async with self._session("list_conversations_by_owner") as session:
            chats = (await session.execute(stmt)).scalars().all()
        return [_chat_to_result(c) for c in chats]
