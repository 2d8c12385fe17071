"""Hybrid chat search use case.

Resolves a free-text query into the owner's chats matched by title, by
message content, or by reference to a matching document, each tagged
with how it matched, newest first.

Query plan (straight-line, at most three store round-trips):

1. title/message pass: one query, both sides flagged per chat;
2. document discovery pass: ids of the owner's matching documents;
   passes 1 and 2 are independent and may run concurrently;
3. document-to-chat pass, only when step 2 found ids: chats whose
   message content contains one of those ids, minus chats already
   returned by step 1.

An empty or whitespace-only query lists all of the owner's chats with
no match annotation.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, TypeVar

from chatsearch.application.dtos.search import ChatSearchHit
from chatsearch.domain.enums import MatchType
from chatsearch.domain.exceptions import (
    SearchFailedException,
    StoreUnavailableException,
    ValidationException,
)
from chatsearch.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from chatsearch.application.dtos.search import TitleMessageMatch
    from chatsearch.application.interfaces.repositories import IChatSearchRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

HISTORY_FAILED_MESSAGE = "Chat history listing failed"


def _require_owner(user_id: str | None) -> str:
    """Return user_id if it names an owner; raise ValidationException otherwise."""
    if user_id is None or not str(user_id).strip():
        raise ValidationException("Owner id is required", field="user_id")
    return user_id


def _sort_newest_first(hits: list[ChatSearchHit]) -> list[ChatSearchHit]:
    """Sort by chat created_at descending. Stable: ties keep store order."""
    return sorted(hits, key=lambda h: h.chat.created_at, reverse=True)


class HybridSearchService:
    """Owner-scoped hybrid search over chat titles, messages and documents.

    Read-only; holds no per-call state, so one instance may serve
    concurrent requests.
    """

    def __init__(
        self,
        search_repo: IChatSearchRepository,
        *,
        concurrent_passes: bool = True,
    ) -> None:
        self.search_repo = search_repo
        self.concurrent_passes = concurrent_passes

    @traced("chat_search.search")
    async def search(self, user_id: str, query: str) -> list[ChatSearchHit]:
        """Return the owner's chats matching query, newest first.

        Args:
            user_id: Owner id; every result belongs to this owner.
            query: Free text. Empty or whitespace-only lists all chats.

        Returns:
            Hits ordered by chat created_at descending, one per chat.

        Raises:
            ValidationException: user_id is missing or blank.
            SearchFailedException: Any store query failed; no partial result.
        """
        owner_id = _require_owner(user_id)
        q = (query or "").strip()
        if not q:
            add_span_attributes(**{"search.listing_mode": True})
            return await self._list_owner_chats(owner_id)
        add_span_attributes(**{"search.listing_mode": False})

        matches, document_ids = await self._title_message_and_document_passes(
            owner_id, q
        )
        hits = [
            ChatSearchHit(
                chat=m.chat,
                match_type=MatchType.from_flags(m.title_matched, m.message_matched),
            )
            for m in matches
        ]
        logger.debug(
            "Title/message pass: %d chats; document pass: %d documents",
            len(hits),
            len(document_ids),
        )

        if document_ids:
            seen = {h.chat.id for h in hits}
            referencing = await self._run(
                "find_conversations_referencing_documents",
                self.search_repo.find_conversations_referencing_documents(
                    owner_id, document_ids
                ),
            )
            added = 0
            for chat in referencing:
                if chat.id in seen:
                    continue
                seen.add(chat.id)
                hits.append(ChatSearchHit(chat=chat, match_type=MatchType.DOCUMENT))
                added += 1
            logger.debug("Document reference pass: %d additional chats", added)

        results = _sort_newest_first(hits)
        add_span_attributes(
            **{
                "search.document_match_count": len(document_ids),
                "search.result_count": len(results),
            }
        )
        logger.info("Search for user %s returned %d chats", owner_id, len(results))
        return results

    async def list_chats(self, user_id: str) -> list[ChatSearchHit]:
        """Return all of the owner's chats, newest first, without match annotation.

        Backs the history listing; a store failure is reported as a
        history failure rather than a search failure.

        Raises:
            ValidationException: user_id is missing or blank.
            SearchFailedException: The listing query failed.
        """
        return await self._list_owner_chats(
            _require_owner(user_id), failure_message=HISTORY_FAILED_MESSAGE
        )

    async def _list_owner_chats(
        self, owner_id: str, failure_message: str = "Search failed"
    ) -> list[ChatSearchHit]:
        chats = await self._run(
            "list_conversations_by_owner",
            self.search_repo.list_conversations_by_owner(owner_id),
            failure_message,
        )
        return _sort_newest_first([ChatSearchHit(chat=c) for c in chats])

    async def _title_message_and_document_passes(
        self, owner_id: str, query: str
    ) -> tuple[list[TitleMessageMatch], list[str]]:
        """Run passes 1 and 2, concurrently when enabled. Either failing fails both."""
        if not self.concurrent_passes:
            matches = await self._run(
                "find_conversations_by_title_or_message_match",
                self.search_repo.find_conversations_by_title_or_message_match(
                    owner_id, query
                ),
            )
            document_ids = await self._run(
                "find_documents_by_text_match",
                self.search_repo.find_documents_by_text_match(owner_id, query),
            )
            return matches, document_ids

        title_message_task = asyncio.create_task(
            self._run(
                "find_conversations_by_title_or_message_match",
                self.search_repo.find_conversations_by_title_or_message_match(
                    owner_id, query
                ),
            )
        )
        document_task = asyncio.create_task(
            self._run(
                "find_documents_by_text_match",
                self.search_repo.find_documents_by_text_match(owner_id, query),
            )
        )
        tasks = (title_message_task, document_task)
        try:
            matches, document_ids = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return matches, document_ids

    @staticmethod
    async def _run(
        operation: str, pending: Awaitable[T], failure_message: str = "Search failed"
    ) -> T:
        """Await one store query; map store failures to SearchFailedException.

        The driver error (or the store exception when it has none) becomes
        both .cause and __cause__.
        """
        try:
            return await pending
        except StoreUnavailableException as exc:
            logger.warning("Search pass %s failed: %s", operation, exc.message)
            cause = exc.cause or exc
            raise SearchFailedException(operation, cause, failure_message) from cause
