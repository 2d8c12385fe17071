"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from chatsearch.application.use_cases.search import HybridSearchService
from chatsearch.core.config import get_settings
from chatsearch.infrastructure.persistence.database import get_session_factory
from chatsearch.infrastructure.persistence.repositories import ChatSearchRepository


def get_chat_search_repo() -> ChatSearchRepository:
    """Chat search repository over the process-wide session factory (read-only)."""
    return ChatSearchRepository(
        get_session_factory(),
        text_search_config=get_settings().search_text_config,
    )


def get_search_service(
    search_repo: Annotated[ChatSearchRepository, Depends(get_chat_search_repo)],
) -> HybridSearchService:
    """Hybrid search use case (titles, messages, referenced documents)."""
    return HybridSearchService(
        search_repo,
        concurrent_passes=get_settings().search_concurrent_passes,
    )
