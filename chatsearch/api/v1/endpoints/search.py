"""Search API: hybrid search over the caller's chats (titles, messages, documents)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from chatsearch.api.v1.dependencies import get_current_user_id, get_search_service
from chatsearch.application.use_cases.search import HybridSearchService
from chatsearch.core.limiter import limit_search
from chatsearch.schemas.search import SEARCH_QUERY_MAX_LENGTH, ChatSearchResultResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[ChatSearchResultResponse],
    response_model_exclude_none=True,
)
@limit_search
async def search_chats(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[HybridSearchService, Depends(get_search_service)],
    q: str = Query(
        "",
        max_length=SEARCH_QUERY_MAX_LENGTH,
        description="Search text; empty lists all chats",
    ),
):
    """Chats matching q by title, message or referenced document, newest first.

    Each record carries matchType unless q is blank, in which case all of
    the caller's chats are listed without it.
    """
    hits = await search_svc.search(user_id, q)
    return [ChatSearchResultResponse.from_hit(h) for h in hits]
