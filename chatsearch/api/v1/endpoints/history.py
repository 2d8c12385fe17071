"""History API: the caller's chats, newest first (sidebar listing)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from chatsearch.api.v1.dependencies import get_current_user_id, get_search_service
from chatsearch.application.use_cases.search import HybridSearchService
from chatsearch.core.limiter import limit_search
from chatsearch.schemas.search import ChatSearchResultResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[ChatSearchResultResponse],
    response_model_exclude_none=True,
)
@limit_search
async def list_history(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[HybridSearchService, Depends(get_search_service)],
):
    """All of the caller's chats, newest first, without matchType."""
    hits = await search_svc.list_chats(user_id)
    return [ChatSearchResultResponse.from_hit(h) for h in hits]
