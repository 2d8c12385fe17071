"""Application DTOs (read-models passed between repositories, use cases and API)."""

from chatsearch.application.dtos.chat import ChatResult
from chatsearch.application.dtos.search import ChatSearchHit, TitleMessageMatch

__all__ = ["ChatResult", "ChatSearchHit", "TitleMessageMatch"]
