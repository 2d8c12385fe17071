"""DTOs for hybrid chat search (no dependency on ORM)."""

from dataclasses import dataclass

from chatsearch.application.dtos.chat import ChatResult
from chatsearch.domain.enums import MatchType


@dataclass(frozen=True)
class TitleMessageMatch:
    """Row of the title/message pass: the chat plus which side(s) matched."""

    chat: ChatResult
    title_matched: bool
    message_matched: bool


@dataclass(frozen=True)
class ChatSearchHit:
    """Single search result. match_type is None in listing mode (empty query)."""

    chat: ChatResult
    match_type: MatchType | None = None
