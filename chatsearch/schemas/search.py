"""Search and history API schemas.

Records are serialized with camelCase keys (userId, createdAt, matchType)
for the chat UI. matchType is omitted when the request lists chats.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chatsearch.application.dtos.search import ChatSearchHit
from chatsearch.domain.enums import ChatVisibility, MatchType

SEARCH_QUERY_MAX_LENGTH = 500


class ChatSearchResultResponse(BaseModel):
    """One chat in a search or history response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    user_id: str
    created_at: datetime
    visibility: ChatVisibility
    match_type: MatchType | None = Field(
        default=None, description="title | message | both | document; absent when listing"
    )

    @classmethod
    def from_hit(cls, hit: ChatSearchHit) -> "ChatSearchResultResponse":
        """Build from a use-case hit."""
        return cls(
            id=hit.chat.id,
            title=hit.chat.title,
            user_id=hit.chat.user_id,
            created_at=hit.chat.created_at,
            visibility=ChatVisibility(hit.chat.visibility),
            match_type=hit.match_type,
        )
