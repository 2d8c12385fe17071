"""DTOs for chats (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ChatResult:
    """Chat read-model returned by every search and listing query."""

    id: str
    user_id: str
    title: str
    created_at: datetime
    visibility: str
