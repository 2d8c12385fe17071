"""Persistence models: ORM entities and mixins."""

from chatsearch.infrastructure.persistence.models.chat import Chat
from chatsearch.infrastructure.persistence.models.document import Document
from chatsearch.infrastructure.persistence.models.message import Message
from chatsearch.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    OwnerMixin,
    SearchVectorMixin,
)
from chatsearch.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "Chat",
    "Message",
    "Document",
    "CuidMixin",
    "CreatedAtMixin",
    "OwnerMixin",
    "SearchVectorMixin",
]
