"""Chat ORM model (a conversation)."""

from sqlalchemy import Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from chatsearch.domain.enums import ChatVisibility
from chatsearch.infrastructure.persistence.database import Base
from chatsearch.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    OwnerMixin,
    SearchVectorMixin,
)


class Chat(CuidMixin, CreatedAtMixin, OwnerMixin, SearchVectorMixin, Base):
    """Chat. Table: chat. search_tsv projects the title."""

    __tablename__ = "chat"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    visibility: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ChatVisibility.PRIVATE.value,
        server_default=text("'private'"),
    )

    __table_args__ = (
        Index("ix_chat_user_created", "user_id", "created_at"),
        Index("ix_chat_search_tsv", "search_tsv", postgresql_using="gin"),
    )
