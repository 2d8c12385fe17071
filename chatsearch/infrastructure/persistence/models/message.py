"""Message ORM model. Content is JSON: a plain string or structured parts."""

from typing import Any

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from chatsearch.infrastructure.persistence.database import Base
from chatsearch.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    SearchVectorMixin,
)


class Message(CuidMixin, CreatedAtMixin, SearchVectorMixin, Base):
    """Message. Table: message. search_tsv projects content::text.

    Documents are referenced by embedding their id somewhere in content;
    there is no foreign key from message to document.
    """

    __tablename__ = "message"

    chat_id: Mapped[str] = mapped_column(
        String, ForeignKey("chat.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(String(32), nullable=False)
    content: Mapped[Any] = mapped_column(JSONB, nullable=False)

    __table_args__ = (
        Index("ix_message_search_tsv", "search_tsv", postgresql_using="gin"),
    )
