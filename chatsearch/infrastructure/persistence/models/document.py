"""Document ORM model. Each saved version shares the document id."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from chatsearch.domain.enums import DocumentKind
from chatsearch.infrastructure.persistence.database import Base
from chatsearch.infrastructure.persistence.models.mixins import (
    OwnerMixin,
    SearchVectorMixin,
)
from chatsearch.shared.utils.generators import generate_cuid


class Document(OwnerMixin, SearchVectorMixin, Base):
    """Document. Table: document. Primary key (id, created_at).

    search_tsv projects title and content together.
    """

    __tablename__ = "document"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), primary_key=True, server_default=func.now()
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    kind: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=DocumentKind.TEXT.value,
        server_default=text("'text'"),
    )

    __table_args__ = (
        Index("ix_document_search_tsv", "search_tsv", postgresql_using="gin"),
    )
