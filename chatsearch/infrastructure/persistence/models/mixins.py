"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, CreatedAtMixin, OwnerMixin, SearchVectorMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from chatsearch.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class CreatedAtMixin:
    """Mixin for created_at (server default, timezone-aware, indexed for recency order)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            nullable=False,
            index=True,
        )


class OwnerMixin:
    """Mixin for user-owned rows. Provides user_id FK to app_user with CASCADE delete."""

    @declared_attr
    def user_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class SearchVectorMixin:
    """Mixin for the derived full-text projection.

    search_tsv is maintained by a BEFORE INSERT OR UPDATE trigger (see
    migrations); the ORM never writes it and does not load it by default.
    """

    @declared_attr
    def search_tsv(cls) -> Mapped[str | None]:
        return mapped_column(TSVECTOR, nullable=True, deferred=True)
