"""User ORM model. Owner of chats and documents."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from chatsearch.infrastructure.persistence.database import Base
from chatsearch.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class User(CuidMixin, CreatedAtMixin, Base):
    """User. Table: app_user. Credentials live with the auth collaborator."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
