"""initial schema: app_user, chat, message, document

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_app_user_created_at", "app_user", ["created_at"])

    op.create_table(
        "chat",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column(
            "visibility",
            sa.String(length=16),
            server_default=sa.text("'private'"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "visibility IN ('private', 'public')", name="ck_chat_visibility"
        ),
    )
    op.create_index("ix_chat_user_id", "chat", ["user_id"])
    op.create_index("ix_chat_created_at", "chat", ["created_at"])
    op.create_index("ix_chat_user_created", "chat", ["user_id", "created_at"])

    op.create_table(
        "message",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("chat_id", sa.String(), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("content", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["chat_id"], ["chat.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_message_chat_id", "message", ["chat_id"])
    op.create_index("ix_message_created_at", "message", ["created_at"])

    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column(
            "kind",
            sa.String(length=16),
            server_default=sa.text("'text'"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", "created_at"),
        sa.CheckConstraint(
            "kind IN ('text', 'code', 'image', 'sheet')", name="ck_document_kind"
        ),
    )
    op.create_index("ix_document_user_id", "document", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_document_user_id", table_name="document")
    op.drop_table("document")
    op.drop_index("ix_message_created_at", table_name="message")
    op.drop_index("ix_message_chat_id", table_name="message")
    op.drop_table("message")
    op.drop_index("ix_chat_user_created", table_name="chat")
    op.drop_index("ix_chat_created_at", table_name="chat")
    op.drop_index("ix_chat_user_id", table_name="chat")
    op.drop_table("chat")
    op.drop_index("ix_app_user_created_at", table_name="app_user")
    op.drop_table("app_user")
