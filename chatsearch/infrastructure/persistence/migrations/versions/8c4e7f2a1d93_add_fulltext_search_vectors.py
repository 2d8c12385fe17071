"""add full-text search_tsv to chat, message and document

Revision ID: 8c4e7f2a1d93
Revises: 3f1c2a9d7b10
Create Date: 2026-10-17

Adds tsvector columns, maintaining triggers, backfill and GIN indexes:
chat (title), message (content::text), document (title || content).
The text search configuration must match SEARCH_TEXT_CONFIG.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "8c4e7f2a1d93"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TEXT_SEARCH_CONFIG = "english"

# table -> SQL expression over NEW.* (trigger) / bare columns (backfill)
_PROJECTIONS = {
    "chat": "coalesce({p}title, '')",
    "message": "coalesce({p}content::text, '')",
    "document": "coalesce({p}title, '') || ' ' || coalesce({p}content, '')",
}


def upgrade() -> None:
    for table, expression in _PROJECTIONS.items():
        op.add_column(
            table,
            sa.Column("search_tsv", postgresql.TSVECTOR(), nullable=True),
        )
        op.execute(
            f"""
            CREATE OR REPLACE FUNCTION {table}_search_tsv_fn()
            RETURNS trigger AS $$
            BEGIN
              NEW.search_tsv := to_tsvector('{TEXT_SEARCH_CONFIG}', {expression.format(p="NEW.")});
              RETURN NEW;
            END;
            $$ LANGUAGE plpgsql;
            """
        )
        op.execute(
            f"""
            CREATE TRIGGER {table}_search_tsv_trigger
            BEFORE INSERT OR UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION {table}_search_tsv_fn()
            """
        )
        op.execute(
            f"""
            UPDATE {table} SET search_tsv = to_tsvector('{TEXT_SEARCH_CONFIG}', {expression.format(p="")})
            WHERE search_tsv IS NULL
            """
        )
        op.create_index(
            f"ix_{table}_search_tsv",
            table,
            ["search_tsv"],
            unique=False,
            postgresql_using="gin",
        )


def downgrade() -> None:
    for table in reversed(list(_PROJECTIONS)):
        op.drop_index(
            f"ix_{table}_search_tsv", table_name=table, postgresql_using="gin"
        )
        op.execute(f"DROP TRIGGER IF EXISTS {table}_search_tsv_trigger ON {table}")
        op.execute(f"DROP FUNCTION IF EXISTS {table}_search_tsv_fn()")
        op.drop_column(table, "search_tsv")
