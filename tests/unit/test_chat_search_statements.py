"""ChatSearchRepository unit tests: SQL shape (PostgreSQL dialect) and error wrapping.

No database: statements are compiled, and sessions are replaced with mocks.
"""

from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from chatsearch.domain.exceptions import StoreUnavailableException
from chatsearch.infrastructure.persistence.models import Chat
from chatsearch.infrastructure.persistence.repositories import ChatSearchRepository


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


class _SessionContext:
    def __init__(self, session) -> None:
        self.session = session

    async def __aenter__(self):
        return self.session

    async def __aexit__(self, *exc) -> bool:
        return False


def _factory_with(session) -> MagicMock:
    return MagicMock(side_effect=lambda: _SessionContext(session))


def _repo(session_factory=None, config: str = "english") -> ChatSearchRepository:
    return ChatSearchRepository(session_factory or MagicMock(), text_search_config=config)


def test_title_or_message_statement_shape() -> None:
    sql = _sql(_repo().title_or_message_match_statement("user-1", "budget"))

    assert "plainto_tsquery(CAST(" in sql
    assert "AS REGCONFIG" in sql
    assert "chat.search_tsv @@" in sql
    assert "message.search_tsv @@" in sql
    assert "EXISTS (SELECT message.id" in sql
    assert "message.chat_id = chat.id" in sql
    assert "chat.user_id = " in sql
    assert " OR " in sql
    assert "AS title_matched" in sql
    assert "AS message_matched" in sql
    assert "ORDER BY chat.created_at DESC" in sql


def test_document_statement_is_owner_scoped_and_distinct() -> None:
    sql = _sql(_repo().document_match_statement("user-1", "expense"))

    assert sql.startswith("SELECT DISTINCT document.id")
    assert "document.user_id = " in sql
    assert "document.search_tsv @@ plainto_tsquery" in sql


def test_text_search_config_is_bound_not_inlined() -> None:
    stmt = _repo(config="simple").document_match_statement("user-1", "expense")
    compiled = stmt.compile(dialect=postgresql.dialect())

    assert "simple" not in str(compiled)
    assert "simple" in compiled.params.values()
    assert "expense" in compiled.params.values()


def test_referencing_statement_uses_textual_containment() -> None:
    stmt = ChatSearchRepository.referencing_documents_statement("user-1", ["d1", "d2", "d3"])
    compiled = stmt.compile(dialect=postgresql.dialect())
    sql = str(compiled)

    assert sql.count("strpos(CAST(message.content AS TEXT)") == 3
    assert "EXISTS (SELECT message.id" in sql
    assert "chat.user_id = " in sql
    assert "JOIN" not in sql
    assert {"d1", "d2", "d3"} <= set(compiled.params.values())


def test_list_statement_is_owner_scoped_newest_first() -> None:
    sql = _sql(ChatSearchRepository.list_by_owner_statement("user-1"))

    assert "WHERE chat.user_id = " in sql
    assert sql.rstrip().endswith("ORDER BY chat.created_at DESC")
    assert "search_tsv" not in sql


async def test_title_message_rows_are_mapped_with_flags() -> None:
    chat = Chat(
        id="c1",
        user_id="user-1",
        title="Budget",
        created_at=datetime(2025, 1, 1, 9, 0),
        visibility="private",
    )
    result = MagicMock()
    result.all.return_value = [SimpleNamespace(Chat=chat, title_matched=True, message_matched=None)]
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)

    rows = await _repo(_factory_with(session)).find_conversations_by_title_or_message_match(
        "user-1", "budget"
    )

    assert len(rows) == 1
    assert rows[0].chat.id == "c1"
    assert rows[0].chat.created_at == datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
    assert rows[0].title_matched is True
    assert rows[0].message_matched is False


async def test_referencing_with_no_ids_skips_the_store() -> None:
    factory = MagicMock(side_effect=AssertionError("store must not be queried"))

    assert await _repo(factory).find_conversations_referencing_documents("user-1", []) == []
    factory.assert_not_called()


async def test_driver_error_is_wrapped_as_store_unavailable() -> None:
    session = MagicMock()
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, ConnectionResetError("reset"))
    )

    with pytest.raises(StoreUnavailableException) as exc_info:
        await _repo(_factory_with(session)).find_documents_by_text_match("user-1", "x")

    exc = exc_info.value
    assert exc.operation == "find_documents_by_text_match"
    assert exc.details["cause"] == "OperationalError"
    assert isinstance(exc.__cause__, OperationalError)


async def test_connection_error_is_wrapped_as_store_unavailable() -> None:
    class _Refusing:
        async def __aenter__(self):
            raise ConnectionRefusedError("refused")

        async def __aexit__(self, *exc) -> bool:
            return False

    factory = MagicMock(side_effect=lambda: _Refusing())

    with pytest.raises(StoreUnavailableException) as exc_info:
        await _repo(factory).list_conversations_by_owner("user-1")

    assert exc_info.value.details == {
        "operation": "list_conversations_by_owner",
        "cause": "ConnectionRefusedError",
    }
