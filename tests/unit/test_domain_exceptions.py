"""Tests for domain exceptions (error_code, message, details, to_dict)."""

import pytest

from chatsearch.domain.exceptions import (
    AuthenticationException,
    ChatSearchException,
    SearchFailedException,
    StoreUnavailableException,
    ValidationException,
)


def test_chatsearch_exception_default_error_code() -> None:
    """Base ChatSearchException uses class name as error_code when not provided."""
    exc = ChatSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ChatSearchException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict() -> None:
    exc = ChatSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets INVALID_INPUT and optional field in details."""
    exc = ValidationException("Owner id is required", field="user_id")
    assert exc.error_code == "INVALID_INPUT"
    assert exc.details == {"field": "user_id"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Not authenticated"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_store_unavailable_exception_keeps_cause() -> None:
    cause = ConnectionRefusedError("refused")
    exc = StoreUnavailableException("list_conversations_by_owner", cause)
    assert exc.error_code == "STORE_UNAVAILABLE"
    assert exc.operation == "list_conversations_by_owner"
    assert exc.cause is cause
    assert exc.details == {
        "operation": "list_conversations_by_owner",
        "cause": "ConnectionRefusedError",
    }
    assert "list_conversations_by_owner" in exc.message


def test_store_unavailable_exception_without_cause() -> None:
    exc = StoreUnavailableException("find_documents_by_text_match")
    assert exc.details == {"operation": "find_documents_by_text_match"}
    assert exc.cause is None


def test_search_failed_is_store_unavailable() -> None:
    exc = SearchFailedException("find_documents_by_text_match", TimeoutError())
    assert isinstance(exc, StoreUnavailableException)
    assert exc.error_code == "SEARCH_FAILED"
    assert exc.message == "Search failed"
    assert exc.details["cause"] == "TimeoutError"


@pytest.mark.parametrize(
    "exc",
    [
        ValidationException("x"),
        AuthenticationException(),
        StoreUnavailableException("op"),
        SearchFailedException("op"),
    ],
)
def test_all_inherit_from_base(exc) -> None:
    assert isinstance(exc, ChatSearchException)
