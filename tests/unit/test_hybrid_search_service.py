"""HybridSearchService unit tests against the in-memory chat store."""

import asyncio

import pytest

from chatsearch.application.use_cases.search import HybridSearchService
from chatsearch.domain.enums import MatchType
from chatsearch.domain.exceptions import (
    SearchFailedException,
    StoreUnavailableException,
    ValidationException,
)
from tests.unit.fakes import BASE_TIME, FakeChatStore

TITLE_MESSAGE = "find_conversations_by_title_or_message_match"
DOCUMENTS = "find_documents_by_text_match"
REFERENCING = "find_conversations_referencing_documents"
LISTING = "list_conversations_by_owner"


@pytest.fixture
def store() -> FakeChatStore:
    return FakeChatStore()


@pytest.fixture(params=[True, False], ids=["concurrent", "sequential"])
def service(request, store: FakeChatStore) -> HybridSearchService:
    return HybridSearchService(store, concurrent_passes=request.param)


def _by_id(hits) -> dict:
    return {h.chat.id: h.match_type for h in hits}


async def test_title_only_match_is_annotated_title(store, service) -> None:
    store.add_chat("c1", "Budget Review", messages=["let's talk about travel"])

    hits = await service.search("user-1", "budget")

    assert _by_id(hits) == {"c1": MatchType.TITLE}


async def test_message_only_match_is_annotated_message(store, service) -> None:
    store.add_chat("c2", "Notes", messages=["quarterly budget numbers"])

    hits = await service.search("user-1", "budget")

    assert _by_id(hits) == {"c2": MatchType.MESSAGE}


async def test_title_and_message_match_is_annotated_both(store, service) -> None:
    store.add_chat("c3", "Budget Notes", messages=["budget plan"])

    hits = await service.search("user-1", "budget")

    assert _by_id(hits) == {"c3": MatchType.BOTH}


async def test_chat_referencing_matching_document_is_annotated_document(store, service) -> None:
    store.add_document("d0c1a2b3", "Expense Report", "Travel and meals")
    store.add_chat(
        "c4",
        "Drafting help",
        messages=[
            "write me a report",
            [{"type": "tool-result", "result": {"id": "d0c1a2b3", "kind": "text"}}],
        ],
    )

    hits = await service.search("user-1", "expense")

    assert _by_id(hits) == {"c4": MatchType.DOCUMENT}


async def test_other_owners_chats_are_excluded(store, service) -> None:
    store.add_chat("mine", "Holiday plans")
    store.add_chat("theirs", "Budget Review", user_id="user-2", messages=["budget"])

    hits = await service.search("user-1", "budget")

    assert hits == []


async def test_other_owners_documents_do_not_surface_chats(store, service) -> None:
    """A chat embedding another owner's document id is not found via that document."""
    store.add_document("doc-foreign", "Expense Report", user_id="user-2")
    store.add_chat("c1", "Misc", messages=["see doc-foreign"])

    hits = await service.search("user-1", "expense")

    assert hits == []


async def test_document_path_never_overrides_title_message_annotation(store, service) -> None:
    store.add_document("doc-1", "Budget spreadsheet")
    store.add_chat("c1", "Budget Review", messages=["attached doc-1"])
    store.add_chat("c2", "Chat about sheets", hours=1, messages=["attached doc-1"])

    hits = await service.search("user-1", "budget")

    assert _by_id(hits) == {"c1": MatchType.TITLE, "c2": MatchType.DOCUMENT}
    assert [h.chat.id for h in hits].count("c1") == 1


async def test_each_chat_appears_at_most_once(store, service) -> None:
    store.add_document("doc-a", "Budget A")
    store.add_document("doc-b", "Budget B")
    store.add_chat("c1", "Budget", messages=["budget", "doc-a", "doc-b"])
    store.add_chat("c2", "Other", hours=1, messages=["doc-a and doc-b"])

    hits = await service.search("user-1", "budget")

    ids = [h.chat.id for h in hits]
    assert sorted(ids) == ["c1", "c2"]
    assert len(ids) == len(set(ids))


async def test_results_are_newest_first_across_passes(store, service) -> None:
    store.add_document("doc-1", "Budget memo")
    store.add_chat("old-title", "Budget 2023", hours=0)
    store.add_chat("mid-doc", "Untitled", hours=5, messages=["doc-1"])
    store.add_chat("new-message", "Notes", hours=10, messages=["budget again"])
    store.add_chat("older-doc", "Untitled", hours=-3, messages=["doc-1"])

    hits = await service.search("user-1", "budget")

    assert [h.chat.id for h in hits] == ["new-message", "mid-doc", "old-title", "older-doc"]
    for a, b in zip(hits, hits[1:]):
        assert a.chat.created_at >= b.chat.created_at


async def test_ties_keep_store_order(store, service) -> None:
    store.add_chat("first", "Budget A", created_at=BASE_TIME)
    store.add_chat("second", "Budget B", created_at=BASE_TIME)

    hits = await service.search("user-1", "budget")

    assert [h.chat.id for h in hits] == ["first", "second"]


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
async def test_blank_query_lists_all_chats_without_annotation(store, service, query) -> None:
    store.add_chat("a", "Alpha", hours=1)
    store.add_chat("b", "Beta", hours=3)
    store.add_chat("c", "Gamma", hours=2)
    store.add_chat("x", "Other owner", user_id="user-2")

    hits = await service.search("user-1", query)

    assert [h.chat.id for h in hits] == ["b", "c", "a"]
    assert all(h.match_type is None for h in hits)
    assert store.calls == [LISTING]


async def test_query_is_stripped_before_matching(store, service) -> None:
    store.add_chat("c1", "Budget Review")

    hits = await service.search("user-1", "  budget  ")

    assert _by_id(hits) == {"c1": MatchType.TITLE}


async def test_reference_pass_skipped_when_no_document_matches(store, service) -> None:
    store.add_chat("c1", "Budget Review")

    await service.search("user-1", "budget")

    assert sorted(store.calls) == sorted([TITLE_MESSAGE, DOCUMENTS])


async def test_reference_pass_runs_when_documents_match(store, service) -> None:
    store.add_document("doc-1", "Budget")

    hits = await service.search("user-1", "budget")

    assert hits == []
    assert store.calls[-1] == REFERENCING
    assert len(store.calls) == 3


async def test_no_match_returns_empty_list(store, service) -> None:
    store.add_chat("c1", "Holiday")

    assert await service.search("user-1", "budget") == []


@pytest.mark.parametrize("operation", [TITLE_MESSAGE, DOCUMENTS, REFERENCING])
async def test_failure_in_any_pass_raises_search_failed(store, service, operation) -> None:
    store.add_document("doc-1", "Budget")
    store.add_chat("c1", "Budget Review", messages=["doc-1"])
    store.fail_on = {operation}

    with pytest.raises(SearchFailedException) as exc_info:
        await service.search("user-1", "budget")

    exc = exc_info.value
    assert exc.error_code == "SEARCH_FAILED"
    assert exc.details["operation"] == operation
    assert exc.details["cause"] == "ConnectionResetError"
    assert isinstance(exc.__cause__, ConnectionResetError)
    assert exc.cause is exc.__cause__
    assert isinstance(exc, StoreUnavailableException)


async def test_listing_failure_raises_search_failed(store, service) -> None:
    store.fail_on = {LISTING}

    with pytest.raises(SearchFailedException) as exc_info:
        await service.search("user-1", "")

    assert exc_info.value.message == "Search failed"
    assert exc_info.value.details["operation"] == LISTING


async def test_history_listing_failure_names_the_history(store, service) -> None:
    store.fail_on = {LISTING}

    with pytest.raises(SearchFailedException) as exc_info:
        await service.list_chats("user-1")

    assert exc_info.value.error_code == "SEARCH_FAILED"
    assert exc_info.value.message == "Chat history listing failed"
    assert isinstance(exc_info.value.__cause__, ConnectionResetError)


@pytest.mark.parametrize("user_id", ["", "   ", None])
async def test_missing_owner_is_rejected_before_store_access(store, service, user_id) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.search(user_id, "budget")

    assert exc_info.value.error_code == "INVALID_INPUT"
    assert exc_info.value.details == {"field": "user_id"}
    assert store.calls == []


async def test_list_chats_rejects_missing_owner(store, service) -> None:
    with pytest.raises(ValidationException):
        await service.list_chats("")
    assert store.calls == []


class _BlockingStore(FakeChatStore):
    """Title/message pass waits forever; document pass fails."""

    title_message_cancelled = False

    async def find_conversations_by_title_or_message_match(self, owner_id, query):
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.title_message_cancelled = True
            raise

    async def find_documents_by_text_match(self, owner_id, query):
        raise StoreUnavailableException(DOCUMENTS, TimeoutError())


async def test_concurrent_pass_failure_cancels_sibling() -> None:
    store = _BlockingStore()
    service = HybridSearchService(store, concurrent_passes=True)

    with pytest.raises(SearchFailedException) as exc_info:
        await asyncio.wait_for(service.search("user-1", "budget"), timeout=5)

    assert exc_info.value.details["operation"] == DOCUMENTS
    assert store.title_message_cancelled is True
