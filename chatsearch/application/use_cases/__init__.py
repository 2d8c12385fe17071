"""Application use cases."""

from chatsearch.application.use_cases.search import HybridSearchService

__all__ = ["HybridSearchService"]
