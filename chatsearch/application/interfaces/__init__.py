"""Application interfaces (ports) implemented by infrastructure."""

from chatsearch.application.interfaces.repositories import IChatSearchRepository

__all__ = ["IChatSearchRepository"]
