"""Application layer: DTOs, interfaces, use cases.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (repositories).
"""

from chatsearch.application.interfaces import IChatSearchRepository
from chatsearch.application.use_cases import HybridSearchService

__all__ = ["HybridSearchService", "IChatSearchRepository"]
