"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, not on infrastructure directly.
"""

from chatsearch.api.v1.dependencies.auth import (
    get_current_user_id,
    get_current_user_id_optional,
)
from chatsearch.api.v1.dependencies.search import (
    get_chat_search_repo,
    get_search_service,
)

__all__ = [
    "get_chat_search_repo",
    "get_current_user_id",
    "get_current_user_id_optional",
    "get_search_service",
]
