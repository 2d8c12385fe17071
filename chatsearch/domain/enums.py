"""Domain enumerations for chat search.

Enums represent fixed sets of domain values (match provenance, chat
visibility, document kind).
"""

from enum import Enum


class MatchType(str, Enum):
    """Why a chat was returned by a search.

    Ephemeral classification attached to a search hit; never persisted.
    """

    TITLE = "title"
    MESSAGE = "message"
    BOTH = "both"
    DOCUMENT = "document"

    @classmethod
    def from_flags(cls, title_matched: bool, message_matched: bool) -> "MatchType":
        """Classify a title/message pass row.

        Args:
            title_matched: Chat title satisfied the text predicate.
            message_matched: At least one message of the chat satisfied it.

        Returns:
            BOTH, TITLE or MESSAGE.

        Raises:
            ValueError: If neither side matched (row should not exist).
        """
        if title_matched and message_matched:
            return cls.BOTH
        if title_matched:
            return cls.TITLE
        if message_matched:
            return cls.MESSAGE
        raise ValueError("Row matched neither title nor message")


class ChatVisibility(str, Enum):
    """Chat visibility flag."""

    PRIVATE = "private"
    PUBLIC = "public"


class DocumentKind(str, Enum):
    """Kind of document produced during a chat."""

    TEXT = "text"
    CODE = "code"
    IMAGE = "image"
    SHEET = "sheet"
