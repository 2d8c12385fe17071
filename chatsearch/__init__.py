"""chatsearch: hybrid full-text search over chats, messages and documents."""
