"""Seed a user with sample chats, messages and documents into Postgres.

Gives search something to find locally: one chat matched by title, one by
message, one by both, and one only through a referenced document.

Usage:
    python -m scripts.seed_dev_data [email]

Default email: dev@chatsearch.local. Prints the user id; pass it to
scripts.create_access_token. Requires DATABASE_URL and: alembic upgrade head
"""

from __future__ import annotations

import asyncio
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select

from chatsearch.domain.enums import DocumentKind
from chatsearch.infrastructure.persistence import database
from chatsearch.infrastructure.persistence.models import Chat, Document, Message, User
from chatsearch.shared.utils import generate_cuid, utc_now

DEFAULT_EMAIL = "dev@chatsearch.local"


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(email: str) -> None:
    _load_env()
    session_factory = database.get_session_factory()
    now = utc_now()
    doc_id = generate_cuid()

    async with session_factory() as session:
        async with session.begin():
            user = (
                await session.execute(select(User).where(User.email == email))
            ).scalar_one_or_none()
            if user is None:
                user = User(email=email)
                session.add(user)
                await session.flush()
            print(f"User {email} -> {user.id}")

            chats = [
                Chat(user_id=user.id, title="Trip planning for Lisbon", created_at=now - timedelta(days=3)),
                Chat(user_id=user.id, title="Weekly notes", created_at=now - timedelta(days=2)),
                Chat(user_id=user.id, title="Budget review", created_at=now - timedelta(days=1)),
                Chat(user_id=user.id, title="Draft help", created_at=now),
            ]
            session.add_all(chats)
            await session.flush()
            lisbon, notes, budget, draft = chats

            session.add_all(
                [
                    Message(chat_id=lisbon.id, role="user", content="Best pastries in Lisbon?"),
                    Message(chat_id=notes.id, role="user", content="Remind me to book Lisbon flights"),
                    Message(chat_id=budget.id, role="user", content="Summarize the quarterly budget"),
                    Message(
                        chat_id=draft.id,
                        role="assistant",
                        content=[
                            {"type": "text", "text": "Here is your document."},
                            {"type": "tool-result", "result": {"id": doc_id, "kind": "text"}},
                        ],
                    ),
                ]
            )
            session.add(
                Document(
                    id=doc_id,
                    user_id=user.id,
                    title="Itinerary",
                    content="Day one: Alfama walk and a tram ride to Belem, Lisbon.",
                    kind=DocumentKind.TEXT.value,
                )
            )
            for chat in chats:
                print(f"  Chat {chat.title!r} -> {chat.id}")
            print(f"  Document 'Itinerary' -> {doc_id} (referenced by {draft.id})")

    await database.dispose_engine()
    print("Try: GET /api/v1/search?q=lisbon")


def main() -> None:
    email = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_EMAIL
    asyncio.run(run(email))


if __name__ == "__main__":
    main()
