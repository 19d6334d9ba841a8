"""Seed data for a fresh database.

Registers the default app catalogue and a few sample conversations.
Running the seed again leaves existing rows untouched.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from admin_backend.db.models import App, ChatConversation, ChatMessage
from admin_backend.services.chat_service import CURRENT_USER_SENDER

logger = logging.getLogger(__name__)

DEFAULT_APPS: list[tuple[str, str]] = [
    ("Telegram", "Connect with Telegram for real-time communication."),
    ("Notion", "Effortlessly sync Notion pages for seamless collaboration."),
    ("Figma", "View and collaborate on Figma designs in one place."),
    ("Trello", "Sync Trello cards for streamlined project management."),
    ("Slack", "Integrate Slack for efficient team communication."),
    ("Zoom", "Host Zoom meetings directly from the dashboard."),
    ("Stripe", "Easily manage Stripe transactions and payments."),
    ("Gmail", "Access and manage Gmail messages effortlessly."),
    ("Medium", "Explore and share Medium stories on your dashboard."),
    ("Skype", "Connect with Skype contacts seamlessly."),
    ("Docker", "Effortlessly manage Docker containers on your dashboard."),
    ("GitHub", "Streamline code management with GitHub integration."),
    ("GitLab", "Efficiently manage code projects with GitLab integration."),
    ("Discord", "Connect with Discord for seamless team communication."),
    ("WhatsApp", "Easily integrate WhatsApp for direct messaging."),
]

# Apps connected out of the box.
CONNECTED_BY_DEFAULT = frozenset({"Telegram", "Notion", "Slack", "Stripe", "GitHub"})

SAMPLE_CHATS: list[dict] = [
    {
        "id": "conv1",
        "username": "alex_dev",
        "full_name": "Alex John",
        "title": "Senior Backend Dev",
        "profile": "/avatars/01.png",
        "messages": [
            ("alex_dev", "Did the deploy go through?"),
            (CURRENT_USER_SENDER, "Yes, all green."),
        ],
    },
    {
        "id": "conv2",
        "username": "taylor.grande",
        "full_name": "Taylor Grande",
        "title": "Tech Lead",
        "profile": "/avatars/02.png",
        "messages": [
            ("taylor.grande", "Can we review the roadmap tomorrow?"),
        ],
    },
    {
        "id": "conv3",
        "username": "john_doe",
        "full_name": "John Doe",
        "title": "QA",
        "profile": "",
        "messages": [],
    },
]


@dataclass
class SeedResult:
    """Rows inserted by a seed run."""

    apps: int = 0
    chats: int = 0


def generate_app_id(name: str) -> str:
    """Derive an app id from its name: lowercase, spaces as hyphens."""
    return name.replace(" ", "-").lower()


def seed_apps(db: Session) -> int:
    """Insert default apps that are missing.

    Returns:
        Number of apps inserted.
    """
    inserted = 0
    for name, desc in DEFAULT_APPS:
        app_id = generate_app_id(name)
        if db.get(App, app_id) is not None:
            continue
        db.add(
            App(
                id=app_id,
                name=name,
                desc=desc,
                connected=name in CONNECTED_BY_DEFAULT,
            )
        )
        inserted += 1
    db.commit()
    return inserted


def seed_chats(db: Session) -> int:
    """Insert sample conversations that are missing.

    Returns:
        Number of conversations inserted.
    """
    inserted = 0
    for chat in SAMPLE_CHATS:
        if db.get(ChatConversation, chat["id"]) is not None:
            continue
        conversation = ChatConversation(
            id=chat["id"],
            username=chat["username"],
            full_name=chat["full_name"],
            title=chat["title"],
            profile=chat["profile"],
        )
        conversation.messages = [
            ChatMessage(sender=sender, message=text)
            for sender, text in chat["messages"]
        ]
        db.add(conversation)
        inserted += 1
    db.commit()
    return inserted


def seed_all(db: Session) -> SeedResult:
    """Seed apps and chats."""
    result = SeedResult(apps=seed_apps(db), chats=seed_chats(db))
    logger.info("Seeded %d apps and %d chats", result.apps, result.chats)
    return result
