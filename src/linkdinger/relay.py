"""Turn inbound chat messages and commands into Linkding calls and replies.

The relay knows nothing about how messages arrive. A transport (the CLI,
or a chat bot) hands it raw text and sends back whatever strings it
returns, in order.
"""

import logging
from collections.abc import Iterable

from .client import LinkdingClient
from .errors import LinkdingError
from .extractor import extract
from .replies import (
    HELP_TEXT,
    NO_URLS_TEXT,
    NOT_ALLOWED_TEXT,
    SEARCH_USAGE_TEXT,
    WELCOME_TEXT,
    render_recent,
    render_search_results,
    render_status,
    render_sync_result,
    render_tags,
)
from .sync import sync_message

logger = logging.getLogger(__name__)


class Relay:
    def __init__(
        self,
        client: LinkdingClient,
        allowed_users: Iterable[int] = (),
    ):
        self.client = client
        self.allowed_users = frozenset(allowed_users)

    def is_user_allowed(self, user_id: int | None) -> bool:
        """An empty allow-list lets everyone in.

        With a non-empty list, a message without a user id is refused.
        """
        if not self.allowed_users:
            return True
        return user_id in self.allowed_users

    def handle_text(self, text: str, user_id: int | None = None) -> list[str]:
        """Save every URL in ``text``; one reply per URL."""
        if not self.is_user_allowed(user_id):
            logger.warning("Rejected message from unauthorized user %s", user_id)
            return [NOT_ALLOWED_TEXT]

        message = extract(text)
        if not message.urls:
            return [NO_URLS_TEXT]

        logger.info(
            "Processing %d URL(s) with tags=%s note=%s",
            len(message.urls),
            message.tags,
            bool(message.note),
        )
        return [render_sync_result(r) for r in sync_message(self.client, message)]

    # ── Commands ────────────────────────────────────────────────

    def start(self) -> str:
        return WELCOME_TEXT

    def help(self) -> str:
        return HELP_TEXT

    def recent(self, limit: int = 5) -> str:
        try:
            page = self.client.list_bookmarks(limit=limit)
        except LinkdingError as e:
            logger.warning("Fetching recent bookmarks failed: %s", e)
            return f"❌ Error fetching bookmarks: {e}"
        return render_recent(page.results)

    def search(self, query: str, limit: int = 10) -> str:
        query = query.strip()
        if not query:
            return SEARCH_USAGE_TEXT
        try:
            page = self.client.list_bookmarks(q=query, limit=limit)
        except LinkdingError as e:
            logger.warning("Search for %r failed: %s", query, e)
            return f"❌ Error searching bookmarks: {e}"
        return render_search_results(query, page.results)

    def tags(self, limit: int = 50) -> str:
        try:
            page = self.client.list_tags(limit=limit)
        except LinkdingError as e:
            logger.warning("Fetching tags failed: %s", e)
            return f"❌ Error fetching tags: {e}"
        return render_tags(page.results)

    def status(self) -> str:
        return render_status(self.client.test_connection(), self.client.base_url)
