"""Render reply messages in Telegram's legacy Markdown flavour.

Titles coming from Linkding are escaped; URLs inside ``(...)`` link
targets are left as-is so they stay clickable.
"""

import re

from .models import Bookmark, Created, Failed, SyncResult, Tag, Unchanged, Updated

MARKDOWN_SPECIAL = re.compile(r"([_*\[\]()~`>#+\-=|{}.!])")

WELCOME_TEXT = """
🔖 *Welcome to Linkdinger!*

I help you save links to your Linkding instance.

*How to use:*
• Send me any URL to save it as a bookmark
• Add tags by including #hashtags in your message
• Add notes by including text after the URL

*Commands:*
/start - Show this welcome message
/help - Show detailed help
/recent - Show your 5 most recent bookmarks
/search <query> - Search your bookmarks
/tags - List your tags
/status - Check connection status

*Examples:*
`https://example.com`
`https://example.com #tech #reading`
`https://example.com Great article about Python #programming`
""".strip()

HELP_TEXT = """
📚 *Linkdinger Help*

*Saving Links:*
Simply send me a URL and I'll save it to Linkding. The title and description will be automatically fetched from the webpage.

*Adding Tags:*
Include hashtags in your message to add tags:
`https://example.com #tech #tutorial`

*Adding Notes:*
Any text that isn't a URL or hashtag becomes the note:
`https://example.com This is a great resource #learning`

*Commands:*
• /recent - Show 5 most recent bookmarks
• /search <query> - Search bookmarks
• /tags - List all your tags
• /status - Check Linkding connection

*Tips:*
• You can send multiple URLs in one message
• Existing URLs will be updated instead of duplicated
""".strip()

NOT_ALLOWED_TEXT = "⛔ Sorry, you are not authorized to use this bot."
NO_URLS_TEXT = "🤔 I couldn't find any URLs in your message. Send me a link to save it!"
SEARCH_USAGE_TEXT = "Please provide a search query: `/search <query>`"


def escape_markdown(text: str) -> str:
    return MARKDOWN_SPECIAL.sub(r"\\\1", text)


def format_tags(tags: list[str]) -> str:
    """``#a #b``, or ``none`` for an empty list."""
    return " ".join(f"#{t}" for t in tags) or "none"


def _link(title: str, url: str) -> str:
    return f"[{escape_markdown(title or url)}]({url})"


def render_sync_result(result: SyncResult) -> str:
    if isinstance(result, Created):
        return (
            f"✅ *Saved!*\n\n{_link(result.bookmark.title, result.url)}"
            f"\n\nTags: {format_tags(result.bookmark.tag_names)}"
        )
    if isinstance(result, Updated):
        return (
            f"🔄 *Updated existing bookmark:*\n\n{_link(result.bookmark.title, result.url)}"
            f"\n\nTags: {format_tags(result.merged_tags)}"
        )
    if isinstance(result, Unchanged):
        return (
            f"ℹ️ *Already bookmarked:*\n\n{_link(result.bookmark.title, result.url)}"
            f"\n\nTags: {format_tags(result.bookmark.tag_names)}"
        )
    if isinstance(result, Failed):
        return f"❌ Failed to save {result.url}\n\nError: {result.reason}"
    raise TypeError(f"Unknown sync result: {result!r}")


def _render_bookmark_line(bookmark: Bookmark) -> str:
    line = f"• {_link(bookmark.title, bookmark.url)}"
    if bookmark.tag_names:
        line += " " + " ".join(f"#{t}" for t in bookmark.tag_names)
    return line


def render_recent(bookmarks: list[Bookmark]) -> str:
    if not bookmarks:
        return "📭 No bookmarks found."
    lines = ["📚 *Recent Bookmarks:*", ""]
    lines.extend(_render_bookmark_line(b) for b in bookmarks)
    return "\n".join(lines)


def render_search_results(query: str, bookmarks: list[Bookmark]) -> str:
    if not bookmarks:
        return f'🔍 No bookmarks found for "{query}"'
    lines = [f'🔍 *Search results for "{escape_markdown(query)}":*', ""]
    lines.extend(_render_bookmark_line(b) for b in bookmarks)
    return "\n".join(lines)


def render_tags(tags: list[Tag]) -> str:
    if not tags:
        return "🏷️ No tags found."
    return "🏷️ *Your Tags:*\n\n" + "  ".join(f"#{t.name}" for t in tags)


def render_status(connected: bool, instance_url: str) -> str:
    if connected:
        return f"✅ *Connected to Linkding*\n\nInstance: `{instance_url}`"
    return "❌ Failed to connect to Linkding. Check your configuration."
