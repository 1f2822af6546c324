"""Pull URLs, hashtags and a free-text note out of a chat message.

    "https://example.com Great article #programming"
        urls = ["https://example.com"]
        tags = ["programming"]
        note = "Great article"

Hashtags are matched against the whole message, so a URL fragment such
as ``https://example.com/#intro`` also yields the tag ``intro``.
"""

import re

from .models import ExtractedMessage

# Scheme up to the first whitespace or character that can't appear unescaped in a URL
URL_PATTERN = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+", re.IGNORECASE)

HASHTAG_PATTERN = re.compile(r"#(\w+)")


def extract_urls(text: str) -> list[str]:
    return URL_PATTERN.findall(text)


def extract_hashtags(text: str) -> list[str]:
    return HASHTAG_PATTERN.findall(text)


def extract_note(text: str, urls: list[str]) -> str | None:
    """Whatever is left once URLs and hashtags are removed, or None."""
    note = text
    for url in urls:
        note = note.replace(url, "", 1)
    note = HASHTAG_PATTERN.sub("", note).strip()
    return note or None


def extract(text: str) -> ExtractedMessage:
    urls = extract_urls(text)
    return ExtractedMessage(
        urls=urls,
        tags=extract_hashtags(text),
        note=extract_note(text, urls),
    )
