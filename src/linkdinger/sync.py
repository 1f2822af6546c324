"""Create-or-update a Linkding bookmark for each URL in a message.

For one URL:
    1. Ask Linkding whether the URL is already bookmarked.
    2. Known URL + new tags or a note  -> PATCH tags (union) and notes.
       Known URL + nothing new         -> leave it alone.
    3. Unknown URL                     -> POST a new bookmark, falling back
                                          to Linkding's auto tags when the
                                          message carried none.

Client errors never escape: they become a ``Failed`` result so the
remaining URLs of a message still get processed.
"""

import logging

from .client import LinkdingClient
from .errors import LinkdingError
from .models import (
    Created,
    ExtractedMessage,
    Failed,
    SyncResult,
    Unchanged,
    Updated,
)

logger = logging.getLogger(__name__)


def merge_tags(existing: list[str], new: list[str]) -> list[str]:
    """Union of both tag lists, existing order first, case-sensitive."""
    return list(dict.fromkeys([*existing, *new]))


def sync_bookmark(
    client: LinkdingClient,
    url: str,
    tags: list[str],
    note: str | None = None,
) -> SyncResult:
    try:
        check = client.check_bookmark(url)

        existing = check.bookmark
        if existing is not None:
            if not tags and not note:
                logger.info("%s already bookmarked (id %d), nothing to change", url, existing.id)
                return Unchanged(url=url, bookmark=existing)

            merged = merge_tags(existing.tag_names, tags)
            bookmark = client.update_bookmark(
                existing.id,
                tag_names=merged,
                notes=note or existing.notes,
            )
            return Updated(url=url, bookmark=bookmark, merged_tags=merged)

        bookmark = client.create_bookmark(
            url,
            tag_names=tags or check.auto_tags,
            notes=note or None,
        )
        return Created(url=url, bookmark=bookmark)

    except LinkdingError as e:
        logger.warning("Failed to save %s: %s", url, e)
        return Failed(url=url, reason=str(e))


def sync_message(client: LinkdingClient, message: ExtractedMessage) -> list[SyncResult]:
    """Sync every URL of a message in order, one round trip at a time."""
    return [
        sync_bookmark(client, url, message.tags, message.note)
        for url in message.urls
    ]
