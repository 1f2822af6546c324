"""Linkding REST API client.

Authentication uses the per-user API token from Linkding's settings page,
sent as ``Authorization: Token <token>``. Every endpoint lives under
``<instance>/api/``.

Failures are raised as subclasses of ``LinkdingError``:
    NetworkError       - the instance could not be reached
    ServiceError       - non-2xx status (carries status code and body)
    MalformedResponse  - 2xx status with a body we could not parse
"""

import json
import logging
from typing import Any

import httpx

from .errors import LinkdingError, MalformedResponse, NetworkError, ServiceError
from .models import Bookmark, BookmarkPage, CheckResult, TagPage

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# Fields accepted by POST /api/bookmarks/ and PATCH /api/bookmarks/<id>/
BOOKMARK_FIELDS = (
    "url",
    "title",
    "description",
    "notes",
    "is_archived",
    "unread",
    "shared",
    "tag_names",
)


class LinkdingClient:
    """Client for a single Linkding instance."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{self.base_url}/api",
            headers={
                "Authorization": f"Token {api_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout,
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        payload: dict | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None if empty)."""
        logger.debug("%s %s params=%s", method, endpoint, params)
        try:
            response = self._client.request(
                method,
                endpoint,
                params=params,
                content=json.dumps(payload) if payload is not None else None,
            )
        except httpx.TransportError as e:
            raise NetworkError(f"Could not reach Linkding at {self.base_url}: {e}") from e

        if not response.is_success:
            raise ServiceError(
                response.status_code, response.reason_phrase, response.text
            )

        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponse(
                f"Invalid JSON from {method} {endpoint}: {e}"
            ) from e

    @staticmethod
    def _decode(factory, data: Any):
        """Build a model from a response body, normalising parse failures."""
        if data is None:
            raise MalformedResponse("Expected a JSON body but got an empty response")
        try:
            return factory(data)
        except LinkdingError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Unexpected response shape: {e}") from e

    @staticmethod
    def _bookmark_payload(fields: dict) -> dict:
        unknown = set(fields) - set(BOOKMARK_FIELDS)
        if unknown:
            raise TypeError(f"Unknown bookmark fields: {', '.join(sorted(unknown))}")
        return {k: v for k, v in fields.items() if v is not None}

    @staticmethod
    def _page_params(**params) -> dict:
        # Linkding treats limit=0 / empty q like the parameter is absent
        return {k: v for k, v in params.items() if v}

    # ── Bookmarks ───────────────────────────────────────────────

    def check_bookmark(self, url: str) -> CheckResult:
        """Look up a URL; also returns scraped metadata and auto tags."""
        data = self._request("GET", "/bookmarks/check/", params={"url": url})
        return self._decode(CheckResult.from_dict, data)

    def create_bookmark(
        self,
        url: str,
        title: str | None = None,
        description: str | None = None,
        notes: str | None = None,
        is_archived: bool | None = None,
        unread: bool | None = None,
        shared: bool | None = None,
        tag_names: list[str] | None = None,
    ) -> Bookmark:
        payload = self._bookmark_payload(
            {
                "url": url,
                "title": title,
                "description": description,
                "notes": notes,
                "is_archived": is_archived,
                "unread": unread,
                "shared": shared,
                "tag_names": tag_names,
            }
        )
        logger.info("Creating bookmark for %s", url)
        data = self._request("POST", "/bookmarks/", payload=payload)
        return self._decode(Bookmark.from_dict, data)

    def get_bookmark(self, bookmark_id: int) -> Bookmark:
        data = self._request("GET", f"/bookmarks/{bookmark_id}/")
        return self._decode(Bookmark.from_dict, data)

    def update_bookmark(self, bookmark_id: int, **fields) -> Bookmark:
        """Partially update a bookmark; only the given fields are sent."""
        payload = self._bookmark_payload(fields)
        logger.info("Updating bookmark %d (%s)", bookmark_id, ", ".join(sorted(payload)))
        data = self._request("PATCH", f"/bookmarks/{bookmark_id}/", payload=payload)
        return self._decode(Bookmark.from_dict, data)

    def delete_bookmark(self, bookmark_id: int) -> None:
        logger.info("Deleting bookmark %d", bookmark_id)
        self._request("DELETE", f"/bookmarks/{bookmark_id}/")

    def archive_bookmark(self, bookmark_id: int) -> None:
        self._request("POST", f"/bookmarks/{bookmark_id}/archive/")

    def unarchive_bookmark(self, bookmark_id: int) -> None:
        self._request("POST", f"/bookmarks/{bookmark_id}/unarchive/")

    def list_bookmarks(
        self,
        q: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> BookmarkPage:
        params = self._page_params(q=q, limit=limit, offset=offset)
        data = self._request("GET", "/bookmarks/", params=params)
        return self._decode(BookmarkPage.from_dict, data)

    # ── Tags ────────────────────────────────────────────────────

    def list_tags(
        self, limit: int | None = None, offset: int | None = None
    ) -> TagPage:
        params = self._page_params(limit=limit, offset=offset)
        data = self._request("GET", "/tags/", params=params)
        return self._decode(TagPage.from_dict, data)

    # ── Misc ────────────────────────────────────────────────────

    def test_connection(self) -> bool:
        """Return True if the instance answers an authenticated request."""
        try:
            self.list_bookmarks(limit=1)
        except LinkdingError as e:
            logger.warning("Connection test against %s failed: %s", self.base_url, e)
            return False
        return True

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
