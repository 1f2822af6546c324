"""Data models for Linkding records and relay results."""

from dataclasses import dataclass, field
from datetime import datetime

from .errors import MalformedResponse


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        # Linkding emits "2024-01-01T12:00:00.123456Z"
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _require(data: dict, key: str):
    if not isinstance(data, dict) or key not in data:
        raise MalformedResponse(f"Response missing required field '{key}'")
    return data[key]


def _list_field(
    data: dict, key: str, required: bool = False, item_type: type | None = None
) -> list:
    """A JSON array field; null or absent means empty unless required."""
    value = _require(data, key) if required else data.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        raise MalformedResponse(f"Field '{key}' is not a list: {value!r}")
    if item_type is not None and not all(isinstance(v, item_type) for v in value):
        raise MalformedResponse(f"Field '{key}' has non-{item_type.__name__} items: {value!r}")
    return list(value)


@dataclass
class Bookmark:
    id: int
    url: str
    title: str = ""
    description: str = ""
    notes: str = ""
    web_archive_snapshot_url: str | None = None
    favicon_url: str | None = None
    preview_image_url: str | None = None
    is_archived: bool = False
    unread: bool = False
    shared: bool = False
    tag_names: list[str] = field(default_factory=list)
    date_added: datetime | None = None
    date_modified: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Bookmark":
        return cls(
            id=int(_require(data, "id")),
            url=_require(data, "url"),
            title=data.get("title") or "",
            description=data.get("description") or "",
            notes=data.get("notes") or "",
            web_archive_snapshot_url=data.get("web_archive_snapshot_url"),
            favicon_url=data.get("favicon_url"),
            preview_image_url=data.get("preview_image_url"),
            is_archived=bool(data.get("is_archived", False)),
            unread=bool(data.get("unread", False)),
            shared=bool(data.get("shared", False)),
            tag_names=_list_field(data, "tag_names", item_type=str),
            date_added=_parse_timestamp(data.get("date_added")),
            date_modified=_parse_timestamp(data.get("date_modified")),
        )


@dataclass
class Tag:
    id: int
    name: str
    date_added: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Tag":
        return cls(
            id=int(_require(data, "id")),
            name=_require(data, "name"),
            date_added=_parse_timestamp(data.get("date_added")),
        )


@dataclass
class PageMetadata:
    """Title/description Linkding scraped for a URL."""

    title: str = ""
    description: str = ""


@dataclass
class CheckResult:
    """Result of the URL existence check."""

    bookmark: Bookmark | None
    metadata: PageMetadata = field(default_factory=PageMetadata)
    auto_tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CheckResult":
        if not isinstance(data, dict):
            raise MalformedResponse("Check response is not a JSON object")
        raw_bookmark = data.get("bookmark")
        metadata = data.get("metadata") or {}
        return cls(
            bookmark=Bookmark.from_dict(raw_bookmark) if raw_bookmark else None,
            metadata=PageMetadata(
                title=metadata.get("title") or "",
                description=metadata.get("description") or "",
            ),
            auto_tags=_list_field(data, "auto_tags", item_type=str),
        )


@dataclass
class BookmarkPage:
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[Bookmark] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "BookmarkPage":
        results = _list_field(data, "results", required=True)
        return cls(
            count=int(data.get("count", len(results))),
            next=data.get("next"),
            previous=data.get("previous"),
            results=[Bookmark.from_dict(item) for item in results],
        )


@dataclass
class TagPage:
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[Tag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "TagPage":
        results = _list_field(data, "results", required=True)
        return cls(
            count=int(data.get("count", len(results))),
            next=data.get("next"),
            previous=data.get("previous"),
            results=[Tag.from_dict(item) for item in results],
        )


@dataclass
class ExtractedMessage:
    urls: list[str] = field(default_factory=list)  # order of appearance, dupes kept
    tags: list[str] = field(default_factory=list)  # without the leading '#'
    note: str | None = None  # None when nothing is left after stripping


# ── Sync outcomes ───────────────────────────────────────────────


@dataclass
class Created:
    url: str
    bookmark: Bookmark


@dataclass
class Updated:
    url: str
    bookmark: Bookmark
    merged_tags: list[str] = field(default_factory=list)


@dataclass
class Unchanged:
    url: str
    bookmark: Bookmark


@dataclass
class Failed:
    url: str
    reason: str


SyncResult = Created | Updated | Unchanged | Failed
