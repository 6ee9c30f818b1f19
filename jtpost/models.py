"""Core data types: statuses, platforms, posts, filters and the interfaces around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class PostStatus(str, Enum):
    """Stage of a post in its life cycle."""

    IDEA = "idea"
    DRAFT = "draft"
    READY = "ready"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"

    def __str__(self) -> str:
        return self.value


class Platform(str, Enum):
    """Target platform for publishing."""

    TELEGRAM = "telegram"

    def __str__(self) -> str:
        return self.value


# Every status in life-cycle order.
STATUS_ORDER: tuple[PostStatus, ...] = tuple(PostStatus)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _unix_nanos(t: datetime) -> int:
    if t.tzinfo is None:
        t = t.astimezone()
    delta = t - _EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1000


def generate_post_id(slug: str, t: datetime) -> str:
    """Build a post id from the Unix time in nanoseconds and the slug."""
    return f"{_unix_nanos(t)}-{slug}"


def _format_time(t: datetime) -> str:
    text = t.isoformat()
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


@dataclass
class ExternalLinks:
    """Links to the published copies of a post."""

    telegram_url: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"telegram_url": self.telegram_url} if self.telegram_url else {}


@dataclass
class Post:
    """A post and its metadata."""

    id: str = ""
    title: str = ""
    slug: str = ""
    status: PostStatus | str = PostStatus.IDEA
    platforms: list[Platform | str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    deadline: datetime | None = None
    scheduled_at: datetime | None = None
    published_at: datetime | None = None
    content: str = ""
    external: ExternalLinks = field(default_factory=ExternalLinks)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; empty optional fields are left out."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "status": str(self.status),
        }
        if self.platforms:
            data["platforms"] = [str(p) for p in self.platforms]
        if self.tags:
            data["tags"] = list(self.tags)
        for key, value in (
            ("deadline", self.deadline),
            ("scheduled_at", self.scheduled_at),
            ("published_at", self.published_at),
        ):
            if value is not None:
                data[key] = _format_time(value)
        data["content"] = self.content
        data["external"] = self.external.to_dict()
        return data


@dataclass
class PostFilter:
    """Criteria for selecting posts; empty criteria match everything."""

    statuses: list[PostStatus | str] = field(default_factory=list)
    platforms: list[Platform | str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    search: str = ""


@runtime_checkable
class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time."""


class SystemClock:
    """Clock backed by the system time."""

    def now(self) -> datetime:
        """Return the current local time, timezone-aware."""
        return datetime.now().astimezone()


@runtime_checkable
class Publisher(Protocol):
    """Publishes a post to one platform."""

    def platform(self) -> Platform:
        """Return the platform this publisher serves."""

    def publish(self, post: Post) -> Post:
        """Publish the post and return it updated with its external links."""


@runtime_checkable
class PostRepository(Protocol):
    """Storage for posts."""

    def get_by_id(self, post_id: str) -> Post:
        """Return the post with this id or raise NotFoundError."""

    def get_by_slug(self, slug: str) -> Post:
        """Return the post with this slug or raise NotFoundError."""

    def list(self, post_filter: PostFilter) -> list[Post]:
        """Return the posts that match the filter."""

    def create(self, post: Post) -> None:
        """Store a new post."""

    def update(self, post: Post) -> None:
        """Replace an existing post."""

    def delete(self, post_id: str) -> None:
        """Remove a post."""