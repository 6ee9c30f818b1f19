"""Post management: creation, status changes, statistics, recommendations, publishing."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from jtpost.errors import (
    EmptySlugError,
    EmptyTitleError,
    InvalidStatusError,
    NotFoundError,
    ValidationError,
    is_status_transition_valid,
)
from jtpost.models import (
    Clock,
    ExternalLinks,
    Platform,
    Post,
    PostFilter,
    PostRepository,
    PostStatus,
    Publisher,
    generate_post_id,
)
from jtpost.slug import generate_slug


@dataclass
class CreatePostInput:
    """Data for a new post; the slug is generated from the title when empty."""

    title: str = ""
    platforms: list[Platform | str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    slug: str = ""


@dataclass
class PublishPostInput:
    """Platforms a post is to be published to."""

    platforms: list[Platform | str] = field(default_factory=list)


@dataclass
class PostStats:
    """Post counts in total and by status, platform and tag."""

    total: int = 0
    by_status: dict[PostStatus | str, int] = field(default_factory=dict)
    by_platform: dict[Platform | str, int] = field(default_factory=dict)
    by_tag: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "total": self.total,
            "by_status": {str(k): v for k, v in self.by_status.items()},
            "by_platform": {str(k): v for k, v in self.by_platform.items()},
            "by_tag": dict(self.by_tag),
        }


def _hours(later: datetime, earlier: datetime) -> int:
    return int((later - earlier).total_seconds() / 3600)


def post_priority(post: Post, now: datetime) -> int:
    """Return a numeric priority for a post; lower means more urgent."""
    if post.deadline is not None:
        if post.deadline < now:
            return -1000 + _hours(now, post.deadline)
        return _hours(post.deadline, now)

    if post.scheduled_at is not None:
        if post.scheduled_at < now:
            return -500 + _hours(now, post.scheduled_at)
        return 10000 + _hours(post.scheduled_at, now)

    status_priority = {
        PostStatus.READY: 20000,
        PostStatus.DRAFT: 30000,
        PostStatus.IDEA: 40000,
    }
    return status_priority.get(post.status, 50000)


class PostService:
    """Business operations on posts stored in a repository."""

    def __init__(self, repo: PostRepository, clock: Clock) -> None:
        self._repo = repo
        self._clock = clock

    def create_post(self, data: CreatePostInput) -> Post:
        """Create a post in the idea status and store it."""
        if not data.title:
            raise EmptyTitleError()

        slug = data.slug or generate_slug(data.title)
        post = Post(
            id=generate_post_id(slug, self._clock.now()),
            title=data.title,
            slug=slug,
            status=PostStatus.IDEA,
            platforms=list(data.platforms) or [Platform.TELEGRAM],
            tags=list(data.tags),
            content="",
            external=ExternalLinks(),
        )
        self._repo.create(post)
        return post

    def get_by_id(self, post_id: str) -> Post:
        return self._repo.get_by_id(post_id)

    def get_by_slug(self, slug: str) -> Post:
        return self._repo.get_by_slug(slug)

    def create_post_with_content(self, post: Post) -> None:
        """Store a ready-made post, assigning an id if it has none."""
        if not post.title:
            raise EmptyTitleError()
        if not post.slug:
            raise EmptySlugError()
        if not post.id:
            post.id = generate_post_id(post.slug, self._clock.now())
        self._repo.create(post)

    def list_posts(self, post_filter: PostFilter) -> list[Post]:
        return self._repo.list(post_filter)

    def update_status(self, post_id: str, new_status: PostStatus | str) -> Post:
        """Move a post forward to a new status."""
        post = self._repo.get_by_id(post_id)

        if not is_status_transition_valid(post.status, new_status):
            raise InvalidStatusError(
                f"cannot transition from {post.status} to {new_status}"
            )

        post.status = PostStatus(new_status)
        if post.status is PostStatus.PUBLISHED:
            post.published_at = self._clock.now()

        self._repo.update(post)
        return post

    def update_post(self, post: Post) -> None:
        if not post.title:
            raise EmptyTitleError()
        if not post.slug:
            raise EmptySlugError()
        self._repo.update(post)

    def delete_post(self, post_id: str) -> None:
        self._repo.delete(post_id)

    def get_stats(self) -> PostStats:
        """Count all posts by status, platform and tag."""
        posts = self._repo.list(PostFilter())
        by_status: Counter = Counter(post.status for post in posts)
        by_platform: Counter = Counter(p for post in posts for p in post.platforms)
        by_tag: Counter = Counter(t for post in posts for t in post.tags)
        return PostStats(
            total=len(posts),
            by_status=dict(by_status),
            by_platform=dict(by_platform),
            by_tag=dict(by_tag),
        )

    def get_next_post(self) -> Post | None:
        """Recommend the most urgent post that is neither published nor scheduled."""
        posts = self._repo.list(PostFilter())
        candidates = [
            post
            for post in posts
            if post.status not in (PostStatus.PUBLISHED, PostStatus.SCHEDULED)
        ]
        if not candidates:
            return None
        now = self._clock.now()
        return min(candidates, key=lambda post: post_priority(post, now))

    def publish_post(
        self,
        post_id: str,
        data: PublishPostInput,
        publishers: Mapping[Platform | str, Publisher],
    ) -> Post:
        """Publish a post to every requested platform and mark it published."""
        post = self._repo.get_by_id(post_id)

        if post.status == PostStatus.PUBLISHED:
            raise InvalidStatusError("post is already published")
        if not post.content:
            raise ValidationError("post content is empty")

        for platform in data.platforms:
            publisher = publishers.get(platform)
            if publisher is None:
                raise NotFoundError(f"no publisher for platform {platform}")
            post = publisher.publish(post)

        post.status = PostStatus.PUBLISHED
        post.published_at = self._clock.now()
        self._repo.update(post)
        return post