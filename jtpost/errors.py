"""Errors raised across the package and status transition rules."""

from __future__ import annotations

from jtpost.models import STATUS_ORDER, PostStatus


class JtpostError(Exception):
    """Base class for all package errors; an optional detail is appended."""

    message = "jtpost error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class NotFoundError(JtpostError):
    message = "post not found"


class AlreadyExistsError(JtpostError):
    message = "post already exists"


class EmptyTitleError(JtpostError):
    message = "title cannot be empty"


class EmptySlugError(JtpostError):
    message = "slug cannot be empty"


class InvalidStatusError(JtpostError):
    message = "invalid status transition"


class InvalidPlatformError(JtpostError):
    message = "invalid platform"


class ValidationError(JtpostError):
    message = "validation error"


class PublishFailedError(JtpostError):
    message = "failed to publish"


class UnknownPlatformError(JtpostError):
    message = "unknown platform"


class NotReadyToPublishError(JtpostError):
    message = "post is not ready to publish"


class ConfigNotFoundError(JtpostError):
    message = "config file not found"


class ConfigInvalidError(JtpostError):
    message = "config file is invalid"


class PostsDirNotFoundError(JtpostError):
    message = "posts directory not found"


def _position(status: PostStatus | str) -> int | None:
    try:
        return STATUS_ORDER.index(PostStatus(status))
    except ValueError:
        return None


def is_status_transition_valid(from_status: PostStatus | str, to_status: PostStatus | str) -> bool:
    """Return True if a post may move from one status to the other (forward only)."""
    from_idx = _position(from_status)
    to_idx = _position(to_status)
    if from_idx is None or to_idx is None:
        return False
    return to_idx > from_idx