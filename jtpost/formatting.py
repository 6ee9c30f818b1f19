"""Text and JSON renderings of posts, plans, recommendations and statistics."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from jtpost.models import STATUS_ORDER, Post, PostStatus
from jtpost.service import PostStats

DATE_TYPE_SCHEDULE = "schedule"
DATE_TYPE_DEADLINE = "deadline"

_DATE = "%Y-%m-%d"
_DATE_TIME = "%Y-%m-%d %H:%M"
_DETAILS_LIMIT = 500


@dataclass
class PlannedPost:
    """A post placed in the publishing plan at a given date."""

    post: Post
    date: datetime
    date_type: str = DATE_TYPE_DEADLINE


def truncate_string(s: str, max_len: int) -> str:
    """Shorten a string to max_len characters, ending it with '...' when cut."""
    if max_len <= 3:
        return "..."
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def _tabulate(rows: Sequence[Sequence[str]]) -> str:
    """Align every cell but the last of each row into columns two spaces apart."""
    widths: dict[int, int] = {}
    for row in rows:
        for index, cell in enumerate(row[:-1]):
            widths[index] = max(widths.get(index, 0), len(cell))
    lines = [
        "".join(cell.ljust(widths[index] + 2) for index, cell in enumerate(row[:-1]))
        + row[-1]
        for row in rows
    ]
    return "".join(line + "\n" for line in lines)


def _join(items: Iterable[object]) -> str:
    return ", ".join(str(item) for item in items)


def _bracketed(items: Iterable[object]) -> str:
    return "[" + " ".join(str(item) for item in items) + "]"


def format_post_table(posts: Sequence[Post]) -> str:
    """Render posts as a table followed by their count."""
    if not posts:
        return "Посты не найдены\n"
    rows = [
        ["STATUS", "TITLE", "SLUG", "PLATFORMS", "TAGS"],
        ["------", "-----", "----", "---------", "----"],
    ]
    rows.extend(
        [
            str(post.status),
            truncate_string(post.title, 30),
            post.slug,
            _join(post.platforms),
            _join(post.tags),
        ]
        for post in posts
    )
    return _tabulate(rows) + f"\n📊 Всего постов: {len(posts)}\n"


def sort_by_date(planned: Iterable[PlannedPost]) -> list[PlannedPost]:
    """Return the planned posts ordered from the earliest date."""
    return sorted(planned, key=lambda item: item.date)


def build_plan(
    posts: Iterable[Post], days: int = 30, now: datetime | None = None
) -> list[PlannedPost]:
    """Select unpublished posts whose schedule or deadline falls within `days` of now."""
    if now is None:
        now = datetime.now().astimezone()
    limit = now + timedelta(days=days)

    planned: list[PlannedPost] = []
    for post in posts:
        if post.status == PostStatus.PUBLISHED:
            continue
        if post.scheduled_at is not None:
            date, date_type = post.scheduled_at, DATE_TYPE_SCHEDULE
        elif post.deadline is not None:
            date, date_type = post.deadline, DATE_TYPE_DEADLINE
        else:
            continue
        if date <= limit:
            planned.append(PlannedPost(post=post, date=date, date_type=date_type))
    return sort_by_date(planned)


def format_plan(planned: Sequence[PlannedPost]) -> str:
    """Render the publishing plan as a table followed by its size."""
    if not planned:
        return "📅 Нет запланированных постов\n"
    rows = [
        ["DATE", "TYPE", "STATUS", "TITLE", "PLATFORMS"],
        ["----", "----", "------", "-----", "---------"],
    ]
    rows.extend(
        [
            item.date.strftime(_DATE),
            "📋" if item.date_type == DATE_TYPE_DEADLINE else "⏰",
            str(item.post.status),
            truncate_string(item.post.title, 25),
            _join(item.post.platforms),
        ]
        for item in planned
    )
    return _tabulate(rows) + f"\n📊 Всего постов в плане: {len(planned)}\n"


def format_next_full(post: Post) -> str:
    """Render the recommended post in full."""
    lines = [
        "📌 Рекомендуемый пост для работы:",
        "==================================",
        "",
        f"📝 Заголовок: {post.title}",
        f"🏷️ Slug: {post.slug}",
        f"📊 Статус: {post.status}",
    ]
    if post.deadline is not None:
        lines.append(f"⏰ Дедлайн: {post.deadline.strftime(_DATE_TIME)}")
    else:
        lines.append("⏰ Дедлайн: не установлен")
    if post.scheduled_at is not None:
        lines.append(f"📅 Запланировано: {post.scheduled_at.strftime(_DATE_TIME)}")
    lines.append(f"🌐 Платформы: {_join(post.platforms)}")
    tags = _join(post.tags)
    if tags:
        lines.append(f"🏷️ Теги: {tags}")
    lines.append("")
    return "\n".join(lines) + "\n"


def format_next_json(post: Post) -> str:
    """Render a post as indented JSON."""
    return json.dumps(post.to_dict(), indent=2, ensure_ascii=False) + "\n"


def format_stats_table(stats: PostStats) -> str:
    """Render statistics as tables by status, platform and tag."""
    parts = [
        "📊 Статистика постов\n",
        "====================\n",
        f"\n📈 Всего постов: {stats.total}\n",
        "\n📋 По статусам:\n",
    ]

    status_rows = [["  СТАТУС", "КОЛИЧЕСТВО"], ["  ------", "--------"]]
    for status in STATUS_ORDER:
        if status in stats.by_status:
            status_rows.append([f"  {status}", str(stats.by_status[status])])
    known = {status.value for status in STATUS_ORDER}
    for status, count in stats.by_status.items():
        if str(status) not in known:
            status_rows.append([f"  {status}", str(count)])
    parts.append(_tabulate(status_rows))

    parts.append("\n🌐 По платформам:\n")
    platform_rows = [["  ПЛАТФОРМА", "КОЛИЧЕСТВО"], ["  ---------", "--------"]]
    for platform in sorted(stats.by_platform, key=str):
        platform_rows.append([f"  {platform}", str(stats.by_platform[platform])])
    parts.append(_tabulate(platform_rows))

    parts.append("\n🏷️ По тегам:\n")
    tag_rows = [["  ТЕГ", "КОЛИЧЕСТВО"], ["  ---", "--------"]]
    for tag in sorted(stats.by_tag):
        tag_rows.append([f"  {tag}", str(stats.by_tag[tag])])
    parts.append(_tabulate(tag_rows))

    parts.append("\n")
    return "".join(parts)


def format_stats_json(stats: PostStats) -> str:
    """Render statistics as indented JSON with sorted map keys."""
    data = stats.to_dict()
    for key in ("by_status", "by_platform", "by_tag"):
        data[key] = dict(sorted(data[key].items()))
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def format_post_details(post: Post) -> str:
    """Render a post's metadata and the beginning of its content."""
    lines = [
        f"📝 Пост: {post.title}",
        "",
        f"  ID:       {post.id}",
        f"  Slug:     {post.slug}",
        f"  Статус:   {post.status}",
        f"  Платформы: {_bracketed(post.platforms)}",
        f"  Теги:     {_bracketed(post.tags)}",
    ]
    if post.deadline is not None:
        lines.append(f"  Deadline: {post.deadline.strftime(_DATE)}")
    if post.scheduled_at is not None:
        lines.append(f"  Заплан:   {post.scheduled_at.strftime(_DATE_TIME)}")
    if post.published_at is not None:
        lines.append(f"  Опублик:  {post.published_at.strftime(_DATE_TIME)}")
    if post.external.telegram_url:
        lines.append(f"  TG URL:   {post.external.telegram_url}")

    lines.append("")
    lines.append(f"📄 Контент ({len(post.content)} символов):")
    lines.append("---")
    if len(post.content) > _DETAILS_LIMIT:
        lines.append(post.content[:_DETAILS_LIMIT])
        lines.append(f"... (показано первые {_DETAILS_LIMIT} символов)")
    else:
        lines.append(post.content)
    return "\n".join(lines) + "\n"