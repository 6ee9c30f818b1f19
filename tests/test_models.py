from datetime import datetime, timedelta, timezone

from jtpost.models import (
    STATUS_ORDER,
    ExternalLinks,
    Platform,
    Post,
    PostFilter,
    PostStatus,
    SystemClock,
    generate_post_id,
)


def test_status_order_follows_life_cycle():
    expected = [PostStatus(v) for v in ("idea", "draft", "ready", "scheduled", "published")]
    assert list(STATUS_ORDER) == expected


def test_enums_render_as_values():
    assert str(PostStatus.DRAFT) == "draft"
    assert Platform("telegram") is Platform.TELEGRAM
    assert str(Platform.TELEGRAM) == "telegram"


def test_generate_post_id_at_epoch():
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert generate_post_id("hello", epoch) == "0-hello"


def test_generate_post_id_structure_and_ordering():
    t = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    first = generate_post_id("slug", t)
    second = generate_post_id("slug", t + timedelta(microseconds=1))
    prefix1, _, rest1 = first.partition("-")
    prefix2, _, _ = second.partition("-")
    assert rest1 == "slug"
    assert int(prefix2) - int(prefix1) == 1000


def test_generate_post_id_naive_is_local_time():
    naive = datetime(2024, 5, 1, 12, 30)
    assert generate_post_id("x", naive) == generate_post_id("x", naive.astimezone())


def test_post_to_dict_minimal_omits_empty_fields():
    post = Post(id="p1", title="T", slug="s", status=PostStatus.DRAFT)
    assert post.to_dict() == {
        "id": "p1",
        "title": "T",
        "slug": "s",
        "status": "draft",
        "content": "",
        "external": {},
    }


def test_post_to_dict_full():
    deadline = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    post = Post(
        id="p2",
        title="Title",
        slug="title",
        status=PostStatus.READY,
        platforms=[Platform.TELEGRAM],
        tags=["go", "cli"],
        deadline=deadline,
        content="body",
        external=ExternalLinks(telegram_url="https://t.example.com/1"),
    )
    data = post.to_dict()
    assert data["platforms"] == ["telegram"]
    assert data["tags"] == ["go", "cli"]
    assert data["deadline"] == "2024-01-02T03:04:05Z"
    assert "scheduled_at" not in data
    assert data["content"] == "body"
    assert data["external"] == {"telegram_url": "https://t.example.com/1"}


def test_post_to_dict_keeps_offset():
    tz = timezone(timedelta(hours=3))
    when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)
    data = Post(scheduled_at=when).to_dict()
    assert datetime.fromisoformat(data["scheduled_at"]) == when


def test_post_defaults_are_independent():
    a = Post()
    b = Post()
    a.tags.append("x")
    a.platforms.append(Platform.TELEGRAM)
    assert b.tags == []
    assert b.platforms == []


def test_post_filter_defaults_are_empty_and_independent():
    f1 = PostFilter()
    f2 = PostFilter()
    f1.statuses.append(PostStatus.IDEA)
    assert f2.statuses == []
    assert f2.search == ""


def test_system_clock_returns_aware_current_time():
    before = datetime.now(timezone.utc)
    now = SystemClock().now()
    after = datetime.now(timezone.utc)
    assert now.tzinfo is not None
    assert before <= now <= after