# jtpost

A small library for managing the lifecycle of posts for Telegram channels:
an idea becomes a draft, the draft becomes ready, gets scheduled and is
finally published.

It has no third-party dependencies and supports Python 3.10 and later.

## What is inside

- `jtpost.models` — the data model: `Post`, `PostStatus`, `Platform`,
  `ExternalLinks`, `PostFilter`, `generate_post_id`, the `Clock` protocol
  with its `SystemClock` implementation, and the `PostRepository` and
  `Publisher` protocols you implement to plug in storage and publishing
  targets.
- `jtpost.errors` — the exception hierarchy rooted at `JtpostError`
  (`NotFoundError`, `AlreadyExistsError`, `EmptyTitleError`,
  `EmptySlugError`, `InvalidStatusError`, `InvalidPlatformError`,
  `ValidationError`, …) and `is_status_transition_valid`.
- `jtpost.slug` — `transliterate` (Cyrillic to Latin) and `generate_slug`.
- `jtpost.service` — `PostService`, which creates, updates, deletes and
  publishes posts, computes statistics (`PostStats`) and recommends the next
  post to work on; `post_priority` gives the ranking it uses.
- `jtpost.formatting` — plain-text and JSON renderings of post lists, plans,
  recommendations, statistics and post details; `build_plan` selects the
  posts for a publishing plan.
- `jtpost.helpers` — platform and status parsing, editor lookup and
  launching, locating a post's Markdown file, stripping `YYYY-MM-DD-`
  prefixes from slugs, yes/no answer parsing.
- `jtpost.logger` — a small levelled, thread-safe logger.

## Status lifecycle

Statuses only move forward:

```
idea → draft → ready → scheduled → published
```

```python
from jtpost.errors import is_status_transition_valid
from jtpost.models import PostStatus

is_status_transition_valid(PostStatus.DRAFT, PostStatus.READY)      # True
is_status_transition_valid(PostStatus.PUBLISHED, PostStatus.DRAFT)  # False
is_status_transition_valid(PostStatus.DRAFT, PostStatus.DRAFT)      # False
```

## Slugs

Titles are transliterated and reduced to `a-z`, `0-9` and single dashes:

```python
from jtpost.slug import generate_slug, transliterate

transliterate("Привет Мир")                  # "Privet Mir"
generate_slug("Как написать CLI на Go")      # "kak-napisat-cli-na-go"
generate_slug("Special!@#Chars")             # "special-chars"
```

## Working with posts

`PostService` works against any object that satisfies the `PostRepository`
protocol and any `Clock`. A minimal in-memory repository:

```python
from jtpost.errors import AlreadyExistsError, NotFoundError
from jtpost.models import Post, PostFilter, PostStatus, SystemClock
from jtpost.service import CreatePostInput, PostService


class MemoryRepository:
    def __init__(self):
        self.posts = {}

    def get_by_id(self, post_id):
        try:
            return self.posts[post_id]
        except KeyError:
            raise NotFoundError() from None

    def get_by_slug(self, slug):
        for post in self.posts.values():
            if post.slug == slug:
                return post
        raise NotFoundError()

    def list(self, post_filter):
        return list(self.posts.values())

    def create(self, post):
        if post.id in self.posts:
            raise AlreadyExistsError()
        self.posts[post.id] = post

    def update(self, post):
        if post.id not in self.posts:
            raise NotFoundError()
        self.posts[post.id] = post

    def delete(self, post_id):
        if self.posts.pop(post_id, None) is None:
            raise NotFoundError()


service = PostService(MemoryRepository(), SystemClock())

post = service.create_post(CreatePostInput(title="Привет Мир"))
post.slug        # "privet-mir"
post.status      # PostStatus.IDEA
post.platforms   # [Platform.TELEGRAM] when none are given

service.update_status(post.id, PostStatus.DRAFT)
stats = service.get_stats()
next_post = service.get_next_post()   # None when nothing is left to do
```

`get_next_post` considers posts that are neither published nor scheduled and
returns the one with the lowest `post_priority`: posts with a deadline rank
by hours to (or past) it, overdue ones first; then posts with a scheduled
date; then posts without dates, ready before draft before idea.

`publish_post` hands the post to each requested `Publisher`, then marks it
published and stores it.

Errors are raised, not returned: a missing post raises `NotFoundError`, a
backwards status change raises `InvalidStatusError`, an empty title raises
`EmptyTitleError`, an empty slug raises `EmptySlugError`.

## Rendering

The `format_*` functions return strings; print them or write them wherever
you like.

```python
from jtpost.formatting import build_plan, format_plan, format_stats_table, truncate_string

truncate_string("Hello World", 8)   # "Hello..."
print(format_stats_table(stats))
print(format_plan(build_plan(service.list_posts(PostFilter()), days=30)))
```

## Logging

```python
from jtpost.logger import Level, Logger, new_default

log = new_default()          # INFO level, standard output
log.set_debug(True)          # switches to DEBUG
log.info("server started")

api_log = Logger(level=Level.WARN, prefix="[API]")
api_log.warnf("retry %d of %d", 2, 3)
```

Each line looks like
`[2024-01-02 15:04:05.000] [INFO] message`, with the optional prefix after
the level.

## What the package does not do

- It stores nothing: there is no repository implementation, neither on disk
  nor in a database. Supply your own `PostRepository`.
- It publishes nowhere by itself: there is no Telegram `Publisher`; supply
  your own implementation.
- It has no command-line program, no HTTP server or web interface, and does
  not read or write configuration files.
- It does not parse Markdown front matter or convert Markdown for Telegram.