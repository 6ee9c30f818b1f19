"""Helpers behind the commands: argument parsing, editor launching, file lookup, import rules."""

from __future__ import annotations

import os
import re
import subprocess
from datetime import date
from pathlib import Path

from jtpost.errors import InvalidPlatformError, NotFoundError
from jtpost.models import Platform, PostStatus

DEFAULT_EDITOR = "vim"

_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_AFFIRMATIVE = frozenset({"y", "yes"})


def parse_platforms(values: list[str] | tuple[str, ...]) -> list[Platform]:
    """Turn platform names into platforms, ignoring case; unknown names raise."""
    platforms: list[Platform] = []
    for value in values:
        if value.lower() == Platform.TELEGRAM.value:
            platforms.append(Platform.TELEGRAM)
        else:
            raise InvalidPlatformError(
                f"неизвестная платформа '{value}' (допустима: telegram)"
            )
    return platforms


def is_valid_status(status: PostStatus | str) -> bool:
    """Return True if the value names one of the known statuses."""
    return str(status) in {s.value for s in PostStatus}


def resolve_editor(editor: str | None = None) -> str:
    """Pick the editor: the given one, then $VISUAL, then $EDITOR, then vim."""
    if editor:
        return editor
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR


def open_in_editor(file_path: str | os.PathLike[str], editor: str | None = None) -> None:
    """Run the editor on the file, attached to the terminal, and wait for it.

    Raises subprocess.CalledProcessError when the editor exits with an error.
    """
    command = resolve_editor(editor).split()
    if not command:
        raise ValueError("editor command is empty")
    subprocess.run([*command, os.fspath(file_path)], check=True)


def find_post_file(posts_dir: str | os.PathLike[str], post_id: str) -> Path:
    """Return the first Markdown file in the directory whose name contains the id."""
    directory = Path(posts_dir)
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() or not entry.name.endswith(".md"):
            continue
        if post_id in entry.name:
            return directory / entry.name
    raise NotFoundError()


def remove_date_prefix(slug: str) -> str:
    """Strip a leading YYYY-MM-DD- date from a slug when it is a real date."""
    if len(slug) > 11 and slug[4] == "-" and slug[7] == "-":
        parts = slug.split("-", 3)
        if len(parts) == 4:
            candidate = "-".join(parts[:3])
            if _DATE_PREFIX.fullmatch(candidate):
                try:
                    date.fromisoformat(candidate)
                except ValueError:
                    return slug
                return parts[3]
    return slug


def create_post_template(title: str) -> str:
    """Return the starting Markdown content for a new post."""
    return f"# {title}\n\n<!-- Начало поста -->\n\nВаш контент здесь...\n"


def is_confirmed(response: str | None, default: bool = False) -> bool:
    """Interpret a yes/no answer; an empty answer gives the default, None means no."""
    if response is None:
        return False
    answer = response.strip().lower()
    if not answer:
        return default
    return answer in _AFFIRMATIVE