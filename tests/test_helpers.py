import subprocess
import sys
from pathlib import Path

import pytest

from jtpost.errors import InvalidPlatformError, NotFoundError
from jtpost.helpers import (
    create_post_template,
    find_post_file,
    is_confirmed,
    is_valid_status,
    open_in_editor,
    parse_platforms,
    remove_date_prefix,
    resolve_editor,
)
from jtpost.models import Platform, PostStatus


@pytest.mark.parametrize("value", ["telegram", "Telegram", "TELEGRAM"])
def test_parse_platforms_accepts_telegram_any_case(value):
    assert parse_platforms([value]) == [Platform.TELEGRAM]


def test_parse_platforms_empty():
    assert parse_platforms([]) == []


def test_parse_platforms_unknown_raises():
    with pytest.raises(InvalidPlatformError) as info:
        parse_platforms(["telegram", "vk"])
    assert "vk" in str(info.value)


@pytest.mark.parametrize("status", ["idea", "draft", "ready", "scheduled", "published"])
def test_is_valid_status_known(status):
    assert is_valid_status(status) is True


def test_is_valid_status_enum_member():
    assert is_valid_status(PostStatus.READY) is True


@pytest.mark.parametrize("status", ["", "Draft", "archived"])
def test_is_valid_status_unknown(status):
    assert is_valid_status(status) is False


def test_resolve_editor_explicit_wins(monkeypatch):
    monkeypatch.setenv("VISUAL", "code")
    assert resolve_editor("nano") == "nano"


def test_resolve_editor_prefers_visual(monkeypatch):
    monkeypatch.setenv("VISUAL", "code")
    monkeypatch.setenv("EDITOR", "nano")
    assert resolve_editor() == "code"


def test_resolve_editor_falls_back_to_editor(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.setenv("EDITOR", "nano")
    assert resolve_editor("") == "nano"


def test_resolve_editor_default_vim(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    assert resolve_editor() == "vim"


def test_open_in_editor_failure_raises(tmp_path):
    target = tmp_path / "post.md"
    target.write_text("")
    with pytest.raises(subprocess.CalledProcessError):
        open_in_editor(target, f"{sys.executable} -c import\tsys;sys.exit(3)")


def test_open_in_editor_blank_command(tmp_path):
    with pytest.raises(ValueError):
        open_in_editor(tmp_path / "post.md", "   ")


def test_find_post_file_matches_id(tmp_path):
    (tmp_path / "other.md").write_text("")
    (tmp_path / "123-my-post.md").write_text("")
    assert find_post_file(tmp_path, "123-my-post") == tmp_path / "123-my-post.md"


def test_find_post_file_skips_dirs_and_non_markdown(tmp_path):
    (tmp_path / "abc.md").mkdir()
    (tmp_path / "abc.txt").write_text("")
    with pytest.raises(NotFoundError):
        find_post_file(tmp_path, "abc")


def test_find_post_file_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_post_file(tmp_path / "absent", "abc")


def test_remove_date_prefix_strips_valid_date():
    assert remove_date_prefix("2024-01-15-my-post") == "my-post"


@pytest.mark.parametrize(
    "slug",
    ["my-post", "2024-13-45-my-post", "2024-01-15", "2024-01-15-", "abcd-ef-gh-post"],
)
def test_remove_date_prefix_keeps_slug(slug):
    assert remove_date_prefix(slug) == slug


def test_remove_date_prefix_is_idempotent_after_strip():
    once = remove_date_prefix("2023-12-31-year-end")
    assert remove_date_prefix(once) == once


def test_create_post_template():
    text = create_post_template("Привет Мир")
    assert text.startswith("# Привет Мир\n\n")
    assert "<!-- Начало поста -->" in text
    assert text.endswith("Ваш контент здесь...\n")


@pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES \n"])
def test_is_confirmed_yes(answer):
    assert is_confirmed(answer) is True


@pytest.mark.parametrize("answer", ["n", "no", "maybe"])
def test_is_confirmed_no(answer):
    assert is_confirmed(answer, default=True) is False


def test_is_confirmed_empty_uses_default():
    assert is_confirmed("\n", default=True) is True
    assert is_confirmed("", default=False) is False


def test_is_confirmed_none_is_no():
    assert is_confirmed(None, default=True) is False