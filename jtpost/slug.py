"""Transliteration of Cyrillic text and URL-safe slug generation."""

from __future__ import annotations

import re

_TRANSLITERATION = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d",
    "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i",
    "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "sch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D",
    "Е": "E", "Ё": "Yo", "Ж": "Zh", "З": "Z", "И": "I",
    "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N",
    "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T",
    "У": "U", "Ф": "F", "Х": "H", "Ц": "Ts", "Ч": "Ch",
    "Ш": "Sh", "Щ": "Sch", "Ъ": "", "Ы": "Y", "Ь": "",
    "Э": "E", "Ю": "Yu", "Я": "Ya",
}

_TABLE = str.maketrans(_TRANSLITERATION)

# Characters Python treats as whitespace but that do not separate words in titles.
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def transliterate(text: str) -> str:
    """Replace Cyrillic letters with their Latin transliteration."""
    return text.translate(_TABLE)


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


def _is_allowed(ch: str) -> bool:
    return "a" <= ch <= "z" or "0" <= ch <= "9" or ch == "-"


def generate_slug(title: str) -> str:
    """Build a lower-case, hyphen-separated slug of a-z, 0-9 from a title."""
    text = transliterate(title).lower().strip()
    text = text.replace(" ", "-").replace("_", "-")

    chars: list[str] = []
    for ch in text:
        if _is_allowed(ch):
            chars.append(ch)
        elif not _is_space(ch) and chars and chars[-1] != "-":
            chars.append("-")

    slug = re.sub(r"-{2,}", "-", "".join(chars))
    return slug.strip("-")