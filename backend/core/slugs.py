"""Slug generation for courses and categories."""

import re
import unicodedata

_NON_WORD = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Convert a title into a URL slug.

    "Intro to Python 3!" -> "intro-to-python-3"
    """
    normalized = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    slug = _NON_WORD.sub("-", normalized.lower()).strip("-")
    return slug or "untitled"


def next_available_slug(base: str, taken: set[str]) -> str:
    """Append ``-2``, ``-3``... to ``base`` until it is not in ``taken``."""
    if base not in taken:
        return base
    suffix = 2
    while f"{base}-{suffix}" in taken:
        suffix += 1
    return f"{base}-{suffix}"
