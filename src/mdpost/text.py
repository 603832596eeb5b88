"""Title casing and slug generation for post titles."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Kept lowercase unless they start the title.
SMALL_WORDS: frozenset[str] = frozenset({"a", "an", "of", "on", "the", "to"})

_NON_WORD_RE = re.compile(r"[^\w ]+", re.ASCII)
_SPACES_RE = re.compile(r" +")


def to_title(text: str) -> str:
    """Title-case a raw title.

    Examples:
        >>> to_title("a tale of two cities")
        'A Tale of Two Cities'
        >>> to_title("")
        ''
    """
    words = text.split()
    titled = [
        word if i != 0 and word in SMALL_WORDS else word[:1].upper() + word[1:]
        for i, word in enumerate(words)
    ]
    return " ".join(titled)


def slugify(text: str) -> str:
    """Derive a URL slug from a raw title.

    Lowercases, drops anything that is not a word character or a space, then
    turns each run of spaces into one hyphen. Surrounding spaces are not
    trimmed, so ``"hello "`` becomes ``"hello-"``.

    Examples:
        >>> slugify("My First Post")
        'my-first-post'
        >>> slugify("What's new in 2.0?\\n")
        'whats-new-in-20'
    """
    logger.debug("Generating slug for %r", text)
    slug = _NON_WORD_RE.sub("", text.lower())
    return _SPACES_RE.sub("-", slug)
