"""URL slugs for vlog posts.

A slug is derived once from a post title when the post is created and stored
next to it; it is never recomputed on read.
"""

from __future__ import annotations

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def _strip_accents(text: str) -> str:
    return "".join(
        c for c in unicodedata.normalize("NFKD", text) if unicodedata.category(c) != "Mn"
    )


def slugify(title: str) -> str:
    """Return the lowercase, hyphen-joined slug for ``title``.

    Only ASCII letters, digits and single hyphens survive, with no hyphen at
    either end. Applying ``slugify`` to its own output returns it unchanged.

    >>> slugify("Summer Camp Adventures!")
    'summer-camp-adventures'
    """
    slug = _strip_accents(title).lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
