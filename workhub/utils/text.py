"""Text helpers for slugged entities."""

import re

_NON_SLUG = re.compile(r"[^a-z0-9-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def slugify(value: str) -> str:
    """
    Lower-case, spaces to hyphens, drop everything but [a-z0-9-].

    >>> slugify("Acme  Rockets, Inc.")
    'acme-rockets-inc'
    """
    if not value or not value.strip():
        return ""
    slug = _WHITESPACE.sub("-", value.strip().lower())
    slug = _NON_SLUG.sub("", slug)
    return _DASHES.sub("-", slug).strip("-")
