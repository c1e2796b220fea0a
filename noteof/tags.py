"""
Tag canonicalization as performed by the server.

Canonical form: lowercase, NFD decomposition, Combining Diacritical Marks
(U+0300-U+036F) removed. It is meant for comparing tags that have not made a
round trip to the server yet; the server remains the authority on stored
tag form.
"""

from __future__ import annotations

import re
import unicodedata

# see: https://en.wikipedia.org/wiki/Combining_Diacritical_Marks
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def canonicalize_tag(tag: str) -> str:
    s = tag.lower()
    s = unicodedata.normalize("NFD", s)
    return _COMBINING_MARKS.sub("", s)


def tags_equal(a: str, b: str) -> bool:
    return canonicalize_tag(a) == canonicalize_tag(b)


__all__ = ["canonicalize_tag", "tags_equal"]
