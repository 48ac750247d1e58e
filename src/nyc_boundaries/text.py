from __future__ import annotations

import re
import unicodedata
from typing import Any, Tuple


BOROUGHS: Tuple[str, ...] = ("manhattan", "queens", "bronx", "brooklyn", "staten-island")

_NON_SLUG = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def kebab_case(text: str) -> str:
    """Convert free text to a kebab-case identifier.

    - Lowercase
    - Drop everything except a-z, 0-9, whitespace and hyphens
    - Whitespace runs become one hyphen, hyphen runs collapse
    - No leading/trailing hyphen
    """
    if text is None:
        return ""
    s = str(text).lower()
    s = _NON_SLUG.sub("", s)
    s = _WHITESPACE.sub("-", s)
    s = _DASHES.sub("-", s)
    return s.strip("-")


def make_slug(name: str, borough: str) -> str:
    """Join key shared by the boundary and centroid files."""
    return kebab_case(f"{name}-{borough}")


def _fold_accents(s: str) -> str:
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(value: Any) -> Tuple[str, str]:
    """Sort key approximating a locale-aware string comparison.

    Case and accents only matter when the folded forms are equal, so
    "bay ridge" sorts next to "Bay Ridge" instead of after every capital.
    On such ties lower case comes first.
    """
    if value is None:
        return ("", "")
    s = str(value)
    return (_fold_accents(s).casefold(), s.swapcase())
