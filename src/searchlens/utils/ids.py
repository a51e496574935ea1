"""ID utilities."""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^0-9a-z]+")


def slugify(text: str, *, default: str = "") -> str:
    """Lowercase ``text`` and collapse every run of spaces/punctuation into one underscore."""

    slug = _NON_ALNUM_RE.sub("_", text.strip().lower()).strip("_")
    return slug or default


def category_id(name: str) -> str:
    """Derive a stable category id from a display name.

    ``"Market Analysis"`` and ``"market-analysis"`` both become ``market_analysis``.
    """

    return slugify(name, default="uncategorized")


def is_key_insights(category_id_or_name: str) -> bool:
    """Return True for ids/names that denote the pinned Key Insights bucket."""

    return "key_insight" in category_id(category_id_or_name)
