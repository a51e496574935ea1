"""Deterministic rendering colors for categories."""

from __future__ import annotations

import hashlib
from types import MappingProxyType

# Colors the front-end already uses for well-known buckets.
KNOWN_COLORS = MappingProxyType(
    {
        "key_insights": "#0F9D58",
        "all_results": "#4285F4",
        "business": "#1976D2",
        "market_analysis": "#FF9800",
        "financial_data": "#0097A7",
        "company_information": "#EA4335",
        "industry_trends": "#FBBC05",
        "investment_strategies": "#7B1FA2",
        "economic_indicators": "#34A853",
        "regulatory_information": "#D32F2F",
        "expert_opinions": "#5D4037",
    }
)

PALETTE: tuple[str, ...] = (
    "#4285F4",
    "#0F9D58",
    "#EA4335",
    "#FBBC05",
    "#7B1FA2",
    "#0097A7",
    "#FF9800",
    "#5D4037",
    "#1976D2",
    "#C2185B",
)


def category_color(category_id: str) -> str:
    """Return the hex color for a category id.

    Unknown ids hash into ``PALETTE`` with sha1 so the color is stable across processes
    (``hash()`` is salted per interpreter).
    """

    known = KNOWN_COLORS.get(category_id)
    if known:
        return known
    digest = hashlib.sha1(category_id.encode("utf-8")).digest()
    return PALETTE[digest[0] % len(PALETTE)]
