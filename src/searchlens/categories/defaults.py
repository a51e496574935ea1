"""Categories synthesized when there is nothing to aggregate."""

from __future__ import annotations

from searchlens.categories.keywords import ALL_RESULTS, KEY_INSIGHTS
from searchlens.metrics import default_metrics
from searchlens.models.category import Category

_DESCRIPTIONS = {
    KEY_INSIGHTS: "Most important insights from all sources",
    ALL_RESULTS: "All search results",
}


def default_categories() -> list[Category]:
    """Return the two fallback buckets, Key Insights first, both empty."""

    return [
        Category(
            name=name,
            description=_DESCRIPTIONS[name],
            metrics=default_metrics(),
            content=[],
            is_fallback=True,
        )
        for name in (KEY_INSIGHTS, ALL_RESULTS)
    ]
