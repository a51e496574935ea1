"""Keyword-based category classifier.

Scoring is a plain count of distinct trigger phrases found in the item's title and content
(markup stripped, case-insensitive, whole-word). The classifier never raises: items without
usable text get the fallback label.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from searchlens.categories.keywords import DEFAULT_KEYWORD_SETS, KEY_INSIGHTS, KeywordSet
from searchlens.models.content import ContentItem
from searchlens.utils.text import phrase_pattern, strip_markup


class CategoryClassifier:
    """Assign a content item to the best-matching keyword set.

    Args:
        keyword_sets: Ordered keyword sets; order is the tie-break priority.
        fallback: Label returned when nothing matches.
    """

    def __init__(
        self,
        keyword_sets: Iterable[KeywordSet] = DEFAULT_KEYWORD_SETS,
        *,
        fallback: str = KEY_INSIGHTS,
    ) -> None:
        self._fallback = fallback
        self._compiled: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = tuple(
            (ks.name, tuple(phrase_pattern(t) for t in dict.fromkeys(ks.triggers)))
            for ks in keyword_sets
        )

    @property
    def fallback(self) -> str:
        return self._fallback

    @property
    def labels(self) -> tuple[str, ...]:
        """Registered labels in priority order."""

        return tuple(name for name, _ in self._compiled)

    def scores(self, item: ContentItem) -> dict[str, int]:
        """Return the trigger count for every registered label (insertion-ordered)."""

        text = _item_text(item)
        if not text:
            return {name: 0 for name, _ in self._compiled}
        return {
            name: sum(1 for pattern in patterns if pattern.search(text))
            for name, patterns in self._compiled
        }

    def classify(self, item: ContentItem) -> str:
        """Return the best-fit label, or the fallback when no trigger matches."""

        try:
            scores = self.scores(item)
        except (AttributeError, TypeError):
            return self._fallback

        best_label = self._fallback
        best_score = 0
        # Strictly greater keeps the first-registered label on ties.
        for label, score in scores.items():
            if score > best_score:
                best_label, best_score = label, score
        return best_label

    def resolve_label(self, item: ContentItem) -> str:
        """Honor a pre-assigned label; classify only when there is none."""

        assigned = getattr(item, "category", None)
        if isinstance(assigned, str) and assigned.strip():
            return assigned.strip()
        return self.classify(item)


def _item_text(item: ContentItem) -> str:
    content = item.content if isinstance(item.content, str) else ""
    title = item.title if isinstance(item.title, str) else ""
    if not content.strip():
        return ""
    return strip_markup(f"{title}\n{content}" if title else content)


_default_classifier = CategoryClassifier()


def default_classifier() -> CategoryClassifier:
    """Return the shared classifier built from the bundled keyword sets."""

    return _default_classifier


def classify(item: ContentItem) -> str:
    """Classify an item with the default keyword sets."""

    return _default_classifier.classify(item)


def resolve_label(item: ContentItem) -> str:
    """Pre-assigned label if present, otherwise :func:`classify`."""

    return _default_classifier.resolve_label(item)
