"""Back-fill empty categories with head-of-list search results."""

from __future__ import annotations

from collections.abc import Sequence

from searchlens.logging import get_logger
from searchlens.models.category import Category
from searchlens.models.content import ContentItem

logger = get_logger(__name__)

DEFAULT_ENHANCE_LIMIT = 5


def enhance(
    categories: Sequence[Category],
    items: Sequence[ContentItem],
    limit: int = DEFAULT_ENHANCE_LIMIT,
) -> list[Category]:
    """Give every empty category the first ``limit`` items as placeholder content.

    Each empty category draws independently from the head of ``items``, so several empty
    categories may end up sharing the same placeholders. No counter or queue is consumed,
    which keeps the call idempotent. Categories that already have content are returned
    unchanged; inputs are never mutated.

    Args:
        categories: Categories to enhance.
        items: Raw items in relevance order.
        limit: Maximum placeholders per category.

    Returns:
        New category list in the same order.
    """

    head = list(items[: max(limit, 0)])
    if not head:
        return list(categories)

    out: list[Category] = []
    for category in categories:
        if category.content:
            out.append(category)
            continue
        logger.debug("Filling empty category %s with %d items", category.id, len(head))
        out.append(category.model_copy(update={"content": list(head)}))
    return out
