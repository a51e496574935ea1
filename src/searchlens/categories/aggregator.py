"""Category aggregation.

Turns content items (and optionally pre-built candidate categories) into the final, ordered,
size-capped category list. The function is pure: same inputs, same output, no caches.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from searchlens.categories.classifier import CategoryClassifier, default_classifier
from searchlens.categories.defaults import default_categories
from searchlens.categories.enhancer import DEFAULT_ENHANCE_LIMIT, enhance
from searchlens.categories.keywords import DEFAULT_KEYWORD_SETS, KEY_INSIGHTS
from searchlens.logging import get_logger
from searchlens.metrics import default_metrics, mean_metrics, normalize_metrics, score_item
from searchlens.models.category import Category
from searchlens.models.content import ContentItem
from searchlens.models.metrics import Metrics
from searchlens.utils.ids import category_id, is_key_insights
from searchlens.utils.text import normalize_for_compare

logger = get_logger(__name__)

DEFAULT_MAX_CATEGORIES = 6

_DESCRIPTIONS = {ks.id: ks.description for ks in DEFAULT_KEYWORD_SETS}


class AggregateOptions(BaseModel):
    """Knobs for :func:`aggregate`."""

    model_config = ConfigDict(frozen=True)

    max_categories: int = Field(default=DEFAULT_MAX_CATEGORIES, ge=1)
    enhance_limit: int = Field(default=DEFAULT_ENHANCE_LIMIT, ge=0)
    # Merging concatenates content naively unless this is set.
    dedupe_content: bool = False
    # Estimate metrics for unscored items instead of using the default prior.
    score_items: bool = False


def aggregate(
    items: Iterable[ContentItem | Mapping[str, Any]],
    candidate_categories: Sequence[Category | Mapping[str, Any]] | None = None,
    options: AggregateOptions | Mapping[str, Any] | None = None,
    *,
    query: str | None = None,
    classifier: CategoryClassifier | None = None,
) -> list[Category]:
    """Group items into categories, merge duplicates, order and cap the result.

    Candidate categories, when given, are authoritative: items are not re-classified and empty
    candidates are back-filled from the head of ``items``. Otherwise every item is labelled
    (pre-assigned label or classifier) and grouped.

    Args:
        items: Content items in relevance order. Malformed entries are skipped with a warning.
        candidate_categories: Optional pre-built categories from the LLM layer.
        options: Aggregation options (or a mapping of them).
        query: Search query; used for item scoring and logging only.
        classifier: Classifier override; defaults to the bundled keyword sets.

    Returns:
        At most ``options.max_categories`` categories, Key Insights first when present.

    Raises:
        TypeError: If ``items`` is not an iterable of items.
    """

    opts = _coerce_options(options)
    valid_items = coerce_items(items)
    candidates = _coerce_candidates(candidate_categories)

    if candidates:
        buckets = candidates
    else:
        buckets = _group_by_label(valid_items, classifier or default_classifier(), opts, query)

    merged = _merge(buckets, dedupe=opts.dedupe_content)
    if candidates:
        merged = enhance(merged, valid_items, opts.enhance_limit)

    ordered = _order(merged)[: opts.max_categories]
    if not ordered:
        logger.info("No items or candidates to aggregate; using default categories")
        return default_categories()[: opts.max_categories]

    logger.info(
        "Aggregated %d items into %d categories (%d candidates, cap %d)",
        len(valid_items),
        len(ordered),
        len(candidates),
        opts.max_categories,
    )
    return ordered


def _coerce_options(options: AggregateOptions | Mapping[str, Any] | None) -> AggregateOptions:
    if options is None:
        return AggregateOptions()
    if isinstance(options, AggregateOptions):
        return options
    return AggregateOptions.model_validate(dict(options))


def coerce_items(items: Any) -> list[ContentItem]:
    """Validate raw items, skipping malformed ones with a warning.

    Raises:
        TypeError: If ``items`` is not an iterable (strings and mappings are rejected too).
    """

    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        raise TypeError(f"items must be an iterable of content items, got {type(items).__name__}")

    valid: list[ContentItem] = []
    for index, raw in enumerate(items):
        item = _coerce_item(raw, where=f"items[{index}]")
        if item is not None:
            valid.append(item)
    return valid


def _coerce_item(raw: Any, *, where: str) -> ContentItem | None:
    if isinstance(raw, ContentItem):
        item = raw
    elif isinstance(raw, Mapping):
        try:
            item = ContentItem.model_validate(dict(raw))
        except ValidationError as e:
            logger.warning("Skipping malformed item %s: %s", where, e.errors()[0].get("msg", e))
            return None
    else:
        logger.warning("Skipping malformed item %s: unsupported type %s", where, type(raw).__name__)
        return None

    if not item.content.strip():
        logger.warning("Skipping malformed item %s: empty content", where)
        return None
    return item


def _coerce_candidates(
    candidates: Sequence[Category | Mapping[str, Any]] | None,
) -> list[Category]:
    if not candidates:
        return []

    out: list[Category] = []
    for index, raw in enumerate(candidates):
        if isinstance(raw, Category):
            out.append(raw)
            continue
        if not isinstance(raw, Mapping):
            logger.warning("Skipping candidate category %d: unsupported type %s", index, type(raw).__name__)
            continue

        data = dict(raw)
        content = data.get("content") or []
        if isinstance(content, (str, bytes)) or not isinstance(content, Iterable):
            logger.warning("Candidate category %d has non-list content; treating as empty", index)
            content = []
        data["content"] = [
            item
            for i, c in enumerate(content)
            if (item := _coerce_item(c, where=f"candidate[{index}].content[{i}]")) is not None
        ]
        raw_metrics = data.get("metrics")
        data["metrics"] = normalize_metrics(raw_metrics if isinstance(raw_metrics, (Mapping, Metrics)) else None)
        try:
            out.append(Category.model_validate(data))
        except ValidationError as e:
            logger.warning("Skipping malformed candidate category %d: %s", index, e.errors()[0].get("msg", e))
    return out


def _group_by_label(
    items: list[ContentItem],
    classifier: CategoryClassifier,
    opts: AggregateOptions,
    query: str | None,
) -> list[Category]:
    groups: dict[str, tuple[str, list[ContentItem]]] = {}
    for item in items:
        label = classifier.resolve_label(item)
        cid = category_id(label)
        if cid not in groups:
            groups[cid] = (label, [])
        groups[cid][1].append(item)

    out: list[Category] = []
    for cid, (label, members) in groups.items():
        out.append(
            Category(
                id=cid,
                name=label,
                content=members,
                metrics=_items_metrics(members, opts, query) or default_metrics(),
                description=_DESCRIPTIONS.get(cid),
            )
        )
    return out


def _items_metrics(
    items: Iterable[ContentItem],
    opts: AggregateOptions,
    query: str | None,
) -> Metrics | None:
    collected: list[Metrics] = []
    for item in items:
        if item.metrics is not None:
            collected.append(item.metrics)
        elif opts.score_items:
            collected.append(score_item(item, query or ""))
    return mean_metrics(collected)


def _merge(categories: list[Category], *, dedupe: bool) -> list[Category]:
    groups: dict[str, list[Category]] = {}
    for category in categories:
        groups.setdefault(category.key, []).append(category)

    merged: list[Category] = []
    for key, group in groups.items():
        first = group[0]
        if len(group) == 1 and not dedupe:
            merged.append(first)
            continue

        content = [item for category in group for item in category.content]
        if dedupe:
            content = _dedupe(content)

        if len(group) == 1:
            metrics = first.metrics
        else:
            logger.debug("Merging %d categories with key %s", len(group), key)
            metrics = (
                mean_metrics(i.metrics for i in content if i.metrics is not None)
                or mean_metrics(c.metrics for c in group)
                or default_metrics()
            )
        merged.append(
            first.model_copy(
                update={
                    # Mixed spellings of one id collapse to the key.
                    "id": first.id if all(c.id == first.id for c in group) else key,
                    "content": content,
                    "metrics": metrics,
                    "is_fallback": all(c.is_fallback for c in group),
                }
            )
        )
    return merged


def _dedupe(items: list[ContentItem]) -> list[ContentItem]:
    seen: set[str] = set()
    out: list[ContentItem] = []
    for item in items:
        key = normalize_for_compare(item.content)
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def _order(categories: list[Category]) -> list[Category]:
    # sorted() is stable, so equal scores keep first-seen order.
    ordered = sorted(categories, key=lambda c: c.metrics.overall, reverse=True)
    for index, category in enumerate(ordered):
        if category.name == KEY_INSIGHTS or is_key_insights(category.id):
            if index:
                ordered.insert(0, ordered.pop(index))
            break
    return ordered
