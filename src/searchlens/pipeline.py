"""Categorization pipeline.

``categorize`` is the pure core: items in, ordered categories out. ``CategorizationService``
is the stateful shell around it that owns settings, logging context and the last-good cache.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from searchlens.cache import CategoryCache, InMemoryCategoryCache, cache_key
from searchlens.categories.aggregator import AggregateOptions, aggregate, coerce_items
from searchlens.categories.enhancer import enhance
from searchlens.config import Settings
from searchlens.ingest import llm_items, resolve_llm_result, search_items
from searchlens.logging import get_logger, query_context, set_stage
from searchlens.metrics import to_display_percent
from searchlens.models.category import Category
from searchlens.models.content import ContentItem, Source
from searchlens.models.request import CategorizeRequest
from searchlens.registry import SourceRegistry, default_registry

logger = get_logger(__name__)


def categorize(
    items: Iterable[ContentItem | Mapping[str, Any]],
    candidate_categories: Sequence[Category | Mapping[str, Any]] | None = None,
    options: AggregateOptions | Mapping[str, Any] | None = None,
    *,
    query: str | None = None,
) -> list[Category]:
    """Aggregate items into categories and back-fill any that came out empty.

    Args:
        items: Content items in relevance order.
        candidate_categories: Optional pre-built categories.
        options: Aggregation options.
        query: Search query (logging and optional item scoring only).

    Returns:
        Final category list.
    """

    if isinstance(options, AggregateOptions):
        opts = options
    else:
        opts = AggregateOptions.model_validate(dict(options or {}))
    # Validate once so generators are not consumed twice and warnings are not repeated.
    valid_items = coerce_items(items)
    categories = aggregate(valid_items, candidate_categories, opts, query=query)
    return enhance(categories, valid_items, opts.enhance_limit)


class CategorizationService:
    """Build items from upstream payloads, categorize them and remember the last good result.

    Args:
        settings: Application settings.
        cache: Last-good cache; an in-memory one sized from settings is created when omitted.
        registry: Source registry used to label hit provenance.
    """

    def __init__(
        self,
        settings: Settings,
        cache: CategoryCache | None = None,
        registry: SourceRegistry | None = None,
    ) -> None:
        self._settings = settings
        self._options = settings.aggregate_options()
        self._cache = cache if cache is not None else InMemoryCategoryCache(
            max_size=settings.cache_max_size, ttl_seconds=settings.cache_ttl_s
        )
        self._registry = registry if registry is not None else default_registry()

    @property
    def options(self) -> AggregateOptions:
        return self._options

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    def build_items(
        self,
        results: Iterable[Mapping[str, Any] | ContentItem] = (),
        llm_result: Any = None,
    ) -> list[ContentItem]:
        """Normalize search hits and the LLM answer into content items (LLM items first)."""

        hits = search_items(results, registry=self._registry)
        sources: list[Source] = []
        for item in hits:
            for source in item.sources:
                if source not in sources:
                    sources.append(source)
        return llm_items(resolve_llm_result(llm_result), sources) + hits

    def run(
        self,
        query: str,
        results: Iterable[Mapping[str, Any] | ContentItem] = (),
        llm_result: Any = None,
        candidate_categories: Sequence[Category | Mapping[str, Any]] | None = None,
        options: AggregateOptions | None = None,
    ) -> list[Category]:
        """Categorize one completed fetch.

        Args:
            query: The search query.
            results: Raw search hits.
            llm_result: Raw LLM answer in any supported shape.
            candidate_categories: Optional pre-built categories from the LLM layer.
            options: Per-call override of the settings-derived options.

        Returns:
            Final category list.
        """

        opts = options or self._options
        with query_context(query=query, stage="ingest"):
            items = self.build_items(results, llm_result)
            set_stage("categorize", items=len(items))
            categories = categorize(items, candidate_categories, opts, query=query)
            if any(not c.is_fallback for c in categories):
                self._cache.set(cache_key(query), categories)
            logger.info("Categorized %d items into %d categories", len(items), len(categories))
            return categories

    def last_good(self, query: str) -> list[Category] | None:
        """Return the most recent non-fallback result for ``query``, if cached."""

        return self._cache.get(cache_key(query))


def dump_categories(categories: Sequence[Category], *, percent: bool = False) -> list[dict[str, Any]]:
    """Serialize categories to JSON-ready dicts, optionally with integer display percentages."""

    out: list[dict[str, Any]] = []
    for category in categories:
        payload = category.model_dump(mode="json")
        if percent:
            payload["display"] = to_display_percent(category.metrics)
        out.append(payload)
    return out


def request_options(service: CategorizationService, req: CategorizeRequest) -> AggregateOptions:
    """Apply per-request overrides on top of the service options."""

    updates: dict[str, Any] = {}
    if req.max_categories is not None:
        updates["max_categories"] = req.max_categories
    if req.dedupe is not None:
        updates["dedupe_content"] = req.dedupe
    return service.options.model_copy(update=updates) if updates else service.options
