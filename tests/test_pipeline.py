"""Tests for the categorization pipeline and service."""

from __future__ import annotations

from searchlens.cache import InMemoryCategoryCache
from searchlens.categories import KEY_INSIGHTS
from searchlens.config import Settings
from searchlens.models.content import ContentItem
from searchlens.models.request import CategorizeRequest
from searchlens.pipeline import CategorizationService, categorize, dump_categories, request_options


def _service() -> CategorizationService:
    return CategorizationService(Settings(), cache=InMemoryCategoryCache())


def test_categorize_single_item(revenue_item: ContentItem) -> None:
    """It should categorize a plain item list end to end."""

    out = categorize([revenue_item])
    assert [c.name for c in out] == ["Business"]


def test_categorize_fills_empty_candidates() -> None:
    """It should back-fill empty candidates from the items."""

    items = [{"content": f"item {i}"} for i in range(6)]
    out = categorize(items, [{"id": "x", "name": "X"}], {"enhance_limit": 2})
    assert [i.content for i in out[0].content] == ["item 0", "item 1"]


def test_service_run_combines_llm_answer_and_hits(sample_hits: list[dict]) -> None:
    """It should put the LLM answer in Key Insights and classify the hits."""

    service = _service()
    out = service.run("fed rates", results=sample_hits, llm_result="Rates are expected to stay high.")

    assert [c.name for c in out] == [KEY_INSIGHTS, "Economic Indicators", "Industry Trends"]
    summary = out[0].content[0]
    assert summary.title == "Summary"
    assert {s.name for s in summary.sources} == {"news.example.com", "a16z"}


def test_service_remembers_last_good_result(sample_hits: list[dict]) -> None:
    """It should cache non-fallback results under a normalized query key."""

    service = _service()
    out = service.run("Fed Rates", results=sample_hits)
    assert service.last_good("  fed   rates") == out


def test_service_does_not_cache_fallbacks() -> None:
    """It should not cache the default categories."""

    service = _service()
    out = service.run("nothing", results=[])
    assert all(c.is_fallback for c in out)
    assert service.last_good("nothing") is None


def test_service_uses_settings_options() -> None:
    """It should derive aggregation options from settings."""

    service = CategorizationService(Settings(max_categories=2, dedupe_on_merge=True))
    assert service.options.max_categories == 2
    assert service.options.dedupe_content is True
    assert service.options.score_items is False


def test_request_options_override_service_options() -> None:
    """It should apply per-request overrides only when they are set."""

    service = _service()
    assert request_options(service, CategorizeRequest()) == service.options

    opts = request_options(service, CategorizeRequest(max_categories=3, dedupe=True))
    assert opts.max_categories == 3
    assert opts.dedupe_content is True


def test_dump_categories_with_display_percent(revenue_item: ContentItem) -> None:
    """It should serialize categories and optionally add integer percentages."""

    out = categorize([revenue_item])
    plain = dump_categories(out)
    assert "display" not in plain[0]
    assert plain[0]["id"] == "business"

    with_percent = dump_categories(out, percent=True)
    assert with_percent[0]["display"] == {"relevance": 70, "accuracy": 75, "credibility": 70, "overall": 72}


def test_categorize_caps_default_categories() -> None:
    """It should apply the category cap to the fallback pair as well."""

    out = categorize([], None, {"max_categories": 1})
    assert [c.name for c in out] == [KEY_INSIGHTS]
