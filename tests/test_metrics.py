"""Tests for metrics normalization and scoring."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from searchlens.metrics import (
    compute_overall,
    default_metrics,
    mean_metrics,
    normalize_metrics,
    score_item,
    to_display_percent,
)
from searchlens.models.content import ContentItem, Source
from searchlens.models.metrics import Metrics


def test_overall_is_recomputed_on_construction() -> None:
    """It should discard a caller-supplied overall and use the component mean."""

    m = Metrics(relevance=0.5, accuracy=0.5, credibility=0.5, overall=0.99)
    assert m.overall == 0.5


def test_overall_is_rounded() -> None:
    """It should round overall to four decimals."""

    m = Metrics(relevance=0.7, accuracy=0.75, credibility=0.7)
    assert m.overall == 0.7167
    assert compute_overall(m) == 0.7167


def test_metrics_reject_out_of_range_values() -> None:
    """It should refuse components outside 0-1 when built directly."""

    with pytest.raises(ValidationError):
        Metrics(relevance=1.5, accuracy=0.5, credibility=0.5)


def test_with_updates_recomputes_overall() -> None:
    """It should recompute overall after changing a component."""

    m = Metrics(relevance=0.3, accuracy=0.3, credibility=0.3).with_updates(relevance=0.9)
    assert m.relevance == 0.9
    assert m.overall == 0.5


def test_normalize_fills_defaults() -> None:
    """It should fill every missing component with its default prior."""

    assert normalize_metrics({}) == default_metrics()
    assert normalize_metrics(None) == default_metrics()
    m = normalize_metrics({"relevance": 0.9})
    assert (m.relevance, m.accuracy, m.credibility) == (0.9, 0.75, 0.7)


def test_normalize_detects_percent_scale() -> None:
    """It should read the whole mapping as percentages when any value exceeds 1."""

    m = normalize_metrics({"relevance": 80, "accuracy": 90, "credibility": 70})
    assert (m.relevance, m.accuracy, m.credibility) == (0.8, 0.9, 0.7)
    assert m.overall == 0.8

    mixed = normalize_metrics({"relevance": 85, "accuracy": 1})
    assert mixed.relevance == 0.85
    assert mixed.accuracy == 0.01


def test_normalize_clamps_and_ignores_garbage() -> None:
    """It should clamp out-of-range values and treat non-numeric ones as missing."""

    m = normalize_metrics({"relevance": 150, "accuracy": 50})
    assert m.relevance == 1.0
    assert m.accuracy == 0.5
    assert m.credibility == 0.7

    assert normalize_metrics({"relevance": -0.2}).relevance == 0.0
    assert normalize_metrics({"relevance": "high", "accuracy": True}).relevance == 0.7
    assert normalize_metrics({"accuracy": float("nan")}).accuracy == 0.75


def test_normalize_ignores_stale_overall() -> None:
    """It should recompute overall even when upstream sent a different one."""

    m = normalize_metrics({"relevance": 0.9, "accuracy": 0.9, "credibility": 0.9, "overall": 0.1})
    assert m.overall == 0.9


def test_display_percent_rounds_to_integers() -> None:
    """It should convert 0-1 values to integer percentages."""

    m = Metrics(relevance=0.856, accuracy=0.9, credibility=0.7)
    assert to_display_percent(m) == {"relevance": 86, "accuracy": 90, "credibility": 70, "overall": 82}


def test_mean_metrics() -> None:
    """It should average component-wise and return None for no input."""

    assert mean_metrics([]) is None
    m = mean_metrics(
        [
            Metrics(relevance=0.2, accuracy=0.4, credibility=0.6),
            Metrics(relevance=0.4, accuracy=0.6, credibility=0.8),
        ]
    )
    assert m is not None
    assert m.relevance == pytest.approx(0.3)
    assert m.accuracy == pytest.approx(0.5)
    assert m.credibility == pytest.approx(0.7)
    assert m.overall == 0.5


def test_score_item_without_query_uses_base_relevance() -> None:
    """It should give a neutral relevance when there is no query."""

    m = score_item(ContentItem(content="Plain text"))
    assert m.relevance == 0.5
    assert m.credibility == 0.75
    assert m.accuracy == 0.75


def test_score_item_rewards_query_match_sources_and_data(two_sources: list[Source]) -> None:
    """It should raise relevance, credibility and accuracy for matching, cited, numeric text."""

    item = ContentItem(
        content="According to a 2023 survey, enterprise demand rose 12%.",
        sources=two_sources,
    )
    m = score_item(item, "enterprise demand")
    assert m.relevance == 1.0
    # Two sources (+4) on two distinct domains (+4).
    assert m.credibility == 0.83
    # Two numbers (+2) and one factual phrase (+2).
    assert m.accuracy == 0.79
