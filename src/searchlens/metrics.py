"""Metrics normalization, aggregation and heuristic item scoring.

Upstream producers disagree on scale: the LLM layer reports 0-100 percentages while stored
categories use 0-1 decimals. Everything that enters the pipeline goes through
:func:`normalize_metrics` so downstream code only ever sees clamped 0-1 floats.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlparse

from searchlens.logging import get_logger
from searchlens.models.content import ContentItem
from searchlens.models.metrics import (
    DEFAULT_ACCURACY,
    DEFAULT_CREDIBILITY,
    DEFAULT_RELEVANCE,
    Metrics,
    mean_score,
)

logger = get_logger(__name__)

# An upstream ``overall`` further than this from the recomputed mean is treated as stale.
OVERALL_EPSILON = 0.01

_COMPONENTS = ("relevance", "accuracy", "credibility")
_DEFAULTS = {
    "relevance": DEFAULT_RELEVANCE,
    "accuracy": DEFAULT_ACCURACY,
    "credibility": DEFAULT_CREDIBILITY,
}


def default_metrics() -> Metrics:
    """Return the metrics used when nothing upstream scored an item."""

    return Metrics(**_DEFAULTS)


def _numeric(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def normalize_metrics(raw: Mapping[str, Any] | Metrics | None) -> Metrics:
    """Normalize a partial metrics mapping to clamped 0-1 floats.

    The scale is detected from the values themselves: if any present field's magnitude exceeds
    1 the whole mapping is read as percentages. Missing or non-numeric components fall back to
    the defaults (0.7 relevance/credibility, 0.75 accuracy). ``overall`` is always recomputed.

    Args:
        raw: Partial metrics in either convention, a :class:`Metrics`, or None.

    Returns:
        Normalized metrics.
    """

    if raw is None:
        return default_metrics()
    if isinstance(raw, Metrics):
        raw = raw.model_dump()

    present = {k: v for k in (*_COMPONENTS, "overall") if (v := _numeric(raw.get(k))) is not None}
    scale = 100.0 if any(abs(v) > 1.0 for v in present.values()) else 1.0

    values = {
        k: _clamp(present[k] / scale) if k in present else _DEFAULTS[k]
        for k in _COMPONENTS
    }
    metrics = Metrics(**values)

    upstream_overall = present.get("overall")
    if upstream_overall is not None:
        upstream_overall = _clamp(upstream_overall / scale)
        if abs(upstream_overall - metrics.overall) > OVERALL_EPSILON:
            logger.debug(
                "Discarding stale overall %.4f (recomputed %.4f)", upstream_overall, metrics.overall
            )
    return metrics


def compute_overall(m: Metrics | Mapping[str, Any]) -> float:
    """Mean of relevance, accuracy and credibility, rounded to avoid floating drift."""

    if isinstance(m, Metrics):
        return mean_score(m.relevance, m.accuracy, m.credibility)
    return normalize_metrics(m).overall


def to_display_percent(m: Metrics) -> dict[str, int]:
    """Convert metrics to integer percentages for presentation layers."""

    return {
        "relevance": round(m.relevance * 100),
        "accuracy": round(m.accuracy * 100),
        "credibility": round(m.credibility * 100),
        "overall": round(m.overall * 100),
    }


def mean_metrics(metrics: Iterable[Metrics]) -> Metrics | None:
    """Component-wise mean; ``None`` when there is nothing to average."""

    collected = list(metrics)
    if not collected:
        return None
    n = len(collected)
    return Metrics(
        relevance=_clamp(sum(m.relevance for m in collected) / n),
        accuracy=_clamp(sum(m.accuracy for m in collected) / n),
        credibility=_clamp(sum(m.credibility for m in collected) / n),
    )


_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?%?")
_CITATION_RE = re.compile(r"\(\d{4}\)|\[\d+\]|\set\.? al\.")
_FACTUAL_PHRASES = (
    "according to",
    "study shows",
    "research indicates",
    "data suggests",
    "report finds",
    "analysis shows",
    "statistics show",
    "evidence suggests",
    "survey results",
    "findings indicate",
)


def _relevance_score(text: str, query: str) -> float:
    score = 50.0
    terms = [t for t in query.lower().split() if len(t) > 2]
    if not terms:
        return score

    lowered = text.lower()
    first_line = lowered.split("\n", 1)[0]
    matched = 0
    for term in terms:
        if term in lowered:
            matched += 1
            if term in first_line:
                score += 5
    score += (matched / len(terms)) * 100 * 0.5
    if query.strip().lower() in lowered:
        score += 15
    return min(score, 100.0)


def _credibility_score(item: ContentItem) -> float:
    score = 75.0
    if not item.sources:
        return score
    if len(item.sources) > 1:
        score += min(len(item.sources) * 2, 10)
    domains = {urlparse(s.url).hostname for s in item.sources if s.url}
    domains.discard(None)
    if len(domains) > 1:
        score += min(len(domains) * 2, 10)
    return min(score, 100.0)


def _accuracy_score(text: str) -> float:
    score = 75.0
    numbers = _NUMBER_RE.findall(text)
    score += min(len(numbers), 10)
    if _CITATION_RE.search(text):
        score += 5
    lowered = text.lower()
    factual = sum(1 for p in _FACTUAL_PHRASES if p in lowered)
    score += min(factual * 2, 10)
    return min(score, 100.0)


def score_item(item: ContentItem, query: str = "") -> Metrics:
    """Estimate metrics for an unscored item.

    Relevance follows query-term coverage, credibility grows with the number of sources and
    distinct domains, accuracy with numeric data, citation markers and factual phrasing.
    """

    text = f"{item.title or ''}\n{item.content}" if item.title else item.content
    return normalize_metrics(
        {
            "relevance": _relevance_score(text, query or ""),
            "accuracy": _accuracy_score(text),
            "credibility": _credibility_score(item),
        }
    )
