"""SearchLens: categorize aggregated search results into scored buckets."""

from __future__ import annotations

from searchlens.categories import AggregateOptions, aggregate, classify, enhance
from searchlens.metrics import compute_overall, normalize_metrics, to_display_percent
from searchlens.models import Category, ContentItem, Metrics, Source
from searchlens.pipeline import CategorizationService, categorize

__version__ = "0.1.0"

__all__ = [
    "AggregateOptions",
    "CategorizationService",
    "Category",
    "ContentItem",
    "Metrics",
    "Source",
    "aggregate",
    "categorize",
    "classify",
    "compute_overall",
    "enhance",
    "normalize_metrics",
    "to_display_percent",
]
