"""Result categorization: classify, aggregate and back-fill categories."""

from __future__ import annotations

from searchlens.categories.aggregator import AggregateOptions, aggregate
from searchlens.categories.classifier import CategoryClassifier, classify, resolve_label
from searchlens.categories.defaults import default_categories
from searchlens.categories.enhancer import enhance
from searchlens.categories.keywords import ALL_RESULTS, DEFAULT_KEYWORD_SETS, KEY_INSIGHTS, KeywordSet

__all__ = [
    "ALL_RESULTS",
    "AggregateOptions",
    "CategoryClassifier",
    "DEFAULT_KEYWORD_SETS",
    "KEY_INSIGHTS",
    "KeywordSet",
    "aggregate",
    "classify",
    "default_categories",
    "enhance",
    "resolve_label",
]
