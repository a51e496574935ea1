"""Pydantic models used across the project."""

from __future__ import annotations

from searchlens.models.category import Category
from searchlens.models.content import ContentItem, Source
from searchlens.models.llm import LLMResult, ListResult, Section, StructuredResult, TextResult
from searchlens.models.metrics import Metrics
from searchlens.models.request import CategorizeRequest

__all__ = [
    "CategorizeRequest",
    "Category",
    "ContentItem",
    "LLMResult",
    "ListResult",
    "Metrics",
    "Section",
    "Source",
    "StructuredResult",
    "TextResult",
]
