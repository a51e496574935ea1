"""Request payload shared by the CLI and the HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CategorizeRequest(BaseModel):
    """One completed fetch to categorize.

    ``llm`` and ``categories`` are passed through untyped; they are resolved at the boundary
    by :mod:`searchlens.ingest` and the aggregator.
    """

    query: str = ""
    results: list[dict[str, Any]] = Field(default_factory=list)
    llm: Any = None
    categories: list[dict[str, Any]] | None = None
    max_categories: int | None = Field(default=None, ge=1, le=50)
    dedupe: bool | None = None
    percent: bool = False
