"""Content item and provenance models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from searchlens.models.metrics import Metrics


class Source(BaseModel):
    """Provenance/citation metadata for a content item."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = ""
    type: str = "web"


class ContentItem(BaseModel):
    """A unit of retrieved information (search hit, LLM summary, section...).

    ``content`` may contain markup. ``category`` is an upstream pre-assigned label which the
    classifier honors as-is.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    title: str | None = None
    sources: list[Source] = Field(default_factory=list)
    category: str | None = None
    metrics: Metrics | None = None
