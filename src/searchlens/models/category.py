"""Category model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from searchlens.models.content import ContentItem
from searchlens.models.metrics import DEFAULT_ACCURACY, DEFAULT_CREDIBILITY, DEFAULT_RELEVANCE, Metrics
from searchlens.utils.colors import category_color
from searchlens.utils.ids import category_id


class Category(BaseModel):
    """A named bucket of content items with an aggregate score.

    ``id`` defaults to the slug of ``name``; an explicit id is kept as given. :attr:`key` is the
    slugged id used for merging, so ``"market-analysis"`` and ``"Market Analysis"`` resolve to
    one bucket. ``color`` defaults to the deterministic color of ``key``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    content: list[ContentItem] = Field(default_factory=list)
    metrics: Metrics
    color: str
    description: str | None = None
    is_fallback: bool = False

    @model_validator(mode="before")
    @classmethod
    def _derive_identity(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in ("id", "name"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ValueError(f"{key} must be a string, got {type(data[key]).__name__}")
        name = (data.get("name") or "").strip()
        explicit_id = (data.get("id") or "").strip()
        data["id"] = explicit_id or (category_id(name) if name else "")
        if not data["id"]:
            raise ValueError("category needs a non-empty id or name")
        data["name"] = name or explicit_id.replace("_", " ").replace("-", " ").title()
        if data.get("metrics") is None:
            data["metrics"] = {
                "relevance": DEFAULT_RELEVANCE,
                "accuracy": DEFAULT_ACCURACY,
                "credibility": DEFAULT_CREDIBILITY,
            }
        if data.get("content") is None:
            data["content"] = []
        if not data.get("color") and data.get("id"):
            data["color"] = category_color(category_id(data["id"]))
        return data

    @property
    def key(self) -> str:
        """Slugged id; categories with the same key are one bucket."""

        return category_id(self.id)
