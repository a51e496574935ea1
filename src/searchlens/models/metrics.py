"""Metrics model.

The four-axis score attached to content items and categories. All axes are 0-1 floats.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

OVERALL_PRECISION = 4

# "Unknown but plausible" prior for axes nobody scored.
DEFAULT_RELEVANCE = 0.7
DEFAULT_ACCURACY = 0.75
DEFAULT_CREDIBILITY = 0.7


def mean_score(relevance: float, accuracy: float, credibility: float) -> float:
    """Mean of the three component axes, rounded to avoid floating drift."""

    return round((relevance + accuracy + credibility) / 3.0, OVERALL_PRECISION)


class Metrics(BaseModel):
    """Relevance/accuracy/credibility plus the derived overall score.

    ``overall`` is always recomputed from the other three on construction; a value passed in
    by the caller is discarded.
    """

    model_config = ConfigDict(frozen=True)

    relevance: float = Field(ge=0.0, le=1.0)
    accuracy: float = Field(ge=0.0, le=1.0)
    credibility: float = Field(ge=0.0, le=1.0)
    overall: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode="before")
    @classmethod
    def _recompute_overall(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        try:
            overall = mean_score(
                float(data["relevance"]),
                float(data["accuracy"]),
                float(data["credibility"]),
            )
        except (KeyError, TypeError, ValueError):
            # Let field validation report the missing/invalid component.
            return data
        return {**data, "overall": overall}

    def with_updates(self, **changes: float) -> "Metrics":
        """Return a copy with some components changed and ``overall`` recomputed."""

        data = self.model_dump()
        data.update(changes)
        data.pop("overall", None)
        return Metrics.model_validate(data)
