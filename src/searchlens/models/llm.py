"""Typed LLM output variants.

Upstream LLM responses arrive as free text, a list of snippets, or a summary with sections.
They are resolved into exactly one of these variants at the system boundary
(see :mod:`searchlens.ingest`).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TextResult(BaseModel):
    kind: Literal["text"] = "text"
    value: str


class ListResult(BaseModel):
    kind: Literal["list"] = "list"
    items: list[str] = Field(default_factory=list)


class Section(BaseModel):
    """A titled section of a structured LLM answer."""

    title: str
    content: str


class StructuredResult(BaseModel):
    kind: Literal["structured"] = "structured"
    summary: str = ""
    sections: list[Section] = Field(default_factory=list)


LLMResult = Annotated[Union[TextResult, ListResult, StructuredResult], Field(discriminator="kind")]
