"""Shared fixtures."""

from __future__ import annotations

import pytest

from searchlens.models.content import ContentItem, Source


@pytest.fixture
def revenue_item() -> ContentItem:
    return ContentItem(content="Our Q3 revenue grew due to enterprise demand", title="", sources=[])


@pytest.fixture
def sample_hits() -> list[dict]:
    return [
        {
            "title": "Fed holds rates",
            "snippet": "Inflation cooled while GDP growth held steady, the central bank said.",
            "url": "https://news.example.com/fed",
        },
        {
            "title": "a16z on AI",
            "content": "Andreessen Horowitz expects AI adoption to reshape the software industry.",
            "source": "a16z",
            "url": "",
        },
        {"title": "No text here", "url": "https://empty.example.com"},
    ]


@pytest.fixture
def two_sources() -> list[Source]:
    return [
        Source(name="Reuters", url="https://www.reuters.com/a"),
        Source(name="Bloomberg", url="https://www.bloomberg.com/b"),
    ]
