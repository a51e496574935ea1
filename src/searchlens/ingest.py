"""Boundary normalization.

Search providers and the LLM layer hand over loosely shaped payloads: the LLM answer may be a
plain string, a JSON string, a list of snippets or a ``{summary, sections}`` object. This
module resolves each payload exactly once into a typed variant and then into
:class:`~searchlens.models.content.ContentItem` objects, so the classifier and aggregator only
ever see one shape.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any
from urllib.parse import urlparse

from pydantic import TypeAdapter, ValidationError

from searchlens.categories.keywords import KEY_INSIGHTS
from searchlens.logging import get_logger
from searchlens.metrics import normalize_metrics
from searchlens.models.content import ContentItem, Source
from searchlens.models.llm import LLMResult, ListResult, Section, StructuredResult, TextResult
from searchlens.registry import SourceRegistry
from searchlens.utils.text import extract_json_object

logger = get_logger(__name__)

_LLM_ADAPTER: TypeAdapter[LLMResult] = TypeAdapter(LLMResult)

_TEXT_KEYS = ("content", "text", "answer", "value", "snippet", "description")


class IngestError(ValueError):
    """Raised when an upstream payload has no recognizable shape."""


def resolve_llm_result(raw: Any) -> TextResult | ListResult | StructuredResult | None:
    """Resolve a duck-typed LLM payload into a tagged variant.

    Args:
        raw: String, JSON string, list, mapping, typed variant, or None.

    Returns:
        The typed variant, or None when there was no LLM output at all.

    Raises:
        IngestError: If the payload shape is not recognized.
    """

    if raw is None:
        return None
    if isinstance(raw, (TextResult, ListResult, StructuredResult)):
        return raw
    if isinstance(raw, str):
        stripped = raw.strip()
        if stripped.startswith("{") or stripped.startswith("```"):
            obj = extract_json_object(stripped)
            if obj is not None:
                return resolve_llm_result(obj)
        return TextResult(value=raw)
    if isinstance(raw, Mapping):
        return _resolve_mapping(raw)
    if isinstance(raw, (list, tuple)):
        return ListResult(items=[t for t in (_text_of(x) for x in raw) if t])
    raise IngestError(f"Unsupported LLM payload type: {type(raw).__name__}")


def _resolve_mapping(raw: Mapping[str, Any]) -> TextResult | ListResult | StructuredResult:
    if "kind" in raw:
        try:
            return _LLM_ADAPTER.validate_python(dict(raw))
        except ValidationError as e:
            raise IngestError(f"Invalid tagged LLM payload: {e}") from e

    if "summary" in raw or "sections" in raw:
        summary = raw.get("summary")
        return StructuredResult(
            summary=summary if isinstance(summary, str) else (_text_of(summary) or ""),
            sections=_sections(raw.get("sections")),
        )

    for key in _TEXT_KEYS:
        value = raw.get(key)
        if isinstance(value, str):
            return TextResult(value=value)

    raise IngestError(f"Unrecognized LLM payload keys: {sorted(raw)[:10]}")


def _sections(raw: Any) -> list[Section]:
    if not raw:
        return []
    if isinstance(raw, Mapping):
        pairs: Iterable[tuple[Any, Any]] = raw.items()
    elif isinstance(raw, (list, tuple)):
        pairs = []
        for entry in raw:
            if isinstance(entry, Mapping):
                pairs.append((entry.get("title") or entry.get("name"), entry.get("content") or entry.get("text")))
            else:
                logger.warning("Ignoring section of type %s", type(entry).__name__)
    else:
        logger.warning("Ignoring sections of type %s", type(raw).__name__)
        return []

    sections: list[Section] = []
    for title, content in pairs:
        text = _text_of(content)
        if not title or not text:
            logger.warning("Ignoring section without title or content: %r", title)
            continue
        sections.append(Section(title=str(title), content=text))
    return sections


def _text_of(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, Mapping):
        for key in _TEXT_KEYS:
            inner = value.get(key)
            if isinstance(inner, str) and inner.strip():
                return inner.strip()
        return ""
    if isinstance(value, (list, tuple)):
        return "\n".join(t for t in (_text_of(v) for v in value) if t)
    return ""


def llm_items(
    result: TextResult | ListResult | StructuredResult | None,
    sources: Sequence[Source] = (),
) -> list[ContentItem]:
    """Turn a resolved LLM variant into content items.

    Text answers and structured summaries are labelled Key Insights; structured sections keep
    their own title as label; list entries are left for the classifier.
    """

    if result is None:
        return []

    srcs = list(sources)
    if isinstance(result, TextResult):
        if not result.value.strip():
            return []
        return [ContentItem(content=result.value, title="Summary", sources=srcs, category=KEY_INSIGHTS)]

    if isinstance(result, ListResult):
        return [ContentItem(content=text, sources=srcs) for text in result.items if text.strip()]

    items: list[ContentItem] = []
    if result.summary.strip():
        items.append(ContentItem(content=result.summary, title="Summary", sources=srcs, category=KEY_INSIGHTS))
    for section in result.sections:
        items.append(
            ContentItem(content=section.content, title=section.title, sources=srcs, category=section.title)
        )
    return items


def search_items(
    hits: Iterable[Mapping[str, Any] | ContentItem],
    registry: SourceRegistry | None = None,
) -> list[ContentItem]:
    """Convert raw search hits into content items.

    Hits without any text are skipped with a warning. When a registry is given, each hit's
    source is labelled with its registry kind.

    Raises:
        TypeError: If ``hits`` is not an iterable of hits.
    """

    if isinstance(hits, (str, bytes, Mapping)) or not isinstance(hits, Iterable):
        raise TypeError(f"hits must be an iterable of mappings, got {type(hits).__name__}")

    items: list[ContentItem] = []
    for index, hit in enumerate(hits):
        if isinstance(hit, ContentItem):
            items.append(hit)
            continue
        if not isinstance(hit, Mapping):
            logger.warning("Skipping search hit %d: unsupported type %s", index, type(hit).__name__)
            continue

        text = _text_of(hit)
        if not text:
            logger.warning("Skipping search hit %d: no text", index)
            continue

        source = _hit_source(hit)
        if registry is not None:
            source = registry.enrich(source)

        raw_metrics = hit.get("metrics")
        category = hit.get("category")
        items.append(
            ContentItem(
                content=text,
                title=hit.get("title") if isinstance(hit.get("title"), str) else None,
                sources=[source],
                category=category if isinstance(category, str) and category.strip() else None,
                metrics=normalize_metrics(raw_metrics) if isinstance(raw_metrics, Mapping) else None,
            )
        )
    return items


def _hit_source(hit: Mapping[str, Any]) -> Source:
    url = hit.get("url") or hit.get("link") or ""
    url = url if isinstance(url, str) else ""
    name = hit.get("source") or hit.get("publisher")
    if not isinstance(name, str) or not name.strip():
        name = urlparse(url).hostname or "unknown"
    source_type = hit.get("type") or hit.get("source_type") or "web"
    return Source(name=name, url=url, type=source_type if isinstance(source_type, str) else "web")
