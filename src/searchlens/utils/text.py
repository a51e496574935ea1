"""Text helpers shared by the classifier and the boundary normalizer."""

from __future__ import annotations

import html
import json
import re
from typing import Any, Dict, Optional

from searchlens.logging import get_logger

logger = get_logger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def strip_markup(text: str) -> str:
    """Drop HTML/XML tags and unescape entities, collapsing whitespace."""

    if not text:
        return ""
    cleaned = _TAG_RE.sub(" ", text)
    cleaned = html.unescape(cleaned)
    return _WS_RE.sub(" ", cleaned).strip()


def normalize_for_compare(text: str) -> str:
    """Normalize text for equality checks (de-duplication, cache keys)."""

    return strip_markup(text).lower()


def phrase_pattern(phrase: str) -> re.Pattern[str]:
    """Compile a case-insensitive, word-boundary pattern for a trigger phrase.

    Internal whitespace in the phrase matches any whitespace run, so ``"balance sheet"``
    also matches ``"balance\\nsheet"``.
    """

    parts = [re.escape(p) for p in phrase.split()]
    body = r"\s+".join(parts)
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Best-effort extraction of one JSON object from LLM output.

    Tries a fenced ```json block first, then the whole text, then the first ``{...}`` span.
    Returns ``None`` instead of raising when nothing parses.
    """

    if not text:
        return None

    cleaned = text.strip()

    m = re.search(r"```(?:json)?\s*\n?(.*?)\n?```", cleaned, re.DOTALL | re.IGNORECASE)
    if m:
        inner = m.group(1).strip()
        if inner.startswith("{") and inner.endswith("}"):
            try:
                return json.loads(inner)
            except json.JSONDecodeError:
                logger.debug("extract_json_object: fenced JSON parse failed")

    if cleaned.startswith("{") and cleaned.endswith("}"):
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError:
            logger.debug("extract_json_object: whole-text JSON parse failed")

    m = re.search(r"\{[^{}]*(?:\{[^{}]*\}[^{}]*)*\}", cleaned, re.DOTALL)
    if m:
        try:
            return json.loads(m.group(0))
        except json.JSONDecodeError:
            logger.debug("extract_json_object: regex-based JSON parse failed")

    return None
