"""Logging utilities.

Every record emitted while a fetch is being categorized carries the (shortened) query, the
pipeline stage and the number of content items in play, so interleaved API requests can be told
apart in one log stream.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Longer queries are truncated in log records.
QUERY_LOG_WIDTH = 40

_query_var: contextvars.ContextVar[str] = contextvars.ContextVar("searchlens_query", default="-")
_stage_var: contextvars.ContextVar[str] = contextvars.ContextVar("searchlens_stage", default="-")
_items_var: contextvars.ContextVar[int | None] = contextvars.ContextVar("searchlens_items", default=None)


def _short_query(query: str) -> str:
    query = " ".join((query or "").split())
    if not query:
        return "-"
    if len(query) > QUERY_LOG_WIDTH:
        return query[: QUERY_LOG_WIDTH - 3] + "..."
    return query


class _CategorizationFilter(logging.Filter):
    """Inject query, stage and item count into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        items = _items_var.get()
        record.query = _query_var.get()  # type: ignore[attr-defined]
        record.stage = _stage_var.get()  # type: ignore[attr-defined]
        record.items = "-" if items is None else str(items)  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def query_context(*, query: str, stage: str | None = None) -> Any:
    """Bind the query being categorized for the duration of the block.

    The item count starts unset and is filled in with :func:`set_stage` once items are built.

    Args:
        query: Search query (only used as log context).
        stage: Optional pipeline stage name.
    """

    token_query = _query_var.set(_short_query(query))
    token_stage = _stage_var.set(stage or _stage_var.get())
    token_items = _items_var.set(None)
    try:
        yield
    finally:
        _query_var.reset(token_query)
        _stage_var.reset(token_stage)
        _items_var.reset(token_items)


def set_stage(stage: str, *, items: int | None = None) -> None:
    """Move the current query to another pipeline stage, optionally recording the item count."""

    _stage_var.set(stage)
    if items is not None:
        _items_var.set(items)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    # stderr keeps stdout clean for JSON emitted by the CLI.
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.addFilter(_CategorizationFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(stage)s] query=%(query)r items=%(items)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_CategorizationFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
