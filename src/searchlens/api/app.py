"""FastAPI app exposing the categorization pipeline."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from searchlens.cache import CategoryCache
from searchlens.config import Settings, load_settings
from searchlens.ingest import IngestError
from searchlens.logging import configure_logging, get_logger
from searchlens.models.request import CategorizeRequest
from searchlens.pipeline import CategorizationService, dump_categories, request_options


def create_app(settings: Settings | None = None, cache: CategoryCache | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    service = CategorizationService(settings, cache=cache)
    app = FastAPI(title="SearchLens", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/categorize")
    def categorize(req: CategorizeRequest) -> list[dict[str, Any]]:
        logger.info("API categorize requested", extra={"results": len(req.results)})
        try:
            categories = service.run(
                req.query,
                results=req.results,
                llm_result=req.llm,
                candidate_categories=req.categories,
                options=request_options(service, req),
            )
        except IngestError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
        return dump_categories(categories, percent=req.percent)

    @app.get("/categorize/last")
    def categorize_last(query: str, percent: bool = False) -> list[dict[str, Any]]:
        categories = service.last_good(query)
        if categories is None:
            raise HTTPException(status_code=404, detail="no cached categories for query")
        return dump_categories(categories, percent=percent)

    @app.get("/registry/{entry_id}")
    def registry_entry(entry_id: str) -> dict[str, Any]:
        entry = service.registry.get(entry_id) or service.registry.find_by_name(entry_id)
        if entry is None:
            raise HTTPException(status_code=404, detail="registry entry not found")
        return entry.model_dump(mode="json")

    return app
