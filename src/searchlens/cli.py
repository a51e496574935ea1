"""CLI entrypoints for SearchLens."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from searchlens.config import load_settings
from searchlens.ingest import IngestError
from searchlens.logging import configure_logging, get_logger
from searchlens.models.request import CategorizeRequest
from searchlens.pipeline import CategorizationService, dump_categories, request_options
from searchlens.registry import default_registry

app = typer.Typer(add_completion=False, help="SearchLens search result categorization CLI")
logger = get_logger(__name__)


@app.command()
def categorize(
    input_file: Path = typer.Argument(
        ...,
        help="UTF-8 JSON file with `results`, optional `llm` and optional `categories`.",
        exists=True,
        dir_okay=False,
    ),
    query: str | None = typer.Option(None, "--query", "-q", help="Search query (overrides the file)"),
    max_categories: int | None = typer.Option(
        None, "--max-categories", "-n", min=1, max=50, help="Category cap (overrides SEARCHLENS_MAX_CATEGORIES)"
    ),
    dedupe: bool = typer.Option(False, "--dedupe", help="De-duplicate content when merging categories"),
    percent: bool = typer.Option(False, "--percent", help="Include integer display percentages"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
) -> None:
    """Categorize one saved search response and print the categories as JSON."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        payload = json.loads(input_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{input_file} is not valid JSON: {e}") from e
    if isinstance(payload, list):
        payload = {"results": payload}

    try:
        req = CategorizeRequest.model_validate(payload)
    except ValidationError as e:
        raise typer.BadParameter(f"{input_file} has an invalid shape: {e}") from e

    overrides: dict[str, object] = {"percent": percent or req.percent}
    if query is not None:
        overrides["query"] = query
    if max_categories is not None:
        overrides["max_categories"] = max_categories
    if dedupe:
        overrides["dedupe"] = True
    req = req.model_copy(update=overrides)

    service = CategorizationService(settings)
    logger.info("CLI categorize requested")
    try:
        categories = service.run(
            req.query,
            results=req.results,
            llm_result=req.llm,
            candidate_categories=req.categories,
            options=request_options(service, req),
        )
    except IngestError as e:
        raise typer.BadParameter(str(e)) from e

    text = json.dumps(dump_categories(categories, percent=req.percent), ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(str(output))


@app.command()
def lookup(name: str = typer.Argument(..., help="Registry id, name or alias")) -> None:
    """Print a source registry entry as JSON."""

    registry = default_registry()
    entry = registry.get(name) or registry.find_by_name(name)
    if entry is None:
        typer.echo(f"No registry entry for {name!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(entry.model_dump(mode="json"), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
