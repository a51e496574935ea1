"""Tests for the typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from searchlens.cli import app

runner = CliRunner()


def test_categorize_writes_json(tmp_path: Path, sample_hits: list[dict]) -> None:
    """It should categorize a saved response and write the categories as JSON."""

    input_file = tmp_path / "response.json"
    input_file.write_text(
        json.dumps({"query": "fed rates", "results": sample_hits, "llm": "Rates stay high."}),
        encoding="utf-8",
    )
    output = tmp_path / "out" / "categories.json"

    result = runner.invoke(app, ["categorize", str(input_file), "--percent", "-n", "2", "-o", str(output)])
    assert result.exit_code == 0, result.output

    categories = json.loads(output.read_text(encoding="utf-8"))
    assert [c["name"] for c in categories] == ["Key Insights", "Economic Indicators"]
    assert "display" in categories[0]


def test_categorize_accepts_bare_hit_list(tmp_path: Path, sample_hits: list[dict]) -> None:
    """It should treat a top-level JSON list as the search results."""

    input_file = tmp_path / "hits.json"
    input_file.write_text(json.dumps(sample_hits), encoding="utf-8")
    output = tmp_path / "categories.json"

    result = runner.invoke(app, ["categorize", str(input_file), "--output", str(output)])
    assert result.exit_code == 0, result.output
    names = [c["name"] for c in json.loads(output.read_text(encoding="utf-8"))]
    assert names == ["Economic Indicators", "Industry Trends"]


def test_categorize_rejects_invalid_json(tmp_path: Path) -> None:
    """It should fail with a usage error on malformed JSON."""

    input_file = tmp_path / "bad.json"
    input_file.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["categorize", str(input_file)])
    assert result.exit_code != 0


def test_lookup_prints_entry() -> None:
    """It should print a registry entry found by alias."""

    result = runner.invoke(app, ["lookup", "a16z"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["id"] == "andreessen_horowitz"


def test_lookup_unknown_exits_with_error() -> None:
    """It should exit non-zero for unknown names."""

    result = runner.invoke(app, ["lookup", "Nope Capital"])
    assert result.exit_code == 1
