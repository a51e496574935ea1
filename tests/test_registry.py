"""Tests for the source registry."""

from __future__ import annotations

import pytest

from searchlens.models.content import Source
from searchlens.registry import RegistryEntry, SourceRegistry, default_registry


def test_lookup_by_id_name_and_alias() -> None:
    """It should find entries by slug id, display name or alias."""

    registry = default_registry()
    entry = registry.get("andreessen_horowitz")
    assert entry is not None
    assert entry.kind == "vc_firm"
    assert registry.find_by_name("a16z") == entry
    assert registry.find_by_name("ANDREESSEN HOROWITZ") == entry
    assert registry.find_by_name("McKinsey").id == "mckinsey_company"


def test_unknown_names_return_none() -> None:
    """It should return None for unknown ids and names."""

    registry = default_registry()
    assert registry.get("nope") is None
    assert registry.find_by_name("Nope Capital") is None
    assert registry.find_by_name("") is None
    assert "nope" not in registry


def test_company_contacts_are_grouped_by_company() -> None:
    """It should keep the company as the group of a contact entry."""

    entry = default_registry().get("tim_cook")
    assert entry is not None
    assert entry.kind == "company_contact"
    assert entry.group == "Apple"
    assert entry.title == "CEO"


def test_registry_tables_are_read_only() -> None:
    """It should expose its tables as immutable mappings."""

    registry = default_registry()
    with pytest.raises(TypeError):
        registry.entries["x"] = registry.get("tim_cook")  # type: ignore[index]
    assert len(registry) == len(registry.ids())


def test_enrich_only_overrides_generic_types() -> None:
    """It should label generic sources with the registry kind and leave specific ones alone."""

    registry = default_registry()
    enriched = registry.enrich(Source(name="Sequoia"))
    assert enriched.type == "vc_firm"
    assert enriched.url

    specific = Source(name="Sequoia", type="press_release", url="https://example.com")
    assert registry.enrich(specific) is specific

    unknown = Source(name="Some Blog")
    assert registry.enrich(unknown) is unknown


def test_custom_entries_ignore_duplicate_ids() -> None:
    """It should keep the first entry when ids collide."""

    registry = SourceRegistry(
        [
            RegistryEntry(id="acme", name="Acme", kind="vc_firm"),
            RegistryEntry(id="acme", name="Acme Two", kind="verified_source"),
        ]
    )
    assert len(registry) == 1
    assert registry.get("acme").name == "Acme"
