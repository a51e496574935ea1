"""Read-only source registry.

Looks up VC firms, verified research sources and company contacts by id (slug of the name) or
by name/alias. Only used to label :class:`~searchlens.models.content.Source` provenance; the
classifier and aggregator never consult it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from searchlens.logging import get_logger
from searchlens.models.content import Source
from searchlens.registry import data
from searchlens.utils.ids import slugify

logger = get_logger(__name__)

EntryKind = Literal["vc_firm", "verified_source", "company_contact"]

# Source types the registry may overwrite with a more specific kind.
GENERIC_SOURCE_TYPES = frozenset({"", "web", "unknown"})


class RegistryEntry(BaseModel):
    """One directory entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    kind: EntryKind
    group: str | None = None
    url: str | None = None
    title: str | None = None
    aliases: tuple[str, ...] = ()
    focus: tuple[str, ...] = ()
    handles: dict[str, str] = Field(default_factory=dict)


class SourceRegistry:
    """Immutable lookup table over the bundled directories."""

    def __init__(self, entries: list[RegistryEntry] | None = None) -> None:
        built = entries if entries is not None else _bundled_entries()
        by_id: dict[str, RegistryEntry] = {}
        by_name: dict[str, str] = {}
        for entry in built:
            if entry.id in by_id:
                logger.debug("Duplicate registry id %s ignored", entry.id)
                continue
            by_id[entry.id] = entry
            for key in (entry.name, *entry.aliases):
                by_name.setdefault(key.strip().lower(), entry.id)
        self._by_id: Mapping[str, RegistryEntry] = MappingProxyType(by_id)
        self._by_name: Mapping[str, str] = MappingProxyType(by_name)

    def __contains__(self, entry_id: object) -> bool:
        return isinstance(entry_id, str) and entry_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._by_id.values())

    @property
    def entries(self) -> Mapping[str, RegistryEntry]:
        return self._by_id

    def ids(self) -> list[str]:
        return list(self._by_id)

    def get(self, entry_id: str) -> RegistryEntry | None:
        """Get an entry by id."""

        return self._by_id.get(entry_id)

    def find_by_name(self, name: str) -> RegistryEntry | None:
        """Find an entry by display name or alias (case-insensitive)."""

        if not name:
            return None
        entry_id = self._by_name.get(name.strip().lower(), slugify(name))
        return self._by_id.get(entry_id)

    def enrich(self, source: Source) -> Source:
        """Return ``source`` with a registry kind as its type when the name is known.

        Sources that already carry a specific type are left alone.
        """

        if source.type.strip().lower() not in GENERIC_SOURCE_TYPES:
            return source
        entry = self.find_by_name(source.name)
        if entry is None:
            return source
        return source.model_copy(update={"type": entry.kind, "url": source.url or (entry.url or "")})


def _entry(kind: EntryKind, raw: Mapping[str, Any], *, group: str | None = None) -> RegistryEntry:
    return RegistryEntry(
        id=slugify(raw["name"]),
        name=raw["name"],
        kind=kind,
        group=group,
        url=raw.get("url"),
        title=raw.get("title"),
        aliases=tuple(raw.get("aliases", ())),
        focus=tuple(raw.get("focus", ())),
        handles=dict(raw.get("handles", {})),
    )


def _bundled_entries() -> list[RegistryEntry]:
    entries = [_entry("vc_firm", raw) for raw in data.VC_FIRMS]
    for group, sources in data.VERIFIED_SOURCES.items():
        entries.extend(_entry("verified_source", raw, group=group) for raw in sources)
    for company, contacts in data.COMPANY_CONTACTS.items():
        entries.extend(_entry("company_contact", raw, group=company) for raw in contacts)
    return entries


_default_registry = SourceRegistry()


def default_registry() -> SourceRegistry:
    """Return the shared registry over the bundled tables."""

    return _default_registry
