from __future__ import annotations

import pytest

from declmap.domain.mapping import DeclarationRegistry, RegistryEntry
from tests.helpers.recording import Decl


def test_registry_is_detached_from_source_mapping() -> None:
    mapped = object()
    source = {"1": RegistryEntry(Decl("1", "line"), mapped)}

    registry = DeclarationRegistry.with_entries(source)
    source.clear()

    assert "1" in registry
    assert len(registry) == 1
    assert registry.mapped_for("1") is mapped


def test_registry_lookup_and_iteration() -> None:
    registry = DeclarationRegistry.with_entries(
        {
            "b": RegistryEntry(Decl("b", "line"), "B"),
            "a": RegistryEntry(Decl("a", "circle"), "A"),
        }
    )

    assert list(registry) == ["b", "a"]
    assert registry.ids() == ("b", "a")
    assert registry.get("missing") is None
    assert [entry.mapped for _, entry in registry.entries()] == ["B", "A"]
    assert registry


def test_mapped_for_unknown_id_raises_key_error() -> None:
    registry = DeclarationRegistry()

    assert not registry
    with pytest.raises(KeyError):
        registry.mapped_for("nope")
