"""Committed declaration state carried between reconciliation passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .declaration import Declaration, DeclarationId


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """Last applied declaration and the mapped instance its handler returned.

    ``mapped`` is a non-owning reference: the handler created it and is the
    only party allowed to release it.
    """

    declaration: Declaration
    mapped: object


@dataclass(frozen=True, slots=True)
class DeclarationRegistry:
    """Read-only view of one committed pass, keyed by declaration id.

    The mapper never edits a registry in place. A pass builds a fresh mapping
    and swaps it in with :meth:`with_entries`, so observers only see fully
    committed state.
    """

    _entries: dict[DeclarationId, RegistryEntry] = field(
        default_factory=dict["DeclarationId", RegistryEntry], repr=False
    )

    @classmethod
    def with_entries(cls, entries: Mapping[DeclarationId, RegistryEntry]) -> DeclarationRegistry:
        return cls(dict(entries))

    def get(self, declaration_id: DeclarationId) -> RegistryEntry | None:
        return self._entries.get(declaration_id)

    def mapped_for(self, declaration_id: DeclarationId) -> object:
        entry = self._entries.get(declaration_id)
        if entry is None:
            raise KeyError(declaration_id)
        return entry.mapped

    def ids(self) -> tuple[DeclarationId, ...]:
        return tuple(self._entries)

    def entries(self) -> tuple[tuple[DeclarationId, RegistryEntry], ...]:
        return tuple(self._entries.items())

    def declarations(self) -> tuple[Declaration, ...]:
        return tuple(entry.declaration for entry in self._entries.values())

    def __contains__(self, declaration_id: object) -> bool:
        return declaration_id in self._entries

    def __iter__(self) -> Iterator[DeclarationId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


EMPTY_REGISTRY = DeclarationRegistry()
