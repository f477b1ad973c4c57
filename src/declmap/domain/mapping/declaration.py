"""Declaration contract shared by the mapper and its handlers."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol, runtime_checkable

type DeclarationId = Hashable
type DeclarationType = Hashable


@runtime_checkable
class Declaration(Protocol):
    """Immutable description of one desired element.

    Only ``id`` and ``type`` are read by the mapper. Everything else on a
    declaration is payload interpreted by the handler registered for ``type``.
    A changed declaration is a new value carrying the same ``id``.
    """

    @property
    def id(self) -> DeclarationId: ...

    @property
    def type(self) -> DeclarationType: ...
