"""Handler contract for one declaration type."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .declaration import Declaration, DeclarationType


@runtime_checkable
class DeclarationHandler[C, T: DeclarationType, D: Declaration, M](Protocol):
    """Create, update and destroy mapped instances for a single declaration type.

    ``C`` is the caller's mutable context, ``T`` the discriminator this handler
    governs, ``D`` the declaration type and ``M`` the mapped instance it owns.
    Handlers own their mapped instances; the mapper only keeps references.
    """

    def type(self) -> T:
        """Return the constant discriminator governed by this handler."""
        ...

    def create(self, context: C, dec: D) -> M:
        """Establish the side effect for a declaration entering the live state."""
        ...

    def update(self, context: C, dec: D, old_dec: D, mapped: M) -> M:
        """Bring ``mapped`` in line with ``dec``.

        Return ``mapped`` itself when nothing changed, or a replacement after
        tearing the old side effect down.
        """
        ...

    def destroyed(self, context: C, old_dec: D, mapped: M) -> None:
        """Release the side effect of a declaration that left the live state."""
        ...
