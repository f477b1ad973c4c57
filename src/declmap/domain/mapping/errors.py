"""Errors raised by the declaration mapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .declaration import DeclarationId, DeclarationType


class DeclarationMapperError(RuntimeError):
    """Base class for mapper failures."""


class UnregisteredTypeError(DeclarationMapperError):
    """Raised when a declaration carries a type without a registered handler."""

    def __init__(
        self,
        declaration_type: DeclarationType,
        declaration_id: DeclarationId | None = None,
    ) -> None:
        self.declaration_type = declaration_type
        self.declaration_id = declaration_id
        message = f"No handler registered for declaration type: {declaration_type!r}"
        if declaration_id is not None:
            message += f" (declaration id {declaration_id!r})"
        super().__init__(message)


class DuplicateHandlerError(DeclarationMapperError):
    """Raised when two handlers claim the same declaration type."""

    def __init__(self, declaration_type: DeclarationType) -> None:
        self.declaration_type = declaration_type
        super().__init__(f"Duplicate handler for declaration type: {declaration_type!r}")


class DuplicateDeclarationError(DeclarationMapperError):
    """Raised when one pass contains the same declaration id twice and duplicates are rejected."""

    def __init__(self, declaration_id: DeclarationId) -> None:
        self.declaration_id = declaration_id
        super().__init__(f"Duplicate declaration id in one pass: {declaration_id!r}")


class ReentrantReconciliationError(DeclarationMapperError):
    """Raised when a handler calls back into the mapper that is invoking it."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} while a reconciliation pass is running")


class ClearError(DeclarationMapperError):
    """Raised after ``clear`` when one or more ``destroyed`` calls failed.

    The registry is already empty when this is raised.
    """

    def __init__(self, failures: tuple[tuple[DeclarationId, Exception], ...]) -> None:
        self.failures = failures
        failed_ids = ", ".join(repr(declaration_id) for declaration_id, _ in failures)
        super().__init__(f"Failed to destroy {len(failures)} mapped instance(s): {failed_ids}")
