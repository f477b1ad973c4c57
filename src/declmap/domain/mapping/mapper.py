"""Reconciliation engine mapping declarations onto handler-owned instances.

Failure semantics:
- lookup failures (unregistered type, rejected duplicate id) happen while
  planning, before any handler runs, and leave the registry untouched
- handler exceptions during ``reconcile`` propagate as-is after the registry
  is set to the state actually reached: entries created or updated earlier in
  the pass are kept, entries whose instance was already destroyed are dropped,
  and entries not yet reached (or whose handler failed) keep their prior value.
  Nothing is rolled back, and no instance is handed to ``destroyed`` twice
- ``clear`` always empties the registry and reports failed destroys afterwards
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from .errors import (
    ClearError,
    DuplicateHandlerError,
    ReentrantReconciliationError,
    UnregisteredTypeError,
)
from .plan import ActionKind, DuplicateIdPolicy, plan_reconciliation
from .registry import EMPTY_REGISTRY, DeclarationRegistry, RegistryEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .declaration import Declaration, DeclarationId, DeclarationType
    from .handler import DeclarationHandler
    from .plan import PlannedAction, ReconcilePlan


log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileResult:
    """Handler calls performed by one pass.

    ``unchanged`` counts the updates whose handler returned the very instance
    it was given.
    """

    created: int = 0
    updated: int = 0
    retyped: int = 0
    destroyed: int = 0
    unchanged: int = 0


class DeclarationMapper[C]:
    """Keep handler-owned instances in sync with successive declaration lists.

    The handler set is fixed at construction. The mapper is synchronous and
    not reentrant: a handler must not call ``reconcile`` or ``clear`` on the
    mapper that is invoking it.
    """

    def __init__(
        self,
        handlers: Iterable[DeclarationHandler[C, Any, Any, Any]],
        *,
        duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.LAST_WINS,
    ) -> None:
        self._handlers: dict[DeclarationType, DeclarationHandler[C, Any, Any, Any]] = {}
        for handler in handlers:
            declaration_type = handler.type()
            if declaration_type in self._handlers:
                raise DuplicateHandlerError(declaration_type)
            self._handlers[declaration_type] = handler
        self._duplicate_ids = duplicate_ids
        self._registry = EMPTY_REGISTRY
        self._running = False

    @property
    def registry(self) -> DeclarationRegistry:
        return self._registry

    @property
    def types(self) -> tuple[DeclarationType, ...]:
        return tuple(self._handlers)

    @property
    def duplicate_ids(self) -> DuplicateIdPolicy:
        return self._duplicate_ids

    def handler_for(
        self,
        declaration_type: DeclarationType,
        declaration_id: DeclarationId | None = None,
    ) -> DeclarationHandler[C, Any, Any, Any]:
        handler = self._handlers.get(declaration_type)
        if handler is None:
            raise UnregisteredTypeError(declaration_type, declaration_id)
        return handler

    def plan(self, declarations: Iterable[Declaration]) -> ReconcilePlan:
        """Classify ``declarations`` against the committed registry without side effects."""

        return plan_reconciliation(
            self._registry,
            declarations,
            handled_types=self._handlers,
            duplicate_ids=self._duplicate_ids,
        )

    def reconcile(self, context: C, declarations: Iterable[Declaration]) -> ReconcileResult:
        """Create, update, retype and destroy mapped instances to match ``declarations``."""

        with self._exclusive("reconcile"):
            plan = self.plan(declarations)
            result = ReconcileResult()
            next_entries: dict[DeclarationId, RegistryEntry] = {}
            released: set[DeclarationId] = set()
            try:
                for action in plan.actions:
                    self._apply(context, action, result, next_entries, released)
            except Exception:
                self._registry = self._reached_state(next_entries, released)
                raise
            self._registry = DeclarationRegistry.with_entries(next_entries)

        log.debug(
            "Reconciled %s declaration(s): created=%s, updated=%s, unchanged=%s, "
            "retyped=%s, destroyed=%s",
            len(self._registry),
            result.created,
            result.updated,
            result.unchanged,
            result.retyped,
            result.destroyed,
        )
        return result

    def clear(self, context: C) -> int:
        """Destroy every mapped instance and empty the registry.

        Every entry is attempted even when an earlier ``destroyed`` call fails.
        Returns the number of instances destroyed; raises :class:`ClearError`
        afterwards if any handler failed.
        """

        failures: list[tuple[DeclarationId, Exception]] = []
        destroyed = 0
        with self._exclusive("clear"):
            try:
                for declaration_id, entry in self._registry.entries():
                    try:
                        self._destroy(context, declaration_id, entry)
                    except Exception as exc:
                        log.exception("Error destroying declaration %r during clear", declaration_id)
                        failures.append((declaration_id, exc))
                    else:
                        destroyed += 1
            finally:
                self._registry = EMPTY_REGISTRY

        log.debug("Cleared %s mapped instance(s), %s failure(s)", destroyed, len(failures))
        if failures:
            raise ClearError(tuple(failures)) from failures[0][1]
        return destroyed

    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if self._running:
            raise ReentrantReconciliationError(operation)
        self._running = True
        try:
            yield
        finally:
            self._running = False

    def _apply(
        self,
        context: C,
        action: PlannedAction,
        result: ReconcileResult,
        next_entries: dict[DeclarationId, RegistryEntry],
        released: set[DeclarationId],
    ) -> None:
        declaration_id = action.declaration_id
        try:
            match action.kind:
                case ActionKind.CREATE:
                    next_entries[declaration_id] = self._create(context, action.incoming())
                    result.created += 1
                case ActionKind.UPDATE:
                    previous = action.committed()
                    entry = self._update(context, action.incoming(), previous)
                    next_entries[declaration_id] = entry
                    result.updated += 1
                    if entry.mapped is previous.mapped:
                        result.unchanged += 1
                case ActionKind.RETYPE:
                    self._destroy(context, declaration_id, action.committed())
                    released.add(declaration_id)
                    next_entries[declaration_id] = self._create(context, action.incoming())
                    result.retyped += 1
                case ActionKind.DESTROY:
                    self._destroy(context, declaration_id, action.committed())
                    released.add(declaration_id)
                    result.destroyed += 1
        except Exception:
            log.exception("Error during %s of declaration %r", action.kind, declaration_id)
            raise
        log.debug("Applied %s to declaration %r", action.kind, declaration_id)

    def _reached_state(
        self,
        next_entries: dict[DeclarationId, RegistryEntry],
        released: set[DeclarationId],
    ) -> DeclarationRegistry:
        entries = dict(next_entries)
        for declaration_id, entry in self._registry.entries():
            if declaration_id in entries or declaration_id in released:
                continue
            entries[declaration_id] = entry
        return DeclarationRegistry.with_entries(entries)

    def _create(self, context: C, declaration: Declaration) -> RegistryEntry:
        handler = self.handler_for(declaration.type, declaration.id)
        return RegistryEntry(declaration, handler.create(context, declaration))

    def _update(self, context: C, declaration: Declaration, previous: RegistryEntry) -> RegistryEntry:
        handler = self.handler_for(declaration.type, declaration.id)
        mapped = handler.update(context, declaration, previous.declaration, previous.mapped)
        return RegistryEntry(declaration, mapped)

    def _destroy(self, context: C, declaration_id: DeclarationId, previous: RegistryEntry) -> None:
        handler = self.handler_for(previous.declaration.type, declaration_id)
        handler.destroyed(context, previous.declaration, previous.mapped)
