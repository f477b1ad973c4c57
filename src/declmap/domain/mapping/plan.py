"""Classification of one reconciliation pass.

The plan is computed without touching any handler:
- input duplicates are collapsed (or rejected) first
- every input declaration must have a registered handler, otherwise the pass
  fails before any side effect happens
- create/update/retype actions keep input order, destroy actions follow in
  committed-registry order
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .errors import DuplicateDeclarationError, UnregisteredTypeError

if TYPE_CHECKING:
    from collections.abc import Container, Iterable

    from .declaration import Declaration, DeclarationId
    from .registry import DeclarationRegistry, RegistryEntry


class ActionKind(StrEnum):
    """Transition applied to one identity during a pass."""

    CREATE = "create"
    UPDATE = "update"
    RETYPE = "retype"
    DESTROY = "destroy"


class DuplicateIdPolicy(StrEnum):
    """How a pass treats the same declaration id appearing more than once."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True, slots=True, kw_only=True)
class PlannedAction:
    """One handler dispatch scheduled by the plan.

    ``declaration`` is the incoming declaration and is ``None`` only for
    :attr:`ActionKind.DESTROY`. ``previous`` is the committed entry for the id
    and is ``None`` only for :attr:`ActionKind.CREATE`.
    """

    kind: ActionKind
    declaration_id: DeclarationId
    declaration: Declaration | None = None
    previous: RegistryEntry | None = None

    def incoming(self) -> Declaration:
        if self.declaration is None:
            raise ValueError(f"{self.kind} action for {self.declaration_id!r} has no declaration")
        return self.declaration

    def committed(self) -> RegistryEntry:
        if self.previous is None:
            raise ValueError(f"{self.kind} action for {self.declaration_id!r} has no prior entry")
        return self.previous


@dataclass(frozen=True, slots=True)
class ReconcilePlan:
    """Ordered actions for one pass."""

    actions: tuple[PlannedAction, ...] = ()

    def of_kind(self, kind: ActionKind) -> tuple[PlannedAction, ...]:
        return tuple(action for action in self.actions if action.kind is kind)

    def ids_for(self, kind: ActionKind) -> tuple[DeclarationId, ...]:
        return tuple(action.declaration_id for action in self.of_kind(kind))

    @property
    def is_empty(self) -> bool:
        return not self.actions


def collapse_duplicate_ids(
    declarations: Iterable[Declaration],
    *,
    policy: DuplicateIdPolicy = DuplicateIdPolicy.LAST_WINS,
) -> dict[DeclarationId, Declaration]:
    """Index declarations by id, applying ``policy`` to repeated ids.

    With ``LAST_WINS`` the last occurrence replaces earlier ones but keeps the
    position of the first occurrence.
    """

    latest: dict[DeclarationId, Declaration] = {}
    for declaration in declarations:
        if policy is DuplicateIdPolicy.REJECT and declaration.id in latest:
            raise DuplicateDeclarationError(declaration.id)
        latest[declaration.id] = declaration
    return latest


def plan_reconciliation(
    registry: DeclarationRegistry,
    declarations: Iterable[Declaration],
    *,
    handled_types: Container[object],
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.LAST_WINS,
) -> ReconcilePlan:
    """Classify ``declarations`` against the committed ``registry``."""

    incoming = collapse_duplicate_ids(declarations, policy=duplicate_ids)

    for declaration_id, declaration in incoming.items():
        if declaration.type not in handled_types:
            raise UnregisteredTypeError(declaration.type, declaration_id)

    actions: list[PlannedAction] = []
    for declaration_id, declaration in incoming.items():
        previous = registry.get(declaration_id)
        if previous is None:
            kind = ActionKind.CREATE
        elif previous.declaration.type == declaration.type:
            kind = ActionKind.UPDATE
        else:
            kind = ActionKind.RETYPE
        actions.append(
            PlannedAction(
                kind=kind,
                declaration_id=declaration_id,
                declaration=declaration,
                previous=previous,
            )
        )

    for declaration_id, previous in registry.entries():
        if declaration_id in incoming:
            continue
        actions.append(
            PlannedAction(
                kind=ActionKind.DESTROY,
                declaration_id=declaration_id,
                previous=previous,
            )
        )

    return ReconcilePlan(tuple(actions))
