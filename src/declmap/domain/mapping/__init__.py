"""Declarative-to-imperative mapping core.

A :class:`DeclarationMapper` holds one handler per declaration type and a
registry of what the last pass applied. Each ``reconcile`` call:
1) collapses duplicate ids in the input
2) classifies every declaration as create, update or retype
3) dispatches to the matching handlers
4) destroys instances whose ids vanished from the input
5) commits the new registry
"""

from __future__ import annotations

from .declaration import Declaration, DeclarationId, DeclarationType
from .errors import (
    ClearError,
    DeclarationMapperError,
    DuplicateDeclarationError,
    DuplicateHandlerError,
    ReentrantReconciliationError,
    UnregisteredTypeError,
)
from .handler import DeclarationHandler
from .mapper import DeclarationMapper, ReconcileResult
from .plan import ActionKind, DuplicateIdPolicy, PlannedAction, ReconcilePlan
from .registry import DeclarationRegistry, RegistryEntry

__all__ = [
    "ActionKind",
    "ClearError",
    "Declaration",
    "DeclarationHandler",
    "DeclarationId",
    "DeclarationMapper",
    "DeclarationMapperError",
    "DeclarationRegistry",
    "DeclarationType",
    "DuplicateDeclarationError",
    "DuplicateHandlerError",
    "DuplicateIdPolicy",
    "PlannedAction",
    "ReconcilePlan",
    "ReconcileResult",
    "ReentrantReconciliationError",
    "RegistryEntry",
    "UnregisteredTypeError",
]
