"""Reusable declarations and call-recording handlers for mapper tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

type Method = Literal["create", "update", "destroyed"]


@dataclass(frozen=True, slots=True)
class Decl:
    id: str
    type: str
    size: int = 0


@dataclass(frozen=True, slots=True)
class HandlerCall:
    method: Method
    handler_type: str
    declaration_id: str
    declaration: Decl
    old_declaration: Decl | None = None


@dataclass(slots=True)
class CallLog:
    """Mutable context recording every handler call in order."""

    calls: list[HandlerCall] = field(default_factory=list[HandlerCall])

    def record(self, call: HandlerCall) -> None:
        self.calls.append(call)

    def summary(self) -> list[tuple[Method, str, str]]:
        return [(call.method, call.handler_type, call.declaration_id) for call in self.calls]

    def count(self, method: Method, declaration_id: str | None = None) -> int:
        return sum(
            1
            for call in self.calls
            if call.method == method
            and (declaration_id is None or call.declaration_id == declaration_id)
        )

    def reset(self) -> None:
        self.calls.clear()


class HandlerBoom(RuntimeError):
    """Failure injected by :class:`RecordingHandler`."""


class Mapped:
    def __init__(self, declaration: Decl) -> None:
        self.declaration = declaration
        self.alive = True


class RecordingHandler:
    """Handler recording its calls into the :class:`CallLog` context.

    ``replace_on_change`` makes ``update`` return a fresh instance whenever the
    payload differs. ``fail_on`` lists ``(method, id)`` pairs that raise
    :class:`HandlerBoom` after being recorded.
    """

    def __init__(
        self,
        declaration_type: str,
        *,
        replace_on_change: bool = False,
        fail_on: set[tuple[Method, str]] | None = None,
    ) -> None:
        self._type = declaration_type
        self.replace_on_change = replace_on_change
        self.fail_on = fail_on or set()

    def type(self) -> str:
        return self._type

    def create(self, context: CallLog, dec: Decl) -> Mapped:
        self._record(context, "create", dec)
        return Mapped(dec)

    def update(self, context: CallLog, dec: Decl, old_dec: Decl, mapped: Mapped) -> Mapped:
        self._record(context, "update", dec, old_dec)
        if dec == old_dec:
            return mapped
        if self.replace_on_change:
            mapped.alive = False
            return Mapped(dec)
        mapped.declaration = dec
        return mapped

    def destroyed(self, context: CallLog, old_dec: Decl, mapped: Mapped) -> None:
        self._record(context, "destroyed", old_dec)
        mapped.alive = False

    def _record(
        self, context: CallLog, method: Method, dec: Decl, old_dec: Decl | None = None
    ) -> None:
        context.record(
            HandlerCall(
                method=method,
                handler_type=self._type,
                declaration_id=dec.id,
                declaration=dec,
                old_declaration=old_dec,
            )
        )
        if (method, dec.id) in self.fail_on:
            raise HandlerBoom(f"{method} failed for {dec.id}")
