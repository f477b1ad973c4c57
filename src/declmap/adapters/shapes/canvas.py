"""In-memory drawing surface and the mutable shapes drawn on it.

The canvas is the mutable context handed to every shape handler. It records
each draw/erase call so callers can inspect which side effects a pass caused.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from itertools import count


class CanvasOperationKind(StrEnum):
    DRAW = "draw"
    ERASE = "erase"


@dataclass(frozen=True, slots=True)
class CanvasOperation:
    kind: CanvasOperationKind
    handle: int
    shape: str
    size: float

    def describe(self) -> str:
        return f"{self.kind} {self.shape}#{self.handle} size={self.size:g}"


@dataclass(slots=True)
class Canvas:
    """Mutable drawing context shared by all shape handlers during a pass."""

    operations: list[CanvasOperation] = field(default_factory=list[CanvasOperation])
    _visible: dict[int, tuple[str, float]] = field(
        default_factory=dict[int, tuple[str, float]], repr=False
    )
    _handles: count[int] = field(default_factory=lambda: count(1), repr=False)

    @property
    def visible(self) -> dict[int, tuple[str, float]]:
        return dict(self._visible)

    def draw(self, shape: str, size: float) -> int:
        handle = next(self._handles)
        self._visible[handle] = (shape, size)
        self.operations.append(CanvasOperation(CanvasOperationKind.DRAW, handle, shape, size))
        return handle

    def erase(self, handle: int) -> None:
        shape, size = self._visible.pop(handle)
        self.operations.append(CanvasOperation(CanvasOperationKind.ERASE, handle, shape, size))

    def drain(self) -> list[CanvasOperation]:
        """Return and forget the operations recorded so far."""

        drained = list(self.operations)
        self.operations.clear()
        return drained


class DrawnLine:
    def __init__(self) -> None:
        self.handle: int | None = None
        self.length: float | None = None

    def draw_line(self, canvas: Canvas, length: float) -> None:
        self.handle = canvas.draw("line", length)
        self.length = length

    def clear(self, canvas: Canvas) -> None:
        if self.handle is None:
            return
        canvas.erase(self.handle)
        self.handle = None


class DrawnCircle:
    def __init__(self) -> None:
        self.handle: int | None = None
        self.radius: float | None = None

    def draw_circle(self, canvas: Canvas, radius: float) -> None:
        self.handle = canvas.draw("circle", radius)
        self.radius = radius

    def clear(self, canvas: Canvas) -> None:
        if self.handle is None:
            return
        canvas.erase(self.handle)
        self.handle = None
