"""Immutable shape declarations understood by the shape handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class ShapeType(StrEnum):
    LINE = "line"
    CIRCLE = "circle"


type ShapeId = str | int


@dataclass(frozen=True, slots=True, kw_only=True)
class Line:
    id: ShapeId
    length: float
    type: Literal[ShapeType.LINE] = ShapeType.LINE


@dataclass(frozen=True, slots=True, kw_only=True)
class Circle:
    id: ShapeId
    radius: float
    type: Literal[ShapeType.CIRCLE] = ShapeType.CIRCLE


type ShapeDeclaration = Line | Circle
