"""Public interface for the shape-drawing adapter."""

from __future__ import annotations

from .canvas import Canvas, CanvasOperation, CanvasOperationKind, DrawnCircle, DrawnLine
from .declarations import Circle, Line, ShapeDeclaration, ShapeType
from .handlers import CircleHandler, LineHandler, shape_handlers
from .schema import CirclePayload, LinePayload, ScenePass
from .translator import (
    SceneFormatError,
    iter_scene_passes,
    parse_scene_pass,
    to_declaration,
    to_declarations,
)

__all__ = [
    "Canvas",
    "CanvasOperation",
    "CanvasOperationKind",
    "Circle",
    "CircleHandler",
    "CirclePayload",
    "DrawnCircle",
    "DrawnLine",
    "Line",
    "LineHandler",
    "LinePayload",
    "SceneFormatError",
    "ScenePass",
    "ShapeDeclaration",
    "ShapeType",
    "iter_scene_passes",
    "parse_scene_pass",
    "shape_handlers",
    "to_declaration",
    "to_declarations",
]
