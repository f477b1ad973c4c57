"""Declaration handlers drawing lines and circles on a :class:`Canvas`."""

from __future__ import annotations

from typing import Literal

from .canvas import Canvas, DrawnCircle, DrawnLine
from .declarations import Circle, Line, ShapeType


class LineHandler:
    def type(self) -> Literal[ShapeType.LINE]:
        return ShapeType.LINE

    def create(self, context: Canvas, dec: Line) -> DrawnLine:
        drawn = DrawnLine()
        drawn.draw_line(context, dec.length)
        return drawn

    def update(self, context: Canvas, dec: Line, old_dec: Line, mapped: DrawnLine) -> DrawnLine:
        if dec.length == old_dec.length:
            return mapped

        mapped.clear(context)
        mapped.draw_line(context, dec.length)
        return mapped

    def destroyed(self, context: Canvas, old_dec: Line, mapped: DrawnLine) -> None:
        mapped.clear(context)


class CircleHandler:
    def type(self) -> Literal[ShapeType.CIRCLE]:
        return ShapeType.CIRCLE

    def create(self, context: Canvas, dec: Circle) -> DrawnCircle:
        drawn = DrawnCircle()
        drawn.draw_circle(context, dec.radius)
        return drawn

    def update(
        self, context: Canvas, dec: Circle, old_dec: Circle, mapped: DrawnCircle
    ) -> DrawnCircle:
        if dec.radius == old_dec.radius:
            return mapped

        mapped.clear(context)
        mapped.draw_circle(context, dec.radius)
        return mapped

    def destroyed(self, context: Canvas, old_dec: Circle, mapped: DrawnCircle) -> None:
        mapped.clear(context)


def shape_handlers() -> tuple[LineHandler, CircleHandler]:
    return LineHandler(), CircleHandler()
