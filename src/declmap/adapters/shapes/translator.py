"""Translate scene payloads into shape declarations."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .declarations import Circle, Line
from .schema import CirclePayload, LinePayload, ScenePass

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .declarations import ShapeDeclaration


log = getLogger(__name__)


class SceneFormatError(ValueError):
    """Raised when a scene line is not a valid pass payload."""

    def __init__(self, line_number: int, detail: str) -> None:
        self.line_number = line_number
        super().__init__(f"Invalid scene pass on line {line_number}: {detail}")


def to_declaration(payload: LinePayload | CirclePayload) -> ShapeDeclaration:
    match payload:
        case LinePayload():
            return Line(id=payload.id, length=payload.length)
        case CirclePayload():
            return Circle(id=payload.id, radius=payload.radius)


def to_declarations(scene_pass: ScenePass) -> list[ShapeDeclaration]:
    return [to_declaration(payload) for payload in scene_pass.declarations]


def parse_scene_pass(raw: str, *, line_number: int = 1) -> ScenePass:
    try:
        return ScenePass.model_validate_json(raw)
    except ValidationError as exc:
        raise SceneFormatError(line_number, str(exc)) from exc


def iter_scene_passes(lines: Iterable[str]) -> Iterator[ScenePass]:
    """Yield one :class:`ScenePass` per non-blank JSON line."""

    for line_number, raw in enumerate(lines, start=1):
        if not raw.strip():
            continue
        scene_pass = parse_scene_pass(raw, line_number=line_number)
        log.debug(
            "Parsed scene line %s: clear=%s, declarations=%s",
            line_number,
            scene_pass.clear,
            len(scene_pass.declarations),
        )
        yield scene_pass
