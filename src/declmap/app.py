"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from declmap.adapters.shapes import Canvas, iter_scene_passes, shape_handlers, to_declarations
from declmap.config import MapperConfig, get_mapper_config
from declmap.domain.mapping import DeclarationMapper, ReconcileResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from declmap.adapters.shapes import CanvasOperation


log = getLogger(__name__)


@dataclass(slots=True)
class ReplayResult:
    """Outcome of replaying a scene through one mapper."""

    passes: int = 0
    cleared: int = 0
    results: list[ReconcileResult] = field(default_factory=list[ReconcileResult])
    operations: list[CanvasOperation] = field(default_factory=list["CanvasOperation"])


def build_shape_mapper(*, config: MapperConfig | None = None) -> DeclarationMapper[Canvas]:
    """Create a mapper wired with the line and circle handlers."""

    effective_config = config or get_mapper_config()
    return DeclarationMapper[Canvas](
        shape_handlers(),
        duplicate_ids=effective_config.duplicate_ids,
    )


def replay_scene(
    lines: Iterable[str],
    *,
    mapper: DeclarationMapper[Canvas] | None = None,
    canvas: Canvas | None = None,
) -> ReplayResult:
    """Reconcile every pass of a JSON-lines scene in order."""

    effective_mapper = mapper or build_shape_mapper()
    effective_canvas = canvas if canvas is not None else Canvas()
    replay = ReplayResult()

    for scene_pass in iter_scene_passes(lines):
        replay.passes += 1
        if scene_pass.clear:
            destroyed = effective_mapper.clear(effective_canvas)
            replay.cleared += destroyed
            log.info("Pass %s: cleared %s shape(s)", replay.passes, destroyed)
        else:
            result = effective_mapper.reconcile(effective_canvas, to_declarations(scene_pass))
            replay.results.append(result)
            log.info(
                "Pass %s: created=%s, updated=%s, unchanged=%s, retyped=%s, destroyed=%s",
                replay.passes,
                result.created,
                result.updated,
                result.unchanged,
                result.retyped,
                result.destroyed,
            )
        for operation in effective_canvas.drain():
            log.info("  %s", operation.describe())
            replay.operations.append(operation)

    log.info(
        "Finished replay: passes=%s, live=%s, canvas operations=%s",
        replay.passes,
        len(effective_mapper.registry),
        len(replay.operations),
    )
    return replay


def replay_scene_file(path: Path, *, mapper: DeclarationMapper[Canvas] | None = None) -> ReplayResult:
    """Replay the scene stored at ``path``."""

    log.info("Replaying scene %s", path)
    with path.open(encoding="utf-8") as handle:
        return replay_scene(handle, mapper=mapper)
