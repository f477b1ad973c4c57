from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from declmap.app import build_shape_mapper, replay_scene, replay_scene_file
from declmap.config import MapperConfig
from declmap.domain.mapping import DuplicateDeclarationError, DuplicateIdPolicy

if TYPE_CHECKING:
    from pathlib import Path


def test_replay_scene_file_runs_every_pass(scene_file: Path) -> None:
    mapper = build_shape_mapper(config=MapperConfig())

    replay = replay_scene_file(scene_file, mapper=mapper)

    assert replay.passes == 4
    assert replay.cleared == 1
    assert [result.created for result in replay.results] == [2, 0, 0]
    assert [result.destroyed for result in replay.results] == [0, 0, 1]
    assert [operation.describe() for operation in replay.operations] == [
        "draw line#1 size=10",
        "draw circle#2 size=5",
        "erase circle#2 size=5",
        "draw circle#3 size=555",
        "erase line#1 size=10",
        "erase circle#3 size=555",
    ]
    assert len(mapper.registry) == 0


def test_build_shape_mapper_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLMAP_DUPLICATE_IDS", "reject")

    mapper = build_shape_mapper()

    assert mapper.duplicate_ids is DuplicateIdPolicy.REJECT
    assert mapper.types == ("line", "circle")


def test_replay_rejects_duplicates_under_reject_policy() -> None:
    mapper = build_shape_mapper(config=MapperConfig(duplicate_ids=DuplicateIdPolicy.REJECT))
    lines = [
        '{"declarations": [{"id": "1", "type": "line", "length": 1},'
        ' {"id": "1", "type": "line", "length": 2}]}'
    ]

    with pytest.raises(DuplicateDeclarationError):
        replay_scene(lines, mapper=mapper)


def test_replay_keeps_last_duplicate_by_default() -> None:
    mapper = build_shape_mapper(config=MapperConfig())
    lines = [
        '{"declarations": [{"id": "1", "type": "line", "length": 1},'
        ' {"id": "1", "type": "circle", "radius": 2}]}'
    ]

    replay = replay_scene(lines, mapper=mapper)

    assert [operation.describe() for operation in replay.operations] == [
        "draw circle#1 size=2"
    ]
