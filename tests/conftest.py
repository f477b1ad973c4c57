from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from declmap.domain.mapping import DeclarationMapper
from tests.helpers.recording import CallLog, RecordingHandler

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def line_handler() -> RecordingHandler:
    return RecordingHandler("line")


@pytest.fixture
def circle_handler() -> RecordingHandler:
    return RecordingHandler("circle")


@pytest.fixture
def mapper(
    line_handler: RecordingHandler, circle_handler: RecordingHandler
) -> DeclarationMapper[CallLog]:
    return DeclarationMapper[CallLog]([line_handler, circle_handler])


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    path = tmp_path / "scene.jsonl"
    path.write_text(
        "\n".join(
            [
                '{"declarations": [{"id": "1", "type": "line", "length": 10},'
                ' {"id": "2", "type": "circle", "radius": 5}]}',
                '{"declarations": [{"id": "1", "type": "line", "length": 10},'
                ' {"id": "2", "type": "circle", "radius": 555}]}',
                "",
                '{"declarations": [{"id": "2", "type": "circle", "radius": 555}]}',
                '{"clear": true}',
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
