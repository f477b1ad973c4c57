"""Pydantic models describing one JSON line of a shape scene file."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SceneBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class LinePayload(SceneBaseModel):
    id: str | int
    type: Literal["line"]
    length: float = Field(ge=0)


class CirclePayload(SceneBaseModel):
    id: str | int
    type: Literal["circle"]
    radius: float = Field(ge=0)


ShapePayload = Annotated[LinePayload | CirclePayload, Field(discriminator="type")]


class ScenePass(SceneBaseModel):
    """Either the full desired shape list for a pass, or a request to clear."""

    declarations: list[ShapePayload] = Field(default_factory=list)
    clear: bool = False

    @model_validator(mode="after")
    def _clear_excludes_declarations(self) -> ScenePass:
        if self.clear and self.declarations:
            raise ValueError("A clear pass cannot carry declarations")
        return self
