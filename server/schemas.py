from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from draughts.position import Position


class PositionModel(BaseModel):
    x: int
    y: int

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class MoveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start: PositionModel = Field(..., alias="from")
    end: PositionModel = Field(..., alias="to")


class CreateGameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
