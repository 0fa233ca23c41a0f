from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .position import Position


class JumpKind(Enum):
    NONE = "none"
    SIMPLE = "simple"
    LONG = "long"


@dataclass(frozen=True, slots=True)
class Move:
    start: Position
    end: Position

    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    @property
    def distance(self) -> int:
        return abs(self.dx)

    @property
    def is_diagonal(self) -> bool:
        return self.distance > 0 and abs(self.dx) == abs(self.dy)

    @property
    def jump_kind(self) -> JumpKind:
        if self.distance == 2:
            return JumpKind.SIMPLE
        if self.distance > 2:
            return JumpKind.LONG
        return JumpKind.NONE

    @property
    def direction(self) -> tuple[int, int]:
        step_x = 1 if self.dx > 0 else -1
        step_y = 1 if self.dy > 0 else -1
        return (step_x, step_y)

    def path(self) -> list[Position]:
        """Squares strictly between start and end along a diagonal move."""
        if not self.is_diagonal:
            return []
        step_x, step_y = self.direction
        return [
            Position(self.start.x + step_x * i, self.start.y + step_y * i)
            for i in range(1, self.distance)
        ]

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"
