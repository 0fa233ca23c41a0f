from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    x: int
    y: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    @property
    def is_dark(self) -> bool:
        return (self.x + self.y) % 2 == 1

    def step(self, dx: int, dy: int, distance: int = 1) -> "Position":
        return Position(self.x + dx * distance, self.y + dy * distance)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
