"""Typed rule violations reported by the board and the game.

Nothing in the engine raises these; they are carried inside ``Err`` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .move import Move
from .pieces import Color
from .position import Position


@dataclass(frozen=True, slots=True)
class InvalidPosition:
    position: Position

    def __str__(self) -> str:
        return f"Position {self.position} is off the board."


@dataclass(frozen=True, slots=True)
class InvalidMove:
    move: Move

    def __str__(self) -> str:
        return f"Move {self.move} is not legal."


@dataclass(frozen=True, slots=True)
class WrongPlayer:
    color: Color

    def __str__(self) -> str:
        return f"The piece belongs to {self.color.value}."


BoardError = Union[InvalidPosition, InvalidMove, WrongPlayer]


@dataclass(frozen=True, slots=True)
class MoveError:
    cause: BoardError

    def __str__(self) -> str:
        return str(self.cause)


@dataclass(frozen=True, slots=True)
class GameAlreadyOver:
    def __str__(self) -> str:
        return "The game is already over."


GameError = Union[MoveError, GameAlreadyOver]
