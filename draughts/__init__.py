"""Checkers rules engine."""

from .board import Board, Cell
from .errors import (
    BoardError,
    GameAlreadyOver,
    GameError,
    InvalidMove,
    InvalidPosition,
    MoveError,
    WrongPlayer,
)
from .game import Game, GameOver, GameStatus, InProgress
from .move import JumpKind, Move
from .movegen import MoveSet, all_moves_for, moves_from
from .pieces import Color, KingRule, Piece
from .position import Position
from .result import Err, Ok, Result

__all__ = [
    "Board",
    "Cell",
    "Game",
    "GameStatus",
    "InProgress",
    "GameOver",
    "Move",
    "JumpKind",
    "MoveSet",
    "moves_from",
    "all_moves_for",
    "Position",
    "Color",
    "Piece",
    "KingRule",
    "BoardError",
    "InvalidPosition",
    "InvalidMove",
    "WrongPlayer",
    "GameError",
    "MoveError",
    "GameAlreadyOver",
    "Ok",
    "Err",
    "Result",
]
