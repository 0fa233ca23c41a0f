"""Directional move search.

Moves are produced in a fixed order: directions up-left, up-right, down-left,
down-right ("up" being decreasing y), then outward along each ray.
"""

from __future__ import annotations

from dataclasses import dataclass

from .board import Board
from .move import Move
from .pieces import Color, KingRule, Piece
from .position import Position

Direction = tuple[int, int]

DIRECTIONS: tuple[Direction, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


@dataclass(frozen=True, slots=True)
class MoveSet:
    slides: tuple[Move, ...] = ()
    jumps: tuple[Move, ...] = ()

    @property
    def moves(self) -> tuple[Move, ...]:
        return self.slides + self.jumps

    def __bool__(self) -> bool:
        return bool(self.slides or self.jumps)


MoveMap = dict[Position, MoveSet]


def _directions_for(piece: Piece) -> tuple[Direction, ...]:
    if piece.is_king:
        return DIRECTIONS
    return tuple(d for d in DIRECTIONS if d[1] == piece.color.forward)


def _short_moves(origin: Position, piece: Piece, board: Board) -> MoveSet:
    slides: list[Move] = []
    jumps: list[Move] = []
    for dx, dy in _directions_for(piece):
        near = origin.step(dx, dy)
        if not near.is_valid:
            continue
        occupant = board.piece_at(near)
        if occupant is None:
            slides.append(Move(origin, near))
            continue
        if occupant.color == piece.color:
            continue
        landing = origin.step(dx, dy, 2)
        if landing.is_valid and board.piece_at(landing) is None:
            jumps.append(Move(origin, landing))
    return MoveSet(tuple(slides), tuple(jumps))


def _flying_moves(origin: Position, piece: Piece, board: Board) -> MoveSet:
    slides: list[Move] = []
    jumps: list[Move] = []
    for dx, dy in DIRECTIONS:
        square = origin.step(dx, dy)
        while square.is_valid and board.piece_at(square) is None:
            slides.append(Move(origin, square))
            square = square.step(dx, dy)
        if not square.is_valid:
            continue
        occupant = board.piece_at(square)
        if occupant is None or occupant.color == piece.color:
            continue
        landing = square.step(dx, dy)
        while landing.is_valid and board.piece_at(landing) is None:
            jumps.append(Move(origin, landing))
            landing = landing.step(dx, dy)
    return MoveSet(tuple(slides), tuple(jumps))


def moves_from(
    pos: Position,
    color: Color,
    board: Board,
    king_rule: KingRule = KingRule.FLYING,
) -> MoveSet:
    piece = board.piece_at(pos)
    if piece is None or piece.color != color:
        return MoveSet()
    if piece.is_king and king_rule is KingRule.FLYING:
        return _flying_moves(pos, piece, board)
    return _short_moves(pos, piece, board)


def all_moves_for(
    color: Color,
    board: Board,
    king_rule: KingRule = KingRule.FLYING,
) -> MoveMap:
    moves: MoveMap = {}
    for pos, _ in board.pieces(color):
        found = moves_from(pos, color, board, king_rule)
        if found:
            moves[pos] = found
    return moves


def has_any_jump(moves: MoveMap) -> bool:
    return any(found.jumps for found in moves.values())
