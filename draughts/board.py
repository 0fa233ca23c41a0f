from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from .errors import BoardError, InvalidMove, InvalidPosition, WrongPlayer
from .move import Move
from .pieces import Color, KingRule, Piece
from .position import BOARD_SIZE, Position
from .result import Err, Ok, Result


Row = tuple[Optional[Piece], ...]
Squares = tuple[Row, ...]


@dataclass(frozen=True, slots=True)
class Cell:
    x: int
    y: int
    piece: Optional[Piece]


@dataclass(frozen=True)
class Board:
    """Immutable 8x8 grid indexed ``squares[y][x]``.

    ``y == 0`` is Black's home edge and ``y == 7`` is White's. Every update
    returns a new board; rows that did not change are shared.
    """

    squares: Squares

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def initial(cls) -> "Board":
        rows_to_fill = 3
        layout: dict[Position, Piece] = {}
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                pos = Position(x, y)
                if not pos.is_dark:
                    continue
                if y < rows_to_fill:
                    layout[pos] = Piece(Color.BLACK)
                elif y >= BOARD_SIZE - rows_to_fill:
                    layout[pos] = Piece(Color.WHITE)
        return cls.from_pieces(layout)

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position, Piece]) -> "Board":
        for pos in pieces:
            if not pos.is_valid:
                raise ValueError(f"Cannot place a piece at {pos}.")
        return cls.empty()._updated(dict(pieces))

    def get(self, pos: Position) -> Result[Optional[Piece], BoardError]:
        if not pos.is_valid:
            return Err(InvalidPosition(pos))
        return Ok(self.squares[pos.y][pos.x])

    def piece_at(self, pos: Position) -> Optional[Piece]:
        if pos.is_valid:
            return self.squares[pos.y][pos.x]
        return None

    def pieces(self, color: Optional[Color] = None) -> Iterator[tuple[Position, Piece]]:
        for y, row in enumerate(self.squares):
            for x, piece in enumerate(row):
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield Position(x, y), piece

    def count(self, color: Color, *, kings_only: bool = False) -> int:
        return sum(1 for _, piece in self.pieces(color) if piece.is_king or not kings_only)

    def cells(self) -> list[Cell]:
        return [
            Cell(x, y, piece)
            for y, row in enumerate(self.squares)
            for x, piece in enumerate(row)
        ]

    def path_pieces(self, move: Move) -> list[tuple[Position, Piece]]:
        """Occupied squares strictly between the two ends of a diagonal move."""
        occupied: list[tuple[Position, Piece]] = []
        for pos in move.path():
            piece = self.piece_at(pos)
            if piece is not None:
                occupied.append((pos, piece))
        return occupied

    def validate(
        self,
        move: Move,
        mover: Color,
        king_rule: KingRule = KingRule.FLYING,
    ) -> Result[Optional[Position], BoardError]:
        """Check a single slide or capture; on success carry the captured square."""
        for pos in (move.start, move.end):
            if not pos.is_valid:
                return Err(InvalidPosition(pos))
        if not move.is_diagonal:
            return Err(InvalidMove(move))

        piece = self.piece_at(move.start)
        if piece is None:
            return Err(InvalidMove(move))
        if piece.color != mover:
            return Err(WrongPlayer(piece.color))
        if not piece.is_king and move.dy * piece.color.forward <= 0:
            return Err(InvalidMove(move))
        if self.piece_at(move.end) is not None:
            return Err(InvalidMove(move))

        long_range = piece.is_king and king_rule is KingRule.FLYING
        blockers = self.path_pieces(move)
        if not blockers:
            if move.distance == 1 or long_range:
                return Ok(None)
            return Err(InvalidMove(move))

        if len(blockers) != 1:
            return Err(InvalidMove(move))
        captured_at, captured = blockers[0]
        if captured.color == piece.color:
            return Err(InvalidMove(move))
        if move.distance != 2 and not long_range:
            return Err(InvalidMove(move))
        return Ok(captured_at)

    def apply(
        self,
        move: Move,
        mover: Color,
        king_rule: KingRule = KingRule.FLYING,
    ) -> Result["Board", BoardError]:
        checked = self.validate(move, mover, king_rule)
        if isinstance(checked, Err):
            return checked

        piece = self.squares[move.start.y][move.start.x]
        if piece is None:
            raise RuntimeError("Validated move has no piece at its start.")
        changes: dict[Position, Optional[Piece]] = {
            move.start: None,
            move.end: self._handle_promotion(move.end, piece),
        }
        if checked.value is not None:
            changes[checked.value] = None
        return Ok(self._updated(changes))

    def _handle_promotion(self, pos: Position, piece: Piece) -> Piece:
        if not piece.is_king and pos.y == piece.color.promotion_row:
            return piece.promote()
        return piece

    def _updated(self, changes: Mapping[Position, Optional[Piece]]) -> "Board":
        rows = list(self.squares)
        touched: dict[int, list[Optional[Piece]]] = {}
        for pos, piece in changes.items():
            row = touched.setdefault(pos.y, list(rows[pos.y]))
            row[pos.x] = piece
        for y, updated_row in touched.items():
            rows[y] = tuple(updated_row)
        return Board(tuple(rows))

    def __str__(self) -> str:
        symbols = {
            (Color.BLACK, False): "b",
            (Color.BLACK, True): "B",
            (Color.WHITE, False): "w",
            (Color.WHITE, True): "W",
        }
        lines = []
        for row in self.squares:
            lines.append(" ".join("." if p is None else symbols[(p.color, p.is_king)] for p in row))
        return "\n".join(lines)
