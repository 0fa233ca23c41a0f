from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from .board import Board
from .errors import GameAlreadyOver, GameError, InvalidMove, MoveError
from .move import Move
from .movegen import MoveMap, all_moves_for, has_any_jump, moves_from
from .pieces import Color, KingRule
from .position import Position
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InProgress:
    def __str__(self) -> str:
        return "InProgress"


@dataclass(frozen=True, slots=True)
class GameOver:
    winner: Optional[Color] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "Draw"
        return f"{self.winner.value} won"


GameStatus = Union[InProgress, GameOver]
LegalMoves = dict[Position, tuple[Move, ...]]
ValidMoves = dict[Position, list[Move]]


@dataclass(frozen=True)
class Game:
    """One snapshot of a match.

    Accepted moves return a new ``Game``; rejected moves return an ``Err`` and
    leave this value untouched. While ``continuation`` is set the same player
    keeps moving the piece on ``continuation_origin`` until it has no capture
    left.
    """

    board: Board
    current_player: Color = Color.WHITE
    status: GameStatus = InProgress()
    continuation: bool = False
    continuation_origin: Optional[Position] = None
    king_rule: KingRule = KingRule.FLYING

    @classmethod
    def initial(cls, king_rule: KingRule = KingRule.FLYING) -> "Game":
        return cls(Board.initial(), Color.WHITE, InProgress(), king_rule=king_rule)

    @property
    def is_over(self) -> bool:
        return isinstance(self.status, GameOver)

    @property
    def winner(self) -> Optional[Color]:
        if isinstance(self.status, GameOver):
            return self.status.winner
        return None

    @property
    def capture_required(self) -> bool:
        if self.is_over:
            return False
        if self.continuation:
            return True
        return has_any_jump(all_moves_for(self.current_player, self.board, self.king_rule))

    def propose(self, start: Position, end: Position) -> Result["Game", GameError]:
        return self.propose_move(Move(start, end))

    def propose_move(self, move: Move) -> Result["Game", GameError]:
        if isinstance(self.status, GameOver):
            logger.debug("Rejected %s: game already over", move)
            return Err(GameAlreadyOver())

        checked = self.board.validate(move, self.current_player, self.king_rule)
        if isinstance(checked, Err):
            return self._reject(move, MoveError(checked.error))

        if move not in self._legal_moves().get(move.start, ()):
            return self._reject(move, MoveError(InvalidMove(move)))

        applied = self.board.apply(move, self.current_player, self.king_rule)
        if isinstance(applied, Err):
            return self._reject(move, MoveError(applied.error))
        board = applied.value

        captured = checked.value is not None
        if captured and moves_from(move.end, self.current_player, board, self.king_rule).jumps:
            logger.debug("%s continues capturing from %s", self.current_player.value, move.end)
            return Ok(replace(self, board=board, continuation=True, continuation_origin=move.end))

        next_player = self.current_player.opponent
        status = self._determine_status(board, next_player)
        if isinstance(status, GameOver):
            logger.info("Game over after %s: %s", move, status)
        return Ok(
            Game(
                board=board,
                current_player=next_player,
                status=status,
                continuation=False,
                continuation_origin=None,
                king_rule=self.king_rule,
            )
        )

    def valid_moves_for_player(self, color: Color) -> ValidMoves:
        if self.is_over:
            return {}
        if color == self.current_player:
            legal = self._legal_moves()
        else:
            legal = _capture_filtered(all_moves_for(color, self.board, self.king_rule))
        return {pos: list(moves) for pos, moves in legal.items()}

    def _legal_moves(self) -> LegalMoves:
        if self.continuation and self.continuation_origin is not None:
            origin = self.continuation_origin
            jumps = moves_from(origin, self.current_player, self.board, self.king_rule).jumps
            return {origin: jumps} if jumps else {}
        return _capture_filtered(all_moves_for(self.current_player, self.board, self.king_rule))

    def _determine_status(self, board: Board, next_player: Color) -> GameStatus:
        if all_moves_for(next_player, board, self.king_rule):
            return InProgress()
        if all_moves_for(self.current_player, board, self.king_rule):
            return GameOver(self.current_player)
        return GameOver(None)

    def _reject(self, move: Move, error: GameError) -> Result["Game", GameError]:
        logger.debug("Rejected %s for %s: %s", move, self.current_player.value, error)
        return Err(error)


def _capture_filtered(moves: MoveMap) -> LegalMoves:
    if has_any_jump(moves):
        return {pos: found.jumps for pos, found in moves.items() if found.jumps}
    return {pos: found.moves for pos, found in moves.items()}
