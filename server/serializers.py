"""JSON encoding of engine values.

Colors are ``"White"``/``"Black"``, statuses ``"InProgress"``,
``"White Won"``/``"Black Won"`` or ``"Draw"``. Boards are flat lists of 64 cells
in row-major order starting from ``(0, 0)``.
"""

from __future__ import annotations

from typing import Any, Optional

from draughts.board import Board
from draughts.game import Game, GameOver, GameStatus
from draughts.move import Move
from draughts.pieces import Color, Piece
from draughts.position import Position


def serialize_color(color: Color) -> str:
    return color.name.capitalize()


def serialize_status(status: GameStatus) -> str:
    if isinstance(status, GameOver):
        if status.winner is None:
            return "Draw"
        return f"{serialize_color(status.winner)} Won"
    return "InProgress"


def serialize_position(pos: Position) -> dict[str, int]:
    return {"x": pos.x, "y": pos.y}


def position_key(pos: Position) -> str:
    return f"{pos.x},{pos.y}"


def serialize_piece(piece: Optional[Piece]) -> Optional[dict[str, Any]]:
    if piece is None:
        return None
    return {"color": serialize_color(piece.color), "isKing": piece.is_king}


def serialize_board(board: Board) -> list[dict[str, Any]]:
    return [
        {"x": cell.x, "y": cell.y, "piece": serialize_piece(cell.piece)}
        for cell in board.cells()
    ]


def serialize_move(move: Move) -> dict[str, Any]:
    return {"from": serialize_position(move.start), "to": serialize_position(move.end)}


def serialize_valid_moves(moves: dict[Position, list[Move]]) -> dict[str, list[dict[str, Any]]]:
    return {position_key(pos): [serialize_move(move) for move in options] for pos, options in moves.items()}


def serialize_game(game_id: str, name: str, game: Game) -> dict[str, Any]:
    board = game.board
    valid_moves = game.valid_moves_for_player(game.current_player)
    capture_required = game.capture_required
    origin = game.continuation_origin

    return {
        "id": game_id,
        "name": name,
        "board": serialize_board(board),
        "currentPlayer": serialize_color(game.current_player),
        "status": serialize_status(game.status),
        "continuation": game.continuation,
        "continuationOrigin": serialize_position(origin) if origin is not None else None,
        "pieceCounts": {
            "white": {
                "total": board.count(Color.WHITE),
                "kings": board.count(Color.WHITE, kings_only=True),
            },
            "black": {
                "total": board.count(Color.BLACK),
                "kings": board.count(Color.BLACK, kings_only=True),
            },
        },
        "mandatoryCapture": capture_required,
        "validMoves": serialize_valid_moves(valid_moves),
    }
