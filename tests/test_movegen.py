from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from draughts.board import Board  # noqa: E402
from draughts.move import Move  # noqa: E402
from draughts.movegen import MoveSet, all_moves_for, moves_from  # noqa: E402
from draughts.pieces import Color, KingRule, Piece  # noqa: E402
from draughts.position import Position as P  # noqa: E402


WHITE = Piece(Color.WHITE)
BLACK = Piece(Color.BLACK)
WHITE_KING = Piece(Color.WHITE, is_king=True)


def ends(moves: tuple[Move, ...]) -> list[tuple[int, int]]:
    return [(move.end.x, move.end.y) for move in moves]


class ManMoveTests(unittest.TestCase):
    def test_opening_moves_for_white(self) -> None:
        moves = all_moves_for(Color.WHITE, Board.initial())
        self.assertEqual(list(moves), [P(0, 5), P(2, 5), P(4, 5), P(6, 5)])
        self.assertEqual(ends(moves[P(0, 5)].slides), [(1, 4)])
        self.assertEqual(ends(moves[P(2, 5)].slides), [(1, 4), (3, 4)])
        self.assertTrue(all(not found.jumps for found in moves.values()))

    def test_black_men_move_down_the_board(self) -> None:
        board = Board.from_pieces({P(3, 3): BLACK})
        found = moves_from(P(3, 3), Color.BLACK, board)
        self.assertEqual(ends(found.slides), [(2, 4), (4, 4)])

    def test_man_jump(self) -> None:
        board = Board.from_pieces({P(0, 5): WHITE, P(1, 4): BLACK})
        found = moves_from(P(0, 5), Color.WHITE, board)
        self.assertEqual(found.slides, ())
        self.assertEqual(found.jumps, (Move(P(0, 5), P(2, 3)),))

    def test_blocked_jump(self) -> None:
        board = Board.from_pieces({P(0, 5): WHITE, P(1, 4): BLACK, P(2, 3): BLACK})
        self.assertFalse(moves_from(P(0, 5), Color.WHITE, board))

    def test_men_do_not_capture_backwards(self) -> None:
        board = Board.from_pieces({P(2, 3): WHITE, P(1, 4): BLACK})
        self.assertEqual(moves_from(P(2, 3), Color.WHITE, board).jumps, ())

    def test_empty_or_enemy_square_has_no_moves(self) -> None:
        board = Board.initial()
        self.assertEqual(moves_from(P(3, 4), Color.WHITE, board), MoveSet())
        self.assertEqual(moves_from(P(1, 2), Color.WHITE, board), MoveSet())

    def test_stuck_pieces_are_left_out(self) -> None:
        board = Board.from_pieces({P(1, 0): WHITE, P(2, 5): WHITE})
        self.assertEqual(list(all_moves_for(Color.WHITE, board)), [P(2, 5)])


class KingMoveTests(unittest.TestCase):
    def test_flying_king_scan_order(self) -> None:
        board = Board.from_pieces({P(3, 4): WHITE_KING})
        found = moves_from(P(3, 4), Color.WHITE, board)
        self.assertEqual(
            ends(found.slides),
            [
                (2, 3), (1, 2), (0, 1),
                (4, 3), (5, 2), (6, 1), (7, 0),
                (2, 5), (1, 6), (0, 7),
                (4, 5), (5, 6), (6, 7),
            ],
        )
        self.assertEqual(found.jumps, ())

    def test_flying_king_lands_anywhere_past_enemy(self) -> None:
        board = Board.from_pieces({P(0, 7): WHITE_KING, P(3, 4): BLACK})
        found = moves_from(P(0, 7), Color.WHITE, board)
        self.assertEqual(ends(found.slides), [(1, 6), (2, 5)])
        self.assertEqual(ends(found.jumps), [(4, 3), (5, 2), (6, 1), (7, 0)])

        blocked = Board.from_pieces({P(0, 7): WHITE_KING, P(3, 4): BLACK, P(6, 1): BLACK})
        self.assertEqual(ends(moves_from(P(0, 7), Color.WHITE, blocked).jumps), [(4, 3), (5, 2)])

    def test_own_piece_blocks_ray(self) -> None:
        board = Board.from_pieces({P(0, 7): WHITE_KING, P(2, 5): WHITE, P(4, 3): BLACK})
        found = moves_from(P(0, 7), Color.WHITE, board)
        self.assertEqual(ends(found.slides), [(1, 6)])
        self.assertEqual(found.jumps, ())

    def test_short_king_steps_in_all_directions(self) -> None:
        board = Board.from_pieces({P(3, 4): WHITE_KING, P(4, 5): BLACK})
        found = moves_from(P(3, 4), Color.WHITE, board, KingRule.SHORT)
        self.assertEqual(ends(found.slides), [(2, 3), (4, 3), (2, 5)])
        self.assertEqual(ends(found.jumps), [(5, 6)])


if __name__ == "__main__":
    unittest.main()
