from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from draughts.move import JumpKind, Move  # noqa: E402
from draughts.pieces import Color, Piece  # noqa: E402
from draughts.position import Position  # noqa: E402


class PositionTests(unittest.TestCase):
    def test_bounds(self) -> None:
        self.assertTrue(Position(0, 0).is_valid)
        self.assertTrue(Position(7, 7).is_valid)
        self.assertFalse(Position(8, 0).is_valid)
        self.assertFalse(Position(0, -1).is_valid)


class PieceTests(unittest.TestCase):
    def test_promote_returns_king_copy(self) -> None:
        man = Piece(Color.WHITE)
        king = man.promote()
        self.assertTrue(king.is_king)
        self.assertFalse(man.is_king)
        self.assertEqual(king.promote(), king)


class MoveTests(unittest.TestCase):
    def test_jump_kind(self) -> None:
        self.assertEqual(Move(Position(0, 5), Position(1, 4)).jump_kind, JumpKind.NONE)
        self.assertEqual(Move(Position(0, 5), Position(2, 3)).jump_kind, JumpKind.SIMPLE)
        self.assertEqual(Move(Position(0, 7), Position(5, 2)).jump_kind, JumpKind.LONG)

    def test_diagonal_and_path(self) -> None:
        move = Move(Position(0, 7), Position(3, 4))
        self.assertTrue(move.is_diagonal)
        self.assertEqual(move.path(), [Position(1, 6), Position(2, 5)])
        self.assertFalse(Move(Position(2, 5), Position(2, 4)).is_diagonal)
        self.assertFalse(Move(Position(2, 5), Position(5, 3)).is_diagonal)
        self.assertFalse(Move(Position(2, 5), Position(2, 5)).is_diagonal)


if __name__ == "__main__":
    unittest.main()
