from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from draughts.game import Game  # noqa: E402
from draughts.pieces import Color  # noqa: E402
from draughts.position import Position  # noqa: E402
from ui.pygame_gui import CheckersGUI  # noqa: E402


class CheckersGUITests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        pygame.init()

    @classmethod
    def tearDownClass(cls) -> None:
        pygame.quit()

    def setUp(self) -> None:
        self.gui = CheckersGUI()

    def _click(self, pos: Position) -> None:
        self.gui._handle_click(self.gui._center_for_cell(pos))

    def test_pixel_to_square(self) -> None:
        self.assertEqual(self.gui._board_coords_from_pos((45, 45)), Position(0, 0))
        self.assertEqual(self.gui._board_coords_from_pos(self.gui._center_for_cell(Position(3, 6))), Position(3, 6))
        self.assertIsNone(self.gui._board_coords_from_pos((5, 5)))

    def test_click_pair_plays_move(self) -> None:
        self._click(Position(0, 5))
        self.assertEqual(self.gui.selected, Position(0, 5))
        self.assertEqual(set(self.gui.destinations), {Position(1, 4)})

        self._click(Position(1, 4))
        self.assertEqual(self.gui.game.current_player, Color.BLACK)
        self.assertIsNone(self.gui.selected)
        self.assertEqual(len(self.gui.history), 1)

        self.gui.undo()
        self.assertEqual(self.gui.game, Game.initial())

    def test_rejected_click_keeps_game(self) -> None:
        self._click(Position(2, 5))
        self._click(Position(2, 4))
        self.assertEqual(self.gui.game, Game.initial())
        self.assertTrue(self.gui.message)
        self.assertFalse(self.gui.history)

    def test_draw_frame(self) -> None:
        self._click(Position(2, 5))
        self.gui._draw()
        self.gui.reset()
        self.assertIsNone(self.gui.selected)


if __name__ == "__main__":
    unittest.main()
