from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from draughts.game import Game
from draughts.move import Move
from draughts.pieces import Color, KingRule, Piece
from draughts.position import BOARD_SIZE, Position
from draughts.result import Err

logger = logging.getLogger(__name__)

MARGIN = 40
FPS = 60

PALETTE = {
    "light": (238, 218, 186),
    "dark": (118, 86, 58),
    "target": (250, 232, 110),
    "selected": (240, 130, 70),
    "white_piece": (250, 248, 240),
    "black_piece": (28, 28, 32),
    "outline": (20, 20, 20),
    "background": (26, 30, 40),
    "panel": (38, 44, 58),
    "panel_border": (90, 98, 116),
    "text": (228, 228, 228),
    "error": (240, 120, 110),
    "frame": (70, 46, 24),
    "crown": (255, 210, 40),
}


class CheckersGUI:
    """Hot-seat board: click a piece, then click where it should go."""

    def __init__(
        self,
        game: Game | None = None,
        square_size: int = 80,
        info_height: int = 200,
        king_rule: KingRule = KingRule.FLYING,
    ) -> None:
        self.game = game or Game.initial(king_rule)
        self.history: list[Game] = []
        self.square_size = square_size
        self.info_height = info_height
        self.margin = MARGIN
        self.board_pixels = square_size * BOARD_SIZE

        width = self.board_pixels + 2 * MARGIN
        height = self.board_pixels + info_height + 2 * MARGIN
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Checkers")

        self.small_font = pygame.font.SysFont("arial", 16)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()
        self.colors = PALETTE

        self.selected: Position | None = None
        self.destinations: dict[Position, Move] = {}
        self.hover_cell: Position | None = None
        self.valid_moves: dict[Position, list[Move]] = {}
        self.message = ""
        self._piece_cache: dict[Piece, pygame.Surface] = {}

        self._refresh_valid_moves()

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                running = self._dispatch(event)
                if not running:
                    break
            self._draw()
            pygame.display.flip()
            self.clock.tick(FPS)

    def _dispatch(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
            if event.key == pygame.K_r:
                self.reset()
            elif event.key == pygame.K_u:
                self.undo()
        elif event.type == pygame.MOUSEMOTION:
            self.hover_cell = self._board_coords_from_pos(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)
        return True

    def reset(self) -> None:
        self.game = Game.initial(self.game.king_rule)
        self.history.clear()
        self._clear_selection()
        self.message = ""
        self._refresh_valid_moves()

    def undo(self) -> None:
        if not self.history:
            self.message = "Nothing to undo."
            return
        self.game = self.history.pop()
        self._clear_selection()
        self.message = ""
        self._refresh_valid_moves()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None or self.game.is_over:
            return

        if self.selected is not None and cell != self.selected:
            piece = self.game.board.piece_at(cell)
            if piece is None or piece.color != self.game.current_player:
                self._play(Move(self.selected, cell))
                return

        piece = self.game.board.piece_at(cell)
        if piece is None or piece.color != self.game.current_player:
            self._clear_selection()
            return

        self.selected = cell
        self.destinations = {move.end: move for move in self.valid_moves.get(cell, [])}

    def _play(self, move: Move) -> None:
        result = self.game.propose_move(move)
        if isinstance(result, Err):
            self.message = str(result.error)
            logger.info("Rejected click move %s: %s", move, result.error)
            self._clear_selection()
            return
        self.history.append(self.game)
        self.game = result.value
        self.message = ""
        self._refresh_valid_moves()
        if self.game.continuation and self.game.continuation_origin is not None:
            origin = self.game.continuation_origin
            self.selected = origin
            self.destinations = {m.end: m for m in self.valid_moves.get(origin, [])}
        else:
            self._clear_selection()

    def _clear_selection(self) -> None:
        self.selected = None
        self.destinations = {}

    def _refresh_valid_moves(self) -> None:
        self.valid_moves = self.game.valid_moves_for_player(self.game.current_player)

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Position | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return Position(x // self.square_size, y // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        frame = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels).inflate(16, 16)
        pygame.draw.rect(self.screen, self.colors["frame"], frame, border_radius=12)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                pos = Position(x, y)
                shade = self.colors["dark"] if pos.is_dark else self.colors["light"]
                pygame.draw.rect(self.screen, shade, self._rect_for_cell(pos))

    def _draw_selection(self) -> None:
        if self.selected is not None:
            pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(self.selected), 4)

        for dest in self.destinations:
            cx, cy = self._center_for_cell(dest)
            radius = 16 if dest == self.hover_cell else 11
            gfxdraw.filled_circle(self.screen, cx, cy, radius, (*self.colors["target"], 150))
            gfxdraw.aacircle(self.screen, cx, cy, radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        for pos, piece in self.game.board.pieces():
            sprite = self._piece_sprite(piece)
            self.screen.blit(sprite, sprite.get_rect(center=self._center_for_cell(pos)))

    def _draw_info_panel(self) -> None:
        top = self.margin + self.board_pixels + 24
        panel = pygame.Rect(self.margin, top, self.board_pixels, self.info_height - 40)
        pygame.draw.rect(self.screen, self.colors["panel"], panel, border_radius=12)
        pygame.draw.rect(self.screen, self.colors["panel_border"], panel, 2, border_radius=12)

        board = self.game.board
        turn = self.game.current_player.value.capitalize()
        if self.game.continuation:
            turn += "  (continue capturing)"
        lines = [
            (f"Status: {self.game.status}", "text"),
            (f"To move: {turn}", "text"),
            (f"Mandatory capture: {'Yes' if self.game.capture_required else 'No'}", "text"),
        ]
        for color in (Color.WHITE, Color.BLACK):
            total, kings = board.count(color), board.count(color, kings_only=True)
            lines.append((f"{color.value.capitalize()}: {total} pieces, {kings} kings", "text"))
        lines.append(("Keys: R reset, U undo, Q quit", "text"))
        if self.message:
            lines.append((self.message, "error"))

        for row, (text, tone) in enumerate(lines):
            rendered = self.small_font.render(text, True, self.colors[tone])
            self.screen.blit(rendered, (panel.left + 18, panel.top + 12 + row * 20))

    def _rect_for_cell(self, pos: Position) -> pygame.Rect:
        left = self.margin + pos.x * self.square_size
        top = self.margin + pos.y * self.square_size
        return pygame.Rect(left, top, self.square_size, self.square_size)

    def _center_for_cell(self, pos: Position) -> tuple[int, int]:
        return self._rect_for_cell(pos).center

    def _piece_sprite(self, piece: Piece) -> pygame.Surface:
        sprite = self._piece_cache.get(piece)
        if sprite is not None:
            return sprite

        size = self.square_size - 14
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        center, radius = (size // 2, size // 2), size // 2
        fill = self.colors["white_piece"] if piece.color is Color.WHITE else self.colors["black_piece"]
        pygame.draw.circle(sprite, fill, center, radius)
        pygame.draw.circle(sprite, self.colors["outline"], center, radius, 2)
        pygame.draw.circle(sprite, self.colors["outline"], center, radius - 8, 1)

        if piece.is_king:
            mark = self.king_font.render("K", True, self.colors["crown"])
            sprite.blit(mark, mark.get_rect(center=center))

        self._piece_cache[piece] = sprite
        return sprite
