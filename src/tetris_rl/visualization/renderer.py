from __future__ import annotations

from typing import Optional

import pygame

from tetris_rl.game import GameState, Snapshot, color_for_cell
from .menu import OverlayMenu


class Renderer:
    def __init__(self, width: int, height: int, cell_size: int = 30, margin: int = 20, panel_w: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.board_rect = pygame.Rect(margin, margin, width * cell_size, height * cell_size)
        self.panel_rect = pygame.Rect(self.board_rect.right + margin, margin, panel_w, self.board_rect.height)
        self.size = (self.panel_rect.right + margin, self.board_rect.bottom + margin)
        self.menu = OverlayMenu(self.board_rect, self.panel_rect)
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            self.board_rect.x + x * self.cell_size,
            self.board_rect.y + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _draw_board(self, screen: pygame.Surface, snap: Snapshot) -> None:
        h, w = snap.board.shape
        pygame.draw.rect(screen, (30, 30, 36), self.board_rect)
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(screen, color_for_cell(int(snap.board[y, x])), self._cell_rect(x, y))
        for x, y in snap.ghost_cells:
            if y >= 0:
                pygame.draw.rect(screen, snap.piece_color, self._cell_rect(x, y), 2)
        for x, y in snap.piece_cells:
            if y >= 0:
                pygame.draw.rect(screen, snap.piece_color, self._cell_rect(x, y))

    def _draw_panel(self, screen: pygame.Surface, snap: Snapshot) -> None:
        pygame.draw.rect(screen, (21, 25, 53), self.panel_rect)
        lines = [f"Score: {snap.score}", f"Lines: {snap.lines_cleared}"]
        for i, txt in enumerate(lines):
            img = self.font.render(txt, True, (230, 230, 230))
            screen.blit(img, (self.panel_rect.x + 12, self.panel_rect.y + 12 + i * 24))

    def _draw_overlay(self, screen: pygame.Surface, snap: Snapshot) -> None:
        if snap.state != GameState.PLAYING:
            shade = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
            shade.fill((0, 0, 0, 170))
            screen.blit(shade, self.board_rect.topleft)
            title = "PAUSED" if snap.state == GameState.PAUSED else "GAME OVER"
            img = self.font.render(title, True, (255, 255, 255))
            rect = img.get_rect(center=(self.board_rect.centerx, self.board_rect.centery - 70))
            screen.blit(img, rect)
        for label, _, rect in self.menu.buttons_for(snap.state):
            pygame.draw.rect(screen, (60, 70, 110), rect)
            pygame.draw.rect(screen, (200, 210, 240), rect, 1)
            img = self.font.render(label, True, (230, 230, 230))
            screen.blit(img, img.get_rect(center=rect.center))

    def draw(self, screen: pygame.Surface, snap: Snapshot) -> None:
        screen.fill((10, 10, 14))
        self._draw_board(screen, snap)
        self._draw_panel(screen, snap)
        self._draw_overlay(screen, snap)
        pygame.display.flip()
