from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame

from tetris_rl.game import GameState, Intent


BUTTON_W = 120
BUTTON_H = 36


class OverlayMenu:
    """Clickable buttons for the pause and game-over overlays.

    Pointer clicks never reach the engine directly: `resolve_click` turns
    them into the intent of the button under the pointer, if any.
    """

    def __init__(self, board_rect: pygame.Rect, panel_rect: pygame.Rect) -> None:
        cx, cy = board_rect.center
        self.buttons: Dict[GameState, List[Tuple[str, Intent, pygame.Rect]]] = {
            GameState.PLAYING: [
                ("Pause", Intent.PAUSE, pygame.Rect(panel_rect.x + 12, panel_rect.bottom - BUTTON_H - 12, BUTTON_W, BUTTON_H)),
            ],
            GameState.PAUSED: [
                ("Resume", Intent.RESUME, pygame.Rect(cx - BUTTON_W // 2, cy - BUTTON_H - 6, BUTTON_W, BUTTON_H)),
                ("Restart", Intent.RESTART, pygame.Rect(cx - BUTTON_W // 2, cy + 6, BUTTON_W, BUTTON_H)),
            ],
            GameState.GAME_OVER: [
                ("Restart", Intent.RESTART, pygame.Rect(cx - BUTTON_W // 2, cy + 6, BUTTON_W, BUTTON_H)),
            ],
        }

    def buttons_for(self, state: GameState) -> List[Tuple[str, Intent, pygame.Rect]]:
        return self.buttons.get(state, [])

    def resolve_click(self, state: GameState, pos: Tuple[int, int]) -> Optional[Intent]:
        for _, intent, rect in self.buttons_for(state):
            if rect.collidepoint(pos):
                return intent
        return None
