from __future__ import annotations

import pygame
import pytest

from tetris_rl.game import GameConfig, GameEngine, GameState, Intent
from tetris_rl.visualization.menu import OverlayMenu
from tetris_rl.visualization.renderer import Renderer


@pytest.fixture
def menu() -> OverlayMenu:
    return OverlayMenu(pygame.Rect(20, 20, 300, 600), pygame.Rect(340, 20, 160, 600))


def test_pause_button_while_playing(menu):
    (_, intent, rect), = menu.buttons_for(GameState.PLAYING)
    assert intent == Intent.PAUSE
    assert menu.resolve_click(GameState.PLAYING, rect.center) == Intent.PAUSE
    assert menu.resolve_click(GameState.PLAYING, (25, 25)) is None


def test_paused_overlay_buttons(menu):
    resume, restart = menu.buttons_for(GameState.PAUSED)
    assert menu.resolve_click(GameState.PAUSED, resume[2].center) == Intent.RESUME
    assert menu.resolve_click(GameState.PAUSED, restart[2].center) == Intent.RESTART


def test_game_over_only_offers_restart(menu):
    (_, intent, rect), = menu.buttons_for(GameState.GAME_OVER)
    assert intent == Intent.RESTART
    pause_rect = menu.buttons_for(GameState.PLAYING)[0][2]
    assert menu.resolve_click(GameState.GAME_OVER, pause_rect.center) is None


def test_click_drives_engine_through_menu(menu):
    engine = GameEngine(GameConfig(random_seed=0))
    pause_rect = menu.buttons_for(GameState.PLAYING)[0][2]
    engine.apply_intent(menu.resolve_click(engine.state, pause_rect.center))
    assert engine.state == GameState.PAUSED
    restart_rect = menu.buttons_for(GameState.PAUSED)[1][2]
    engine.score = 20
    engine.apply_intent(menu.resolve_click(engine.state, restart_rect.center))
    assert engine.state == GameState.PLAYING
    assert engine.score == 0


def test_renderer_draws_every_state():
    pygame.init()
    try:
        engine = GameEngine(GameConfig(random_seed=0))
        renderer = Renderer(engine.grid.width, engine.grid.height, cell_size=10)
        screen = pygame.display.set_mode(renderer.size)
        renderer.draw(screen, engine.snapshot())
        engine.apply_intent(Intent.PAUSE)
        renderer.draw(screen, engine.snapshot())
        engine.state = GameState.GAME_OVER
        renderer.draw(screen, engine.snapshot())
        assert screen.get_size() == renderer.size
    finally:
        pygame.quit()
