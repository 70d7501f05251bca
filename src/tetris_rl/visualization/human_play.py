from __future__ import annotations

import argparse
import logging
from typing import Dict

import pygame

from tetris_rl.game import GameConfig, GameEngine, GameState, Intent
from .renderer import Renderer


logger = logging.getLogger(__name__)


KEY_TO_INTENT: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_UP: Intent.ROTATE_CW,
    pygame.K_DOWN: Intent.SOFT_DROP_HELD,
    pygame.K_SPACE: Intent.HARD_DROP,
    pygame.K_r: Intent.RESTART,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tetris with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(config: GameConfig | None = None, cell_size: int = 30, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        engine = GameEngine(config)
        renderer = Renderer(engine.grid.width, engine.grid.height, cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.size)
        pygame.display.set_caption("Tetris - Human Play")

        running = True
        while running:
            dt = clock.tick(fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        engine.apply_intent(Intent.PAUSE if engine.state == GameState.PLAYING else Intent.RESUME)
                    else:
                        intent = KEY_TO_INTENT.get(event.key)
                        if intent is not None:
                            engine.apply_intent(intent)
                elif event.type == pygame.KEYUP and event.key == pygame.K_DOWN:
                    engine.apply_intent(Intent.SOFT_DROP_RELEASED)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    intent = renderer.menu.resolve_click(engine.state, event.pos)
                    if intent is not None:
                        engine.apply_intent(intent)

            engine.tick(dt)
            renderer.draw(screen, engine.snapshot())
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting human play (seed=%s)", args.seed)
    run(GameConfig(random_seed=args.seed), cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
