from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from pearls.game import (
    DEFAULT_LEVEL,
    LEVELS,
    Direction,
    GameConfig,
    PearlsError,
    PearlsGame,
    get_level,
    get_resolver_names,
)
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--level", choices=sorted(LEVELS), default=DEFAULT_LEVEL)
    p.add_argument("--resolver", choices=get_resolver_names(), default="sliding")
    p.add_argument("--cell_size", type=int, default=40)
    p.add_argument("--verbose", action="store_true")
    return p


def apply_key(game: PearlsGame, key: int) -> Optional[str]:
    """Move for an arrow key; returns the error text if the move cannot be resolved."""
    direction = KEY_TO_DIRECTION.get(key)
    if direction is None or game.is_over():
        return None
    try:
        game.move(direction)
    except PearlsError as exc:
        logger.warning(f"Move {direction.name} failed: {exc}")
        return str(exc)
    return None


def run(game: PearlsGame, cell_size: int = 40) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=cell_size)
        margin = renderer.margin
        rows, cols = game.dimensions()
        screen = pygame.display.set_mode((cols * cell_size + margin * 2, rows * cell_size + margin * 2 + 30))
        pygame.display.set_caption("Pearls - Human Play")
        font = pygame.font.SysFont(None, 24)

        error: Optional[str] = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                        error = None
                    else:
                        error = apply_key(game, event.key) or error

            renderer.draw(screen, game.get_state(), game.player_mask())
            status = f"Score: {game.score}  Moves: {game.moves}  Pearls left: {game.pearl_count()}"
            if game.is_over():
                status = ("You won!" if game.won() else "Game over") + " - R to restart, ESC to quit"
            elif error:
                status = f"Move failed: {error}"
            text = font.render(status, True, (230, 230, 230))
            screen.blit(text, (margin, margin + rows * cell_size + 8))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    game = PearlsGame(get_level(args.level), config=GameConfig(resolver=args.resolver))
    run(game, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
