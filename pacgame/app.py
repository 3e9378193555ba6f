"""Window, input and drawing for the game."""

from __future__ import annotations

import argparse
from typing import Any

import pygame

from pacgame.game import DOT, TILE_SIZE, WALL, Game

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 400
FPS = 60
FONT_SIZE = 20
DOT_RADIUS = 5

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARKBLUE = (0, 82, 172)
GOLD = (255, 203, 0)
YELLOW = (253, 249, 0)


def input_offset(pressed: Any, speed: float) -> tuple[float, float]:
    """Turn the state of the arrow keys into a movement offset."""
    dx = 0.0
    dy = 0.0
    if pressed[pygame.K_RIGHT]:
        dx += speed
    if pressed[pygame.K_LEFT]:
        dx -= speed
    if pressed[pygame.K_UP]:
        dy -= speed
    if pressed[pygame.K_DOWN]:
        dy += speed
    return dx, dy


def draw(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    """Render the maze, ghosts, Pac-Man and score onto a surface."""
    surface.fill(BLACK)
    for row, col, content in game.board.cells():
        x = col * TILE_SIZE
        y = row * TILE_SIZE
        if content == WALL:
            pygame.draw.rect(surface, DARKBLUE, pygame.Rect(x, y, TILE_SIZE, TILE_SIZE))
        elif content == DOT:
            center = (x + TILE_SIZE // 2, y + TILE_SIZE // 2)
            pygame.draw.circle(surface, GOLD, center, DOT_RADIUS)
    for ghost in game.ghosts:
        pygame.draw.circle(surface, ghost.color, ghost.pos, game.radius)
    pygame.draw.circle(surface, YELLOW, game.pacman, game.radius)
    text = font.render(f"Score: {game.score}", True, WHITE)
    surface.blit(text, (10, 10))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pacgame", description="Guide Pac-Man through the maze with the arrow keys."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pacman")
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        game = Game()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            if not running:
                break
            game.step(*input_offset(pygame.key.get_pressed(), game.speed))
            draw(screen, game, font)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())