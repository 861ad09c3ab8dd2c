import os

# pygame без окна (нужно до pygame.init)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from game import SnakeGame


@pytest.fixture
def game():
    return SnakeGame(seed=0)


@pytest.fixture
def running_game(game):
    game.toggle_pause()
    return game


def eat_ahead(game, times=1):
    """Положить еду прямо перед головой и съесть её"""
    for _ in range(times):
        x, y = game.head
        dx, dy = game.direction.value
        game.food = (x + dx, y + dy)
        game.tick()


def crash(game):
    """Убрать еду с пути и ехать до столкновения"""
    game.food = (0, 0)
    while not game.is_game_over:
        game.tick()
