import threading

import pygame
import pytest

from controls import Command, CommandQueue, KEY_COMMANDS, apply_command, command_for_key
from game import Direction


def test_arrow_keys_and_space():
    assert command_for_key(pygame.K_UP) is Command.UP
    assert command_for_key(pygame.K_DOWN) is Command.DOWN
    assert command_for_key(pygame.K_LEFT) is Command.LEFT
    assert command_for_key(pygame.K_RIGHT) is Command.RIGHT
    assert command_for_key(pygame.K_SPACE) is Command.PAUSE
    assert command_for_key(pygame.K_r) is Command.RESET


@pytest.mark.parametrize("key", [pygame.K_a, pygame.K_RETURN, pygame.K_ESCAPE, pygame.K_w])
def test_other_keys_are_ignored(key):
    assert key not in KEY_COMMANDS
    assert command_for_key(key) is None


def test_apply_command(game):
    apply_command(game, Command.PAUSE)
    assert game.is_paused is False

    apply_command(game, Command.DOWN)
    assert game.direction is Direction.DOWN

    apply_command(game, Command.TICK)
    assert game.snake == [(10, 11)]

    apply_command(game, Command.RESET)
    assert game.snake == [(10, 10)]
    assert game.is_paused is True


def test_apply_unknown_command(game):
    with pytest.raises(TypeError):
        apply_command(game, "jump")


def test_queue_keeps_order(running_game):
    queue = CommandQueue()
    # UP, затем LEFT до тика - оба поворота принимаются
    queue.put(Command.UP)
    queue.put(Command.LEFT)
    queue.put(Command.TICK)

    assert len(queue) == 3
    assert queue.drain(running_game) == 3
    assert len(queue) == 0
    assert running_game.direction is Direction.LEFT
    assert running_game.snake == [(9, 10)]


def test_queue_reversal_still_rejected(running_game):
    queue = CommandQueue()
    queue.put(Command.LEFT)
    queue.put(Command.TICK)
    queue.drain(running_game)

    assert running_game.direction is Direction.RIGHT
    assert running_game.snake == [(11, 10)]


def test_drain_empty_queue(game):
    assert CommandQueue().drain(game) == 0


def test_put_from_threads(game):
    queue = CommandQueue()

    def producer():
        for _ in range(100):
            queue.put(Command.PAUSE)

    threads = [threading.Thread(target=producer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert queue.drain(game) == 400
    assert game.is_paused is True
