"""
Управление: клавиши -> команды и очередь команд.

Таймер и клавиатура кладут команды в одну очередь, игра применяет их
строго по порядку. Из других потоков можно только класть команды.
"""
import threading
from collections import deque
from enum import Enum

import pygame

from game import Direction


class Command(Enum):
    TICK = "tick"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESET = "reset"


DIRECTION_COMMANDS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

# Все распознаваемые клавиши. Остальные игнорируются
KEY_COMMANDS = {
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_SPACE: Command.PAUSE,
    pygame.K_r: Command.RESET,
}


def command_for_key(key):
    """Команда для клавиши или None, если клавиша не используется"""
    return KEY_COMMANDS.get(key)


def apply_command(game, command):
    if command is Command.TICK:
        game.tick()
    elif command in DIRECTION_COMMANDS:
        game.set_direction(DIRECTION_COMMANDS[command])
    elif command is Command.PAUSE:
        game.toggle_pause()
    elif command is Command.RESET:
        game.reset()
    else:
        raise TypeError(f"unknown command: {command!r}")


class CommandQueue:
    def __init__(self):
        self._pending = deque()
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._pending)

    def put(self, command):
        with self._lock:
            self._pending.append(command)

    def drain(self, game):
        """Применить все накопленные команды по порядку. Возвращает их число"""
        applied = 0
        while True:
            with self._lock:
                if not self._pending:
                    return applied
                command = self._pending.popleft()
                apply_command(game, command)
            applied += 1
