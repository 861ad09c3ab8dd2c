"""
Движок игры «Змейка» без привязки к отрисовке.

Поле GRID_SIZE x GRID_SIZE, змейка растёт, съедая еду, игра заканчивается
при столкновении со стеной или с собой. Рекорд живёт, пока жив объект игры.

Матрица занятости:
  0 = пусто
  1 = тело змейки (включая голову)
"""
from dataclasses import dataclass
from enum import Enum

import numpy as np

from config import (
    GRID_SIZE, UP, DOWN, LEFT, RIGHT,
    INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION, SCORE_FOR_FOOD,
    FOOD_POLICY, FOOD_POLICIES,
)


class Direction(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


START_DIRECTION = Direction(INITIAL_DIRECTION)


@dataclass(frozen=True)
class GameState:
    """Снимок состояния для отрисовки (только чтение)"""
    snake: tuple
    food: tuple
    direction: Direction
    is_game_over: bool
    is_paused: bool
    score: int
    high_score: int
    steps: int
    grid_size: int


class SnakeGame:
    def __init__(self, grid_size=GRID_SIZE, food_policy=FOOD_POLICY, seed=None):
        if food_policy not in FOOD_POLICIES:
            raise ValueError(f"unknown food policy: {food_policy!r}")

        self.grid_size = grid_size
        self.food_policy = food_policy
        self.rng = np.random.default_rng(seed)
        self.high_score = 0

        self._restart()
        # Первая еда на фиксированной клетке, если она влезает в поле
        if self.in_bounds(INITIAL_FOOD) and INITIAL_FOOD not in self._snake:
            self.food = INITIAL_FOOD
        else:
            self.food = self._spawn_food()

    def _restart(self):
        self.grid = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        if self.grid_size == GRID_SIZE:
            self._snake = list(INITIAL_SNAKE)
        else:
            # Нестандартное поле - стартуем из центра
            c = self.grid_size // 2
            self._snake = [(c, c)]
        for x, y in self._snake:
            self.grid[y, x] = 1

        self.direction = START_DIRECTION
        self.is_game_over = False
        self.is_paused = True
        self.score = 0
        self.steps = 0

    def reset(self):
        """Новая игра. Рекорд сохраняется"""
        self._restart()
        self.food = self._spawn_food()

    @property
    def snake(self):
        return list(self._snake)

    @property
    def head(self):
        return self._snake[0]

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def set_direction(self, requested):
        """
        Смена направления. Разворот на 180° молча игнорируется.
        Возвращает True, если направление принято.
        """
        if requested == self.direction.opposite:
            return False
        self.direction = requested
        return True

    def toggle_pause(self):
        self.is_paused = not self.is_paused

    def tick(self):
        """Один шаг симуляции"""
        if self.is_paused or self.is_game_over:
            return

        head_x, head_y = self.head
        assert self.in_bounds((head_x, head_y)), f"head out of grid: {self.head}"

        dx, dy = self.direction.value
        new_head = (head_x + dx, head_y + dy)

        # Стена, затем собственное тело (до сдвига, хвост тоже считается)
        if not self.in_bounds(new_head) or self.grid[new_head[1], new_head[0]] == 1:
            self.is_game_over = True
            self.high_score = max(self.high_score, self.score)
            return

        self._snake.insert(0, new_head)
        self.grid[new_head[1], new_head[0]] = 1
        self.steps += 1

        if new_head == self.food:
            self.score += SCORE_FOR_FOOD
            self.food = self._spawn_food()
        else:
            tail = self._snake.pop()
            self.grid[tail[1], tail[0]] = 0

    def _spawn_food(self):
        """Случайная позиция для еды согласно food_policy"""
        if self.food_policy == "faithful":
            x, y = self.rng.integers(0, self.grid_size, size=2)
            return (int(x), int(y))

        empty = np.argwhere(self.grid == 0)
        if len(empty) == 0:
            return None  # свободных клеток нет
        y, x = empty[self.rng.integers(len(empty))]
        return (int(x), int(y))

    def is_win(self):
        """Победа = змейка заполнила всё поле"""
        return len(self._snake) >= self.grid_size * self.grid_size

    def snapshot(self):
        return GameState(
            snake=tuple(self._snake),
            food=self.food,
            direction=self.direction,
            is_game_over=self.is_game_over,
            is_paused=self.is_paused,
            score=self.score,
            high_score=self.high_score,
            steps=self.steps,
            grid_size=self.grid_size,
        )
