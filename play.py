"""
Игра в змейку с клавиатуры.

Использование:
    python play.py                        # Обычная игра
    python play.py --tick-ms 100          # Быстрее
    python play.py --food-policy faithful # Еда может появиться под змейкой
"""
import argparse

import pygame

from game import SnakeGame
from controls import Command, CommandQueue, command_for_key
from config import (
    CELL_SIZE, PANEL_WIDTH, TICK_INTERVAL_MS, FPS,
    FOOD_POLICY, FOOD_POLICIES,
    BACKGROUND, SNAKE, HEAD, FOOD, GRID, BLACK, TEXT_COLOR, RED, YELLOW,
)

TICK_EVENT = pygame.USEREVENT + 1


class SnakePlayer:
    def __init__(self, game, tick_ms=TICK_INTERVAL_MS):
        pygame.init()

        self.game = game
        self.tick_ms = tick_ms
        self.commands = CommandQueue()

        size = game.grid_size * CELL_SIZE
        self.board = size
        self.screen = pygame.display.set_mode((size + PANEL_WIDTH, size))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28)

    def draw(self, state):
        self.screen.fill(BACKGROUND)

        # Сетка
        for x in range(0, self.board, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, self.board))
        for y in range(0, self.board, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (self.board, y))

        # Еда
        if state.food is not None:
            fx, fy = state.food
            rect = pygame.Rect(fx * CELL_SIZE, fy * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)
            pygame.draw.rect(self.screen, FOOD, rect)

        # Змейка (голова ярче)
        for i, (x, y) in enumerate(state.snake):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)
            pygame.draw.rect(self.screen, HEAD if i == 0 else SNAKE, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        self.draw_stats(state)

        if state.is_game_over:
            self.draw_banner("Game Over!", RED)
        elif state.is_paused:
            self.draw_banner("Paused", YELLOW)

        pygame.display.flip()

    def draw_stats(self, state):
        """Панель статистики"""
        panel = pygame.Rect(self.board, 0, PANEL_WIDTH, self.board)
        pygame.draw.rect(self.screen, (40, 40, 40), panel)

        stats = [
            f"Score: {state.score}",
            f"High Score: {state.high_score}",
            f"Length: {len(state.snake)}",
            f"Steps: {state.steps}",
            "",
            "Controls:",
            "Arrows Move",
            "SPACE Start/Pause",
            "R Reset",
            "ESC Quit",
        ]

        for i, text in enumerate(stats):
            surf = self.font.render(text, True, TEXT_COLOR)
            self.screen.blit(surf, (self.board + 10, 20 + i * 25))

    def draw_banner(self, text, color):
        surf = self.big_font.render(text, True, color)
        rect = surf.get_rect(center=(self.board // 2, self.board // 2))
        self.screen.blit(surf, rect)

    def handle_events(self):
        """Перевод событий pygame в команды. False = выход"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == TICK_EVENT:
                self.commands.put(Command.TICK)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                command = command_for_key(event.key)
                if command is not None:
                    self.commands.put(command)
        return True

    def play(self):
        pygame.time.set_timer(TICK_EVENT, self.tick_ms)
        try:
            running = True
            while running:
                running = self.handle_events()
                self.commands.drain(self.game)
                self.draw(self.game.snapshot())
                self.clock.tick(FPS)
        finally:
            pygame.time.set_timer(TICK_EVENT, 0)
            pygame.quit()

        print(f"Score: {self.game.score}")
        print(f"High Score: {self.game.high_score}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--tick-ms", "-t", type=int, default=TICK_INTERVAL_MS,
                        help="Milliseconds between snake moves")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--food-policy", choices=FOOD_POLICIES, default=FOOD_POLICY,
                        help="resample: food only on free cells; faithful: any cell")
    args = parser.parse_args(argv)

    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    game = SnakeGame(food_policy=args.food_policy, seed=args.seed)
    print(f"Grid {game.grid_size}x{game.grid_size}, tick {args.tick_ms} ms, "
          f"food policy: {args.food_policy}")

    SnakePlayer(game, tick_ms=args.tick_ms).play()


if __name__ == "__main__":
    main()
