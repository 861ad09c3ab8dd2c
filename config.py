# Настройки игры
# Поле 20x20 клеток
GRID_SIZE = 20

# Размер клетки в пикселях (только для отрисовки)
CELL_SIZE = 20
PANEL_WIDTH = 200

# Цвета
INDIGO = (49, 46, 129)
GREEN = (74, 222, 128)
DARK_GREEN = (34, 160, 80)
RED = (248, 113, 113)
GRAY = (60, 60, 80)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (250, 204, 21)

SNAKE = DARK_GREEN
HEAD = GREEN
FOOD = RED
GRID = GRAY
BACKGROUND = INDIGO
TEXT_COLOR = WHITE

# Направления (dx, dy)
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Скорость: один шаг змейки раз в 150 мс
TICK_INTERVAL_MS = 150
FPS = 60

# Стартовая позиция
INITIAL_SNAKE = [(10, 10)]
INITIAL_FOOD = (15, 15)
INITIAL_DIRECTION = RIGHT

# Очки за еду
SCORE_FOR_FOOD = 10

# Размещение еды: "resample" - только на свободные клетки,
# "faithful" - один случайный бросок по всему полю (еда может попасть под змейку)
FOOD_POLICY = "resample"
FOOD_POLICIES = ("resample", "faithful")
