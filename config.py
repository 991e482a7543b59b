# Настройки игры
# Поле 40x30 клеток по 20 пикселей = окно 800x600
BLOCK = 20    # размер клетки в пикселях

# Сетка
COLS = 40     # ширина поля в клетках
ROWS = 30     # высота поля в клетках
WIDTH = COLS * BLOCK
HEIGHT = ROWS * BLOCK

# Цвета
GREEN = (0, 255, 0)
DARK_GREEN = (0, 180, 0)
RED = (255, 0, 0)
DARK_GRAY = (30, 30, 30)
WHITE = (255, 255, 255)

HEAD = GREEN
SNAKE = DARK_GREEN
FOOD = RED
BACKGROUND = DARK_GRAY
TEXT_COLOR = WHITE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Управление (имена констант pygame)
KEY_BINDINGS = {
    "K_UP": UP, "K_w": UP,
    "K_DOWN": DOWN, "K_s": DOWN,
    "K_LEFT": LEFT, "K_a": LEFT,
    "K_RIGHT": RIGHT, "K_d": RIGHT,
}
RESTART_KEY = "K_r"
QUIT_KEY = "K_ESCAPE"

# Скорость
FPS = 60                  # ограничение кадров
INITIAL_MOVE_DELAY = 0.12 # секунд между ходами
MIN_MOVE_DELAY = 0.03     # быстрее не бывает
SPEEDUP_FACTOR = 0.95     # ускорение за каждое яблоко

# Очки за еду
SCORE_FOR_FOOD = 10

# Файлы
HIGHSCORE_PATH = "highscore.txt"
FONT_PATHS = ("assets/arial.ttf", "arial.ttf")
SCORE_FONT_SIZE = 18
INFO_FONT_SIZE = 28

CAPTION = "Snake (pygame)"
