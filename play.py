"""
Змейка в окне pygame.

Использование:
    python play.py

Управление: стрелки или WASD, R - заново после проигрыша, ESC - выход.
"""
import sys
import pygame
from game import SnakeGame
from highscore import HighscoreStore
from config import (WIDTH, HEIGHT, BLOCK, FPS, CAPTION, HEAD, SNAKE, FOOD,
                    BACKGROUND, TEXT_COLOR, KEY_BINDINGS, RESTART_KEY, QUIT_KEY,
                    FONT_PATHS, SCORE_FONT_SIZE, INFO_FONT_SIZE)

KEYS = {getattr(pygame, name): direction for name, direction in KEY_BINDINGS.items()}


def key_to_direction(key):
    """Код клавиши pygame -> направление (или None)"""
    return KEYS.get(key)


def cell_to_rect(cell):
    x, y = cell
    return pygame.Rect(x * BLOCK, y * BLOCK, BLOCK - 1, BLOCK - 1)


def hud_text(score, highscore):
    return f"Score: {score}  High: {highscore}"


def load_font(size, paths=FONT_PATHS):
    """Первый шрифт, который удалось открыть. Нет ни одного - None"""
    for path in paths:
        try:
            return pygame.font.Font(path, size)
        except (FileNotFoundError, OSError):
            continue
    return None


class SnakeApp:
    def __init__(self, game=None):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()

        self.score_font = load_font(SCORE_FONT_SIZE)
        self.info_font = load_font(INFO_FONT_SIZE)
        if self.score_font is None:
            print(f"No font found ({', '.join(FONT_PATHS)}) - playing without text")

        self.game = game or SnakeGame(store=HighscoreStore())
        print(f"Highscore: {self.game.highscore}")

    def handle_event(self, event):
        """Одно событие pygame. False - пора выходить"""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == getattr(pygame, QUIT_KEY):
                return False
            if not self.game.game_over:
                direction = key_to_direction(event.key)
                if direction is not None:
                    self.game.set_direction(direction)
            elif event.key == getattr(pygame, RESTART_KEY):
                self.game.reset()

        return True

    def draw(self):
        self.screen.fill(BACKGROUND)

        # Еда (на полном поле её нет)
        if self.game.food is not None:
            pygame.draw.rect(self.screen, FOOD, cell_to_rect(self.game.food))

        # Змейка
        for i, cell in enumerate(self.game.body):
            color = HEAD if i == 0 else SNAKE  # Голова ярче
            pygame.draw.rect(self.screen, color, cell_to_rect(cell))

        # Счёт
        if self.score_font is not None:
            text = hud_text(self.game.score, self.game.highscore)
            self.screen.blit(self.score_font.render(text, True, TEXT_COLOR), (6, 6))

        if self.game.game_over and self.info_font is not None:
            text = self.info_font.render("Game Over! Press R to restart", True, TEXT_COLOR)
            self.screen.blit(text, (8, HEIGHT // 2 - 30))

        pygame.display.flip()

    def run(self):
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            dt = self.clock.tick(FPS) / 1000.0
            self.game.update(dt)
            self.draw()

        pygame.quit()
        return 0


def main():
    return SnakeApp().run()


if __name__ == "__main__":
    sys.exit(main())
