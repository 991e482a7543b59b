"""
Логика змейки на сетке COLS x ROWS.

Здесь нет ничего от pygame: только состояние игры и правила.
Окно, клавиши и отрисовка живут в play.py.

Клетка = кортеж (x, y), голова змейки = body[0].
"""
from collections import deque

import numpy as np

from config import (COLS, ROWS, RIGHT, DIRECTIONS, SCORE_FOR_FOOD,
                    INITIAL_MOVE_DELAY, MIN_MOVE_DELAY, SPEEDUP_FACTOR)


class Snake:
    """Тело змейки, направление и флаг роста"""

    def __init__(self, start, direction=RIGHT):
        self.body = deque([start])
        self.direction = direction
        self.grow = False

    @property
    def head(self):
        return self.body[0]

    def next_head(self):
        x, y = self.body[0]
        dx, dy = self.direction
        return (x + dx, y + dy)

    def move(self):
        """Шаг вперёд: новая голова, хвост убираем (если не растём)"""
        self.body.appendleft(self.next_head())
        if self.grow:
            self.grow = False
        else:
            self.body.pop()

    def hits_self(self):
        head = self.body[0]
        for i in range(1, len(self.body)):
            if self.body[i] == head:
                return True
        return False

    def __len__(self):
        return len(self.body)


def spawn_food(body, cols, rows, rng):
    """
    Случайная свободная клетка для еды.

    Перебираем случайные клетки, пока не попадём в свободную.
    Если поле заполнено целиком - возвращаем None.
    """
    if len(body) >= cols * rows:
        return None
    occupied = set(body)
    while True:
        cell = (int(rng.integers(cols)), int(rng.integers(rows)))
        if cell not in occupied:
            return cell


def is_opposite(a, b):
    return a[0] == -b[0] and a[1] == -b[1]


class SnakeGame:
    """
    Состояние одной партии: змейка, еда, счёт, скорость, конец игры.

    Внешний код вызывает update(dt) каждый кадр и set_direction()
    на нажатия клавиш, а для отрисовки читает body, food, score,
    highscore и game_over.

    rng - numpy.random.Generator; можно подсунуть свой для тестов
    (или передать seed). store - HighscoreStore, из него берётся
    рекорд при старте и туда же пишется новый рекорд.
    """

    def __init__(self, cols=None, rows=None, rng=None, seed=None, store=None):
        self.cols = COLS if cols is None else cols
        self.rows = ROWS if rows is None else rows
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"Bad grid size: {self.cols}x{self.rows}")

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.store = store
        self.highscore = store.load() if store is not None else 0
        self.reset()

    def reset(self):
        """Новая партия (рекорд сохраняется)"""
        self.snake = Snake((self.cols // 2, self.rows // 2))
        self.score = 0
        self.move_delay = INITIAL_MOVE_DELAY
        self.acc = 0.0
        self.game_over = False
        self.new_record = False
        self.food = spawn_food(self.snake.body, self.cols, self.rows, self.rng)

    def set_direction(self, new_dir):
        """
        Поворот. Разворот на 180 градусов запрещён, после конца игры
        и на мусорный ввод ничего не делаем.
        """
        if self.game_over:
            return False
        # Только кортежи: numpy-массив на == отвечает массивом
        if not isinstance(new_dir, tuple) or new_dir not in DIRECTIONS:
            return False
        # (0.0, -1.0) == UP, но в клетках нужны целые
        new_dir = DIRECTIONS[DIRECTIONS.index(new_dir)]
        if is_opposite(new_dir, self.snake.direction):
            return False
        self.snake.direction = new_dir
        return True

    def update(self, dt):
        """
        Накопить dt секунд и сделать ход, если пора.
        Лишнее время не теряем - вычитаем move_delay, а не обнуляем.
        """
        if self.game_over:
            return False
        self.acc += dt
        if self.acc < self.move_delay:
            return False
        self.acc -= self.move_delay
        return self.tick()

    def tick(self):
        """Один ход змейки"""
        if self.game_over:
            return False

        self.snake.move()
        x, y = self.snake.head

        # Стены
        if x < 0 or x >= self.cols or y < 0 or y >= self.rows:
            self._finish()
            return True

        # Хвост уже убран, так что в освободившуюся клетку ходить можно
        if self.snake.hits_self():
            self._finish()
            return True

        # Еда
        if self.snake.head == self.food:
            self.snake.grow = True
            self.score += SCORE_FOR_FOOD
            self.move_delay = max(MIN_MOVE_DELAY, self.move_delay * SPEEDUP_FACTOR)
            self.food = spawn_food(self.snake.body, self.cols, self.rows, self.rng)

        return True

    def _finish(self):
        self.game_over = True
        if self.score > self.highscore:
            self.highscore = self.score
            self.new_record = True
            print(f"New highscore: {self.score}")
            if self.store is not None:
                self.store.save(self.score)

    @property
    def head(self):
        return self.snake.head

    @property
    def body(self):
        return list(self.snake.body)

    @property
    def direction(self):
        return self.snake.direction

    @property
    def length(self):
        return len(self.snake)

    def is_full(self):
        """Змейка заняла всё поле"""
        return len(self.snake) >= self.cols * self.rows
