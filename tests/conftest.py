import os

# Окно pygame в тестах не нужно
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from game import SnakeGame
from highscore import HighscoreStore


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def game(rng):
    return SnakeGame(rng=rng)


@pytest.fixture
def store(tmp_path):
    return HighscoreStore(tmp_path / "highscore.txt")
