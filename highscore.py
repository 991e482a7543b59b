"""
Хранение рекорда: одно целое число в текстовом файле.
"""
import re
from pathlib import Path

from config import HIGHSCORE_PATH


class HighscoreStore:
    def __init__(self, path=HIGHSCORE_PATH):
        self.path = Path(path)

    def load(self):
        """Прочитать рекорд. Нет файла или мусор внутри - рекорд 0"""
        try:
            text = self.path.read_text()
        except (OSError, UnicodeDecodeError):
            return 0

        # Как operator>> в C++: пробелы пропускаем, берём цифры в начале
        match = re.match(r"\s*([+-]?\d+)", text)
        if match is None:
            print(f"Highscore file {self.path} is corrupted, starting from 0")
            return 0
        return max(0, int(match.group(1)))

    def save(self, score):
        """Записать рекорд поверх старого. Не получилось - не страшно"""
        try:
            self.path.write_text(str(int(score)))
        except OSError as e:
            print(f"Could not save highscore to {self.path}: {e}")
            return False
        print(f"Saved highscore {score} -> {self.path}")
        return True
