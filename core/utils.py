"""
core/utils.py

Общие константы и утилиты для досок Peg Solitaire.
"""

from enum import Enum


class Cell(Enum):
    """Состояние клетки доски. Значение — символ текстового формата."""
    PEG = '1'       # Колышек
    HOLE = '0'      # Пустое место (можно прыгнуть)
    BLOCKED = ' '   # Клетка вне доски


# Символ текстового формата → клетка
CHAR_TO_CELL = {cell.value: cell for cell in Cell}

# Максимум активных клеток: состояние упаковано в 64-битное число
MAX_ACTIVE_POSITIONS = 64


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"

