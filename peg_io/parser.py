"""
peg_io/parser.py

Загрузка описаний досок: стандартные раскладки и файлы.
"""

from typing import Dict

from core.board import Board

ENGLISH_LAYOUT = (
    "  111  \n"
    "  111  \n"
    "1111111\n"
    "1110111\n"
    "1111111\n"
    "  111  \n"
    "  111  "
)

# Несимметричное расширение английской доски (39 клеток)
EXPANDED_LAYOUT = (
    "  111   \n"
    "  111   \n"
    "  111   \n"
    "11111111\n"
    "11101111\n"
    "11111111\n"
    "  111   \n"
    "  111   "
)

PRESETS: Dict[str, str] = {
    'english': ENGLISH_LAYOUT,
    'expanded': EXPANDED_LAYOUT,
    'line': "11010101010",
    'square': "0010\n0010\n0000\n0000",
}


def parse_layout(text: str) -> Board:
    """
    Строит доску из текста.

    Raises:
        InvalidLayoutError: если описание некорректно
    """
    return Board(text)


def english_board() -> Board:
    """Стандартная английская доска 7x7 с пустым центром."""
    return Board(ENGLISH_LAYOUT)


def preset_board(name: str) -> Board:
    """
    Доска из набора PRESETS.

    Raises:
        KeyError: неизвестное имя
    """
    return Board(PRESETS[name])


def load_layout(path: str) -> str:
    """
    Читает описание доски из файла (UTF-8).

    Один завершающий перевод строки отбрасывается, пробелы в конце
    строк сохраняются — они задают клетки вне доски.
    """
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    if text.endswith('\r\n'):
        return text[:-2]
    if text.endswith('\n'):
        return text[:-1]
    return text
