"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Загрузку описаний досок (файлы, стандартные раскладки)
- Визуализацию доски и решений
"""

from .parser import (
    ENGLISH_LAYOUT, EXPANDED_LAYOUT, PRESETS,
    parse_layout, english_board, preset_board, load_layout
)
from .visualizer import display_board, format_move, format_solution, print_moves

__all__ = [
    'ENGLISH_LAYOUT',
    'EXPANDED_LAYOUT',
    'PRESETS',
    'parse_layout',
    'english_board',
    'preset_board',
    'load_layout',
    'display_board',
    'format_move',
    'format_solution',
    'print_moves'
]
