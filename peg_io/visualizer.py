"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import Callable, List, Optional

from core.board import Board
from core.moves import Move
from core.utils import Cell, index_to_pos

# Символы для отображения
SYMBOLS = {
    Cell.PEG: '●',
    Cell.HOLE: '○',
    Cell.BLOCKED: ' ',
}


def display_board(board: Board) -> str:
    """
    Красиво форматирует доску: буквы столбцов, номера строк.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    cols = board.col_count
    header = "   " + " ".join(chr(c + ord('A')) for c in range(cols))
    lines = [header]

    for r, row in enumerate(board.render().split('\n')):
        cells = " ".join(SYMBOLS[Cell(ch)] for ch in row)
        lines.append(f"{r + 1:<2} {cells}".rstrip())

    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в нотации «D2 ↓»."""
    row, col = move.pos
    return f"{index_to_pos(row, col)} {move.direction.arrow}"


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        target = move.target()
        lines.append(
            f"  {i:2}. {format_move(move)} ({index_to_pos(*move.pos)} → {index_to_pos(*target)})"
        )

    return "\n".join(lines)


def print_moves(board: Board, moves: List[Move],
                printer: Callable[[str], None] = print) -> Board:
    """
    Показывает развитие партии: доску после каждого хода.

    Args:
        board: начальная позиция (не изменяется)
        moves: ходы
        printer: куда выводить

    Returns:
        Доска после последнего применённого хода
    """
    current = board.copy()
    for i, move in enumerate(moves, 1):
        if not current.apply_move(move):
            printer(f"{i:2}. {format_move(move)}: недопустимый ход")
            break
        printer(f"{i:2}. {format_move(move)}")
        printer(current.render())
        printer("")
    return current
