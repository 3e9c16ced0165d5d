"""
solutions/verify.py

Проверка решений: воспроизведение ходов на копии начальной доски.
"""

from typing import Iterable, List

from core.board import Board
from core.moves import Move
from core.utils import index_to_pos
from utils.error_handling import InvalidMoveError


def replay_moves(board: Board, moves: Iterable[Move]) -> Board:
    """
    Применяет ходы к копии доски.

    Args:
        board: начальная позиция (не изменяется)
        moves: последовательность ходов

    Returns:
        Доска после всех ходов

    Raises:
        InvalidMoveError: если какой-то ход недопустим
    """
    result = board.copy()
    for i, move in enumerate(moves, 1):
        if not result.apply_move(move):
            row, col = move.pos
            raise InvalidMoveError(
                f"Ход {i} ({index_to_pos(row, col)} {move.direction.name}) недопустим"
            )
    return result


def verify_solution(board: Board, moves: List[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим на доске, полученной предыдущими ходами;
    - после всех ходов остаётся ровно один колышек.
    """
    try:
        final = replay_moves(board, moves)
    except InvalidMoveError:
        return False
    return final.peg_count() == 1
